"""Lark parser setup and AST construction."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, TextIO, Tuple

from lark import Lark, Tree, UnexpectedInput

from typedset.semantics.ast import Program
from typedset.semantics.ast_builder import ASTBuilder

GRAMMAR_PATH = Path(__file__).parent.parent / "grammar.lark"


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    return Lark.open(
        str(GRAMMAR_PATH),
        parser="lalr",
        propagate_positions=True,
        maybe_placeholders=False,
    )


def improve_parse_error(e: UnexpectedInput) -> str:
    """Improve parsing error messages for common cases."""
    error_text = str(e)
    token = getattr(e, "token", None)

    if token is not None and token.type == "$END":
        return f"{error_text}\nParsing error: unexpected end of input.\nHint: check for an unclosed '(' or string."

    if token is not None and token.type == "EQUAL":
        return f"{error_text}\nParsing error: assignment needs 'let'.\nHint: Use 'let name = ...' to bind a value."

    return error_text


def parse_to_ast(src: str, dump_parse: bool = False,
                 stream: Optional[TextIO] = None) -> Tuple[Program, Tree]:
    """Parse source code into an AST.

    A missing trailing newline is tolerated here; the CLI reports it as
    a warning. With dump_parse the tree is printed to stream (stdout by
    default).

    Returns:
        Tuple of (ast, parse_tree).
    """
    if not src.endswith('\n'):
        src += '\n'
    tree = get_parser().parse(src)
    if dump_parse:
        print(tree.pretty(), file=stream)

    return ASTBuilder().build(tree), tree
