"""ASTBuilder: turns Lark parse trees of set scripts into AST nodes."""
from __future__ import annotations
from typing import Callable, Dict, List, Optional

from lark import Token, Tree

from typedset.internals.report import span_of
from typedset.semantics.ast import (
    BoolLit, Expr, ExprStmt, IntLit, Let, MethodCall, Name, Print, Program,
    RecordNew, SetNew, Stmt, StringLit,
)
from typedset.semantics.ast_builder.exceptions import LeadingZeroIntError
from typedset.semantics.ast_builder.strings import parse_string_token


def _names(children: List[object]) -> List[Token]:
    return [c for c in children if isinstance(c, Token) and c.type == "NAME"]


def _first_tree(children: List[object], data: str) -> Optional[Tree]:
    for ch in children:
        if isinstance(ch, Tree) and ch.data == data:
            return ch
    return None


class ASTBuilder:
    def __init__(self):
        self._stmt_parsers: Dict[str, Callable[[Tree], Stmt]] = {
            "let_stmt": self._let,
            "print_stmt": self._print,
            "call_stmt": self._call_stmt,
        }
        self._expr_parsers: Dict[str, Callable[[Tree], Expr]] = {
            "call": self._call,
            "set_new": self._set_new,
            "record": self._record,
            "name": self._name,
            "string": self._string,
            "int": self._int,
            "bool": self._bool,
        }

    def build(self, tree: Tree) -> Program:
        statements = [self._stmt(ch) for ch in tree.children if isinstance(ch, Tree)]
        return Program(loc=span_of(tree), statements=statements)

    # ------------------------
    # Statements
    # ------------------------

    def _stmt(self, node: Tree) -> Stmt:
        parser = self._stmt_parsers.get(node.data)
        if parser is None:
            raise NotImplementedError(f"unknown statement '{node.data}'")
        return parser(node)

    def _let(self, node: Tree) -> Let:
        """let_stmt: LET NAME "=" expr"""
        nm = _names(node.children)[0]
        return Let(
            name=str(nm),
            value=self._expr(self._expr_child(node)),
            name_span=span_of(nm),
            loc=span_of(node),
        )

    def _print(self, node: Tree) -> Print:
        return Print(value=self._expr(self._expr_child(node)), loc=span_of(node))

    def _call_stmt(self, node: Tree) -> ExprStmt:
        return ExprStmt(expr=self._call(node.children[0]), loc=span_of(node))

    # ------------------------
    # Expressions
    # ------------------------

    def _expr_child(self, node: Tree) -> Tree:
        for ch in node.children:
            if isinstance(ch, Tree) and ch.data in self._expr_parsers:
                return ch
        raise NotImplementedError(f"{node.data}: expression missing")

    def _expr(self, node: Tree) -> Expr:
        return self._expr_parsers[node.data](node)

    def _args(self, node: Tree) -> List[Expr]:
        args = _first_tree(node.children, "args")
        if args is None:
            return []
        return [self._expr(ch) for ch in args.children if isinstance(ch, Tree)]

    def _call(self, node: Tree) -> MethodCall:
        """call: NAME "." NAME "(" [args] ")" """
        receiver, method = _names(node.children)[:2]
        return MethodCall(
            receiver=Name(id=str(receiver), loc=span_of(receiver)),
            method=str(method),
            args=self._args(node),
            method_span=span_of(method),
            loc=span_of(node),
        )

    def _set_new(self, node: Tree) -> SetNew:
        """set_new: SET "<" NAME ">" "(" [args] ")" """
        type_tok = _names(node.children)[0]
        return SetNew(
            element_type=str(type_tok),
            args=self._args(node),
            type_span=span_of(type_tok),
            loc=span_of(node),
        )

    def _record(self, node: Tree) -> RecordNew:
        type_tok = _names(node.children)[0]
        return RecordNew(type_name=str(type_tok), args=self._args(node), loc=span_of(node))

    def _name(self, node: Tree) -> Name:
        tok = node.children[0]
        return Name(id=str(tok), loc=span_of(tok))

    def _string(self, node: Tree) -> StringLit:
        tok = node.children[0]
        return StringLit(value=parse_string_token(str(tok)), loc=span_of(tok))

    def _int(self, node: Tree) -> IntLit:
        tok = node.children[0]
        digits = tok.value.lstrip("+-")
        # Reject leading zeros (zip codes like 01234 would silently lose them)
        if len(digits) > 1 and digits[0] == '0':
            raise LeadingZeroIntError(tok.value, span=span_of(tok))
        return IntLit(value=int(tok.value), loc=span_of(tok))

    def _bool(self, node: Tree) -> BoolLit:
        tok = node.children[0]
        return BoolLit(value=tok.type == "TRUE", loc=span_of(tok))
