"""Script execution pipeline: parse, check, run."""
from __future__ import annotations

from typing import Optional, TextIO

from typedset.internals import errors as er
from typedset.internals.parse_errors import handle_parse_exception
from typedset.internals.parser import parse_to_ast
from typedset.internals.report import Reporter
from typedset.runtime.interpreter import Interpreter
from typedset.semantics.checker import TypeChecker
from typedset.semantics.elements import ElementTable, default_element_table


def run_source(src: str, reporter: Reporter, out: Optional[TextIO] = None,
               err: Optional[TextIO] = None, check_only: bool = False,
               dump_parse: bool = False, dump_ast: bool = False,
               element_table: Optional[ElementTable] = None) -> int:
    """Parse, check and (unless check_only) run a script.

    Diagnostics are collected in the reporter; printing them is left to
    the caller.

    Returns:
        Exit code (0=success, 1=warnings, 2=errors).
    """
    table = element_table or default_element_table()

    try:
        ast, _tree = parse_to_ast(src, dump_parse=dump_parse, stream=out)
    except Exception as exc:
        if handle_parse_exception(exc, reporter, reporter.filename, stream=err):
            return 2
        raise

    if dump_ast:
        print(ast, file=out)
        print(file=out)

    if src and not src.endswith('\n'):
        er.emit(reporter, er.ERR.CW0001, None)

    if not TypeChecker(table, reporter).check(ast):
        return 2

    if not check_only:
        Interpreter(table, out=out).run(ast)

    return reporter.exit_code()
