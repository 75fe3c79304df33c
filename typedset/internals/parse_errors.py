"""Shared parse exception handling for the CLI and library callers."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from lark import UnexpectedInput

from typedset.internals import errors as er
from typedset.internals.report import Reporter
from typedset.semantics.ast_builder import LeadingZeroIntError


def handle_parse_exception(exc: Exception, reporter: Reporter, source_path=None,
                           stream: Optional[TextIO] = None) -> bool:
    """Handle a parse exception by emitting diagnostics through the reporter.

    Args:
        exc: The exception to handle.
        reporter: Reporter for error/warning collection.
        source_path: Optional path for context in UnexpectedInput errors.
        stream: Where raw lark errors are printed (default: sys.stderr).

    Returns:
        True if the exception was handled, False otherwise.
    """
    from typedset.internals.parser import improve_parse_error

    if isinstance(exc, LeadingZeroIntError):
        value = exc.literal.lstrip('+-').lstrip('0') or '0'
        er.emit(reporter, er.ERR.CE2071, exc.span, literal=exc.literal, value=value)
        return True

    if isinstance(exc, UnexpectedInput):
        stream = stream or sys.stderr
        if source_path:
            print(f"Parse error in {source_path}:", file=stream)
        print(improve_parse_error(exc), file=stream)
        return True

    return False
