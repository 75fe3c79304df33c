"""Custom exceptions for AST building errors."""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from typedset.internals.report import Span


class LeadingZeroIntError(Exception):
    """Exception raised when an integer literal has a leading zero (e.g. zip 01234)."""
    def __init__(self, literal: str, span: Optional['Span'] = None):
        message = f"integer literal '{literal}' has a leading zero"
        super().__init__(message)
        self.literal = literal
        self.span = span
