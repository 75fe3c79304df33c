"""
AST Builder module for set scripts.

Exports:
    ASTBuilder: Builds typed AST nodes from Lark parse trees
    LeadingZeroIntError: Raised for integer literals such as 01234
"""
from typedset.semantics.ast_builder.builder import ASTBuilder
from typedset.semantics.ast_builder.exceptions import LeadingZeroIntError

__all__ = [
    'ASTBuilder',
    'LeadingZeroIntError',
]
