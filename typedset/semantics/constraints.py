"""
Generic constraint validation.

Validates that concrete types satisfy perk constraints when a generic
type is instantiated.

Example:
    let s = Set<int>()

    # Set<E> requires E: Element
    # - int is a builtin without the Element perk
    # - Emits CE4006
"""
from __future__ import annotations
from typing import List, Optional

from typedset.internals import errors as er
from typedset.internals.report import Reporter, Span
from typedset.semantics.elements import ELEMENT_PERK, ElementTable
from typedset.semantics.typesys import Type

# Type parameter constraints of the generic types scripts can instantiate
GENERIC_CONSTRAINTS = {
    "Set": [ELEMENT_PERK],
}


class ConstraintValidator:
    """Validates perk constraints on generic type arguments."""

    def __init__(self, element_table: ElementTable, reporter: Reporter):
        self.element_table = element_table
        self.reporter = reporter

    def validate_constraint(self, type_arg: Type, constraint_name: str,
                            span: Optional[Span]) -> bool:
        """Check if a type satisfies a single perk constraint.

        Args:
            type_arg: Concrete type being checked (e.g., int, Address)
            constraint_name: Perk name (e.g., "Element")
            span: Source location for error reporting

        Returns:
            True if constraint is satisfied, False otherwise
        """
        type_name = str(type_arg)
        if not self.element_table.implements(type_name, constraint_name):
            er.emit(self.reporter, er.ERR.CE4006, span,
                    type=type_name, perk=constraint_name)
            return False
        return True

    def validate_all_constraints(self, generic_name: str, type_arg: Type,
                                 span: Optional[Span]) -> bool:
        """Check every constraint of a generic type. Reports each failure."""
        constraints: List[str] = GENERIC_CONSTRAINTS.get(generic_name, [])
        ok = True
        for constraint in constraints:
            if not self.validate_constraint(type_arg, constraint, span):
                ok = False
        return ok
