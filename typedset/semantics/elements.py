"""Element kind registry.

Scripts can only name element kinds that are registered here. A kind
carries its Python factory and positional fields so the checker can
validate constructor calls and the interpreter can build values.

The table also answers perk queries ("does type X implement Element?"),
which is what Set<T> constraints are validated against. Builtin script
types are known but implement no perks.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set, Tuple

from typedset.core import Address, MyString
from typedset.semantics.typesys import BuiltinType, Type, BUILTIN_BY_NAME

ELEMENT_PERK = "Element"


@dataclass(frozen=True)
class ElementKind:
    name: str
    factory: Callable[..., Any]
    fields: Tuple[Tuple[str, Type], ...]
    # Script primitive that converts implicitly, e.g. "a" where a MyString is expected
    coerces_from: Optional[BuiltinType] = None

    def build(self, *values: Any) -> Any:
        return self.factory(*values)


@dataclass
class ElementTable:
    """Registry of element kinds and the perks they implement."""
    by_name: Dict[str, ElementKind] = field(default_factory=dict)
    # Key: type name, Value: implemented perk names
    perks: Dict[str, Set[str]] = field(default_factory=dict)

    def register(self, kind: ElementKind) -> bool:
        """Register an element kind. Returns False if duplicate."""
        if kind.name in self.by_name or kind.name in BUILTIN_BY_NAME:
            return False
        self.by_name[kind.name] = kind
        self.perks.setdefault(kind.name, set()).add(ELEMENT_PERK)
        return True

    def get(self, name: str) -> Optional[ElementKind]:
        return self.by_name.get(name)

    def is_known(self, type_name: str) -> bool:
        return type_name in self.by_name or type_name in BUILTIN_BY_NAME

    def implements(self, type_name: str, perk_name: str) -> bool:
        """Check if a type implements a perk."""
        return perk_name in self.perks.get(type_name, set())


def default_element_table() -> ElementTable:
    table = ElementTable()
    table.register(ElementKind(
        name="MyString",
        factory=MyString,
        fields=(("value", BuiltinType.STRING),),
        coerces_from=BuiltinType.STRING,
    ))
    table.register(ElementKind(
        name="Address",
        factory=Address,
        fields=(
            ("name", BuiltinType.STRING),
            ("street", BuiltinType.STRING),
            ("zip", BuiltinType.INT),
        ),
    ))
    return table
