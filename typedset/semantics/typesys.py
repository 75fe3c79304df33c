from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class BuiltinType(Enum):
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    BLANK = "~"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ElementType:
    """A registered element kind (MyString, Address, ...)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SetType:
    element: "Type"

    def __str__(self) -> str:
        return f"Set<{self.element}>"


@dataclass(frozen=True)
class SliceType:
    """Result of Set.slice(): an independent list of elements."""
    element: "Type"

    def __str__(self) -> str:
        return f"{self.element}[]"


Type = Union[BuiltinType, ElementType, SetType, SliceType]

BUILTIN_BY_NAME = {t.value: t for t in BuiltinType if t is not BuiltinType.BLANK}


def builtin_from_name(name: str) -> Optional[BuiltinType]:
    return BUILTIN_BY_NAME.get(name)
