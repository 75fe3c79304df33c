"""Reference element types."""
from __future__ import annotations
from dataclasses import dataclass


def _expect(owner: str, field: str, value: object, kind: type) -> None:
    # bool is an int subclass but never a valid zip
    if not isinstance(value, kind) or isinstance(value, bool):
        raise TypeError(
            f"{owner}.{field} must be {kind.__name__}, got {type(value).__name__}: {value!r}"
        )


@dataclass(frozen=True)
class MyString:
    """A string that is its own element type.

    Distinct from ``str``: ``MyString("a") != "a"``, so wrapped and plain
    strings never collapse into one Set entry.
    """
    value: str

    def __post_init__(self) -> None:
        _expect("MyString", "value", self.value, str)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Postal address rendered as ``name | street | zip``."""
    name: str
    street: str
    zip: int

    def __post_init__(self) -> None:
        _expect("Address", "name", self.name, str)
        _expect("Address", "street", self.street, str)
        _expect("Address", "zip", self.zip, int)

    def __str__(self) -> str:
        return f"{self.name} | {self.street} | {self.zip}"
