"""
Element capability contract.

A type can be stored in a Set when its values:

- compare by value and hash consistently (they become mapping keys), and
- render themselves through ``__str__`` (used for display and ordering only).

Python has no compile-time check for this, so the Set validates every
inserted value with ``require_element`` and raises ElementConstraintError
for values that cannot serve as keys.
"""
from __future__ import annotations
from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """Structural type for values a Set can hold."""

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...

    def __str__(self) -> str: ...


class ElementConstraintError(TypeError):
    """Raised when a value does not satisfy the Element contract."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"{type(value).__name__} does not satisfy the Element contract "
            f"(values must be hashable): {value!r}"
        )


def satisfies_element(value: Any) -> bool:
    """Check whether a value can be stored in a Set.

    Every object renders through ``__str__``, so only hashability is
    tested. Classes that define ``__eq__`` without ``__hash__`` (or set it
    to None) fail here.
    """
    return isinstance(value, Hashable)


def require_element(value: Any) -> Any:
    """Return value unchanged, or raise ElementConstraintError.

    Containers such as tuples are Hashable by type but fail to hash when
    they hold an unhashable item, so the value is hashed here as well.
    """
    if not satisfies_element(value):
        raise ElementConstraintError(value)
    try:
        hash(value)
    except TypeError as exc:
        raise ElementConstraintError(value) from exc
    return value
