"""
Generic Set over Element values.

Storage is a dict from element to a presence marker. Only present
elements are stored and the marker is always True; a missing key is the
"not in set" state. The dict is private to the Set and never handed out.

Iteration and slice() follow the dict's order. On CPython that happens to
be insertion order; callers must not rely on it. str() is the only
rendering with a defined order: element strings sorted ascending.
"""
from __future__ import annotations
from collections.abc import Iterable, Iterator, MutableSet
from typing import Dict, Generic, List, TypeVar

from typedset.core.element import Element, require_element

E = TypeVar("E", bound=Element)

SEPARATOR = ", "


class Set(MutableSet, Generic[E]):
    """Unordered collection of distinct elements.

    Example:
        >>> names = Set(MyString("b"), MyString("a"), MyString("b"))
        >>> names.size()
        2
        >>> str(names)
        'a, b'
    """

    def __init__(self, *elements: E) -> None:
        self._items: Dict[E, bool] = {}
        for element in elements:
            self.add(element)

    @classmethod
    def _from_iterable(cls, it: Iterable[E]) -> "Set[E]":
        # MutableSet operators (|, &, -, ^) build results through here
        return cls(*it)

    # ------------------------
    # Core operations
    # ------------------------

    def size(self) -> int:
        """Number of distinct elements."""
        return len(self._items)

    def add(self, element: E) -> None:
        """Insert element; no-op when already present."""
        self._items[require_element(element)] = True

    def remove(self, element: E) -> None:
        """Delete element; no-op when absent.

        Unlike the builtin set, a missing element is not an error.
        """
        self.discard(element)

    def discard(self, element: E) -> None:
        if self.contains(element):
            del self._items[element]

    def contains(self, element: E) -> bool:
        """True iff element is currently stored.

        Values that cannot be keys (unhashable) are never members.
        """
        try:
            return self._items.get(element, False)
        except TypeError:
            return False

    def slice(self) -> List[E]:
        """Fresh list of every element, in no particular order."""
        return list(self._items)

    def copy(self) -> "Set[E]":
        return self._from_iterable(self._items)

    # ------------------------
    # Collection protocol
    # ------------------------

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[E]:
        # Iterate a snapshot so add/remove inside a loop is safe
        return iter(self.slice())

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        return SEPARATOR.join(sorted(str(element) for element in self._items))

    def __repr__(self) -> str:
        inner = SEPARATOR.join(repr(element) for element in sorted(self._items, key=str))
        return f"{type(self).__name__}({inner})"
