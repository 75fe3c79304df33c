"""
Core data structure.

Exports:
    Set: Generic unordered collection of distinct elements
    Element: Protocol describing storable values
    ElementConstraintError: Raised for values that cannot be stored
    MyString, Address: Reference element types
"""
from typedset.core.element import (
    Element,
    ElementConstraintError,
    require_element,
    satisfies_element,
)
from typedset.core.examples import Address, MyString
from typedset.core.set import Set

__all__ = [
    'Address',
    'Element',
    'ElementConstraintError',
    'MyString',
    'Set',
    'require_element',
    'satisfies_element',
]
