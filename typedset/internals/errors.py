# typedset/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from typedset.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    SCOPE     = "scope"
    TYPE      = "type"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)

def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **kwargs) -> None:
    text = _fmt(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for internal errors.

    Internal errors (CE0xxx codes) indicate toolchain bugs, not script
    issues: the checker should have rejected the program before it ran.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}") from None

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Internal errors - CE0xxx range
_add(ErrorMessage("CE0001", Severity.ERROR,
    "unknown AST node '{node}'",
    Category.INTERNAL, "Found an unexpected node while evaluating (bug or unsupported feature)."))

_add(ErrorMessage("CE0002", Severity.ERROR,
    "value of '{name}' is not a set at run time",
    Category.INTERNAL, "A method call reached the interpreter with a non-set receiver."))

# Scope errors
_add(ErrorMessage("CE1001", Severity.ERROR,
    "use of undeclared identifier '{name}'",
    Category.SCOPE, "The identifier was used before it was declared."))

_add(ErrorMessage("CE1005", Severity.ERROR,
    "identifier '{name}' already declared at {prev_loc}",
    Category.SCOPE, "Each name can be bound with 'let' only once per script."))

# Type errors
_add(ErrorMessage("CE2001", Severity.ERROR,
    "unknown type '{name}'",
    Category.TYPE, "A type name is neither a builtin type nor a registered element kind."))

_add(ErrorMessage("CE2006", Severity.ERROR,
    "argument type mismatch at position {index}: expected {expected}, got {got}",
    Category.TYPE, "A call argument type does not match the corresponding parameter type."))

_add(ErrorMessage("CE2009", Severity.ERROR,
    "method '{name}' expects {expected} arguments, got {got}",
    Category.TYPE, "Method call has wrong number of arguments."))

_add(ErrorMessage("CE2027", Severity.ERROR,
    "record '{name}' expects {expected} field(s), got {got}",
    Category.TYPE, "Record constructor must provide exact number of fields."))

_add(ErrorMessage("CE2028", Severity.ERROR,
    "field '{field_name}' expects type '{expected}', got '{got}'",
    Category.TYPE, "Record constructor field type mismatch."))

_add(ErrorMessage("CE2032", Severity.ERROR,
    "blank value (~) cannot be {usage}",
    Category.TYPE, "Methods returning blank (add, remove) produce no value to print or bind."))

_add(ErrorMessage("CE2040", Severity.ERROR,
    "unknown method '{method}' on {type}",
    Category.TYPE, "Sets support add, remove, contains, size and slice."))

_add(ErrorMessage("CE2041", Severity.ERROR,
    "'{name}' has type {type}, methods can only be called on sets",
    Category.TYPE, "Only Set values have methods in scripts."))

_add(ErrorMessage("CE2071", Severity.ERROR,
    "integer literal '{literal}' has a leading zero (it would print as {value})",
    Category.TYPE, "Leading zeros are dropped from integers, so 01234 renders as 1234. Drop the zero or keep the value as text."))

# Generic constraint errors
_add(ErrorMessage("CE4006", Severity.ERROR,
    "type {type} does not implement perk {perk} required by constraint",
    Category.TYPE, "Set<T> requires T to be an element kind (equality plus string form). Builtins int, bool and string are not."))

# Warnings
_add(ErrorMessage("CW0001", Severity.WARNING,
    "missing trailing newline", Category.GENERAL,
    "Source file should end with a newline character."))

_add(ErrorMessage("CW2001", Severity.WARNING,
    "result of '{method}' is unused", Category.TYPE,
    "Calling contains, size or slice as a statement has no effect."))
