"""typedset - a generic Set with typed elements and a small scripting driver."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("typedset")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from typedset.core import Address, Element, ElementConstraintError, MyString, Set

__all__ = [
    "Address",
    "Element",
    "ElementConstraintError",
    "MyString",
    "Set",
    "__version__",
]
