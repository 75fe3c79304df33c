"""Script file resolution."""
from __future__ import annotations

import os
from pathlib import Path


def get_effective_cwd() -> Path:
    """Get the effective current working directory for file resolution.

    Checks the TYPEDSET_CWD environment variable first so wrapper scripts
    can run the CLI from elsewhere. Otherwise falls back to os.getcwd().
    """
    typedset_cwd = os.environ.get('TYPEDSET_CWD')
    if typedset_cwd:
        return Path(typedset_cwd)
    return Path.cwd()


def resolve_source_path(source: str) -> Path:
    src_path = Path(source)
    if not src_path.is_absolute():
        src_path = get_effective_cwd() / src_path
    return src_path.resolve()
