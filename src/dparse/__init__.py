"""
dparse - parser for DTrace probe specifiers (provider:module:function:action).
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.errors import (
    DparseError,
    IncompleteError,
    MalformedError,
    ParseError,
    SourceError,
)
from .core.specifier import ProbeSpecifier, parse_specifier, render_specifier


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("dparse")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "DparseError",
    "IncompleteError",
    "MalformedError",
    "ParseError",
    "ProbeSpecifier",
    "SourceError",
    "parse_specifier",
    "render_specifier",
]
