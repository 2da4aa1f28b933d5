"""
Core of dparse: the probe specifier parser, its errors, and file loading.

Usage:
    from dparse.core import parse_specifier, render_specifier

    spec = parse_specifier("syscall::open:entry")
    render_specifier(spec)
    # "syscall::open:entry"
"""

from dparse.core.errors import (
    ConfigError,
    DparseError,
    IncompleteError,
    MalformedError,
    ParseError,
    SourceError,
)
from dparse.core.specifier import ProbeSpecifier, parse_specifier, render_specifier

__all__ = [
    "ConfigError",
    "DparseError",
    "IncompleteError",
    "MalformedError",
    "ParseError",
    "ProbeSpecifier",
    "SourceError",
    "parse_specifier",
    "render_specifier",
]
