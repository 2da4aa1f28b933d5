"""Shared pytest fixtures for dparse tests."""

from pathlib import Path

import pytest

from dparse.core.specifier import ProbeSpecifier


@pytest.fixture
def probes_dir(tmp_path: Path) -> Path:
    """Return a directory holding a few specifier files."""
    (tmp_path / "entry.d").write_text("syscall::open:entry\n")
    (tmp_path / "empty.d").write_text(":::")
    (tmp_path / "bad.d").write_text("foo bar:::\n")
    (tmp_path / "list.txt").write_text(
        "# probes to enable\nsyscall::open:entry\n\nperl*:::*-entry\nfbt:::\n"
    )
    return tmp_path


@pytest.fixture
def full_spec() -> ProbeSpecifier:
    """Return a specifier with all four components present."""
    return ProbeSpecifier(provider="foo", module="bar", function="baz", action="wibble")
