"""Tests for error formatting and source locations."""

from pathlib import Path

import pytest

from dparse.core.errors import (
    DparseError,
    ErrorContext,
    IncompleteError,
    MalformedError,
    SourceError,
    locate,
)
from dparse.core.specifier import parse_specifier


def test_locate_single_line():
    assert locate("foo bar:::", 3) == (1, 4, "foo bar:::")


def test_locate_second_line():
    assert locate("a\nbc d", 4) == (2, 3, "bc d")


def test_locate_with_first_line_offset():
    line, column, _ = locate("x y", 1, first_line=7)
    assert (line, column) == (7, 2)


def test_error_context_format_without_snippet():
    context = ErrorContext(file=Path("probes.d"), line=1, column=4)
    assert context.format() == "probes.d:1:4"


def test_error_context_format_with_snippet():
    context = ErrorContext(file=None, line=1, column=4, snippet="foo bar:::")
    lines = context.format().split("\n")
    assert lines[0] == "<input>:1:4"
    assert lines[1] == "   1 | foo bar:::"
    assert lines[2].index("^") == len("   1 | ") + 3


def test_malformed_message_names_offending_character():
    with pytest.raises(MalformedError) as exc_info:
        parse_specifier("foo bar:::", file=Path("probes.d"))
    message = str(exc_info.value)
    assert message.startswith("probes.d:1:4")
    assert "found ' '" in message
    assert exc_info.value.context is not None
    assert exc_info.value.context.file == Path("probes.d")


def test_incomplete_message_reports_amount_needed():
    with pytest.raises(IncompleteError) as exc_info:
        parse_specifier("foo:bar")
    assert "Incomplete" in str(exc_info.value)
    assert "1 more character" in str(exc_info.value)


def test_first_line_is_used_for_location():
    with pytest.raises(MalformedError) as exc_info:
        parse_specifier("a b:::", first_line=5)
    assert exc_info.value.context.line == 5


def test_source_error_is_not_a_parse_error():
    err = SourceError("I/O error: No such file or directory", Path("missing.d"))
    assert isinstance(err, DparseError)
    assert err.path == Path("missing.d")
    assert str(err) == "I/O error: No such file or directory"
