"""
Error types for probe specifier parsing and loading.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class DparseError(Exception):
    """Base exception for all dparse errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(DparseError):
    """
    Raised when a probe specifier cannot be parsed.

    Never raised directly; see IncompleteError and MalformedError.
    """

    def __init__(
        self,
        message: str,
        position: int,
        context: Optional["ErrorContext"] = None,
    ):
        self.position = position
        super().__init__(message, context)


class IncompleteError(ParseError):
    """
    Raised when the input ends before the grammar reaches a definite result.

    Examples:
    - "foo" (no separators yet)
    - "foo:bar" (only one separator)
    """

    def __init__(
        self,
        message: str,
        position: int,
        needed: int | None = None,
        context: Optional["ErrorContext"] = None,
    ):
        self.needed = needed
        super().__init__(message, position, context)


class MalformedError(ParseError):
    """
    Raised when the input can never satisfy the grammar at some position.

    Examples:
    - A disallowed character inside a component ("foo bar:::")
    - A fourth separator ("a:b:c:d:e")
    """

    def __init__(
        self,
        message: str,
        position: int,
        expected: str,
        found: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(message, position, context)


class SourceError(DparseError):
    """
    Raised when the text to parse cannot be obtained.

    Examples:
    - Missing file
    - Permission denied
    - File is not valid UTF-8
    """

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


class ConfigError(DparseError):
    """Raised when dparse.toml holds an invalid value."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of a parse error.

    Attributes:
        file: Path of the file the text came from, if any
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional copy of the offending line
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "probes.d:1:4"
        """
        name = str(self.file) if self.file else "<input>"
        location = f"{name}:{self.line}:{self.column}"

        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with a line number and error marker."""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.snippet}\n{marker}"


def locate(text: str, position: int, first_line: int = 1) -> tuple[int, int, str]:
    """
    Translate a character offset into a line, column and the text of that line.

    Args:
        text: The full text that was parsed
        position: 0-indexed character offset
        first_line: Line number of the first line of ``text``

    Returns:
        (line, column, line_text), line and column 1-indexed
    """
    before = text[:position]
    line_start = before.rfind("\n") + 1
    line_end = text.find("\n", position)
    if line_end == -1:
        line_end = len(text)

    line = first_line + before.count("\n")
    column = position - line_start + 1
    return line, column, text[line_start:line_end]


def make_incomplete_error(
    text: str,
    position: int,
    needed: int | None,
    expected: str,
    file: Path | None = None,
    first_line: int = 1,
) -> IncompleteError:
    """
    Helper to create an IncompleteError with context.

    Args:
        text: The text being parsed
        position: Offset where more input was required
        needed: Minimum number of further characters, None if unknown
        expected: Description of what was expected
        file: Optional source file path
        first_line: Line number of the first line of ``text``

    Returns:
        IncompleteError with context attached
    """
    line, column, snippet = locate(text, position, first_line)
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    amount = f"{needed} more character(s)" if needed is not None else "more input"
    message = f"Incomplete: expected {expected}, needed {amount}"
    return IncompleteError(message, position, needed=needed, context=context)


def make_malformed_error(
    text: str,
    position: int,
    expected: str,
    file: Path | None = None,
    first_line: int = 1,
) -> MalformedError:
    """
    Helper to create a MalformedError with context.

    Args:
        text: The text being parsed
        position: Offset of the offending character
        expected: Description of what was expected
        file: Optional source file path
        first_line: Line number of the first line of ``text``

    Returns:
        MalformedError with context attached
    """
    found = text[position]
    line, column, snippet = locate(text, position, first_line)
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    message = f"Parse error: expected {expected}, found {found!r}"
    return MalformedError(message, position, expected=expected, found=found, context=context)
