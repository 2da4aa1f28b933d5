"""
Reading probe specifiers from files.

Two framings are supported:

- ``file``: the whole file content is one specifier (trailing line
  terminators are dropped). This is the historical behaviour of the tool.
- ``lines``: every non-blank, non-comment line is one specifier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from .errors import DparseError, SourceError
from .specifier import ProbeSpecifier, parse_specifier

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class SourceMode(StrEnum):
    """How the text of a file is split into specifiers."""

    FILE = "file"
    LINES = "lines"


@dataclass
class FileResult:
    """Outcome of parsing one file."""

    path: Path
    specifiers: list[ProbeSpecifier] = field(default_factory=list)
    error: DparseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_source(path: Path) -> str:
    """
    Read a file as UTF-8 text.

    Raises:
        SourceError: The file is missing, unreadable or not valid UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        reason = e.strerror or str(e)
        raise SourceError(f"I/O error: {reason}", path) from e
    except UnicodeDecodeError as e:
        raise SourceError(f"I/O error: not valid UTF-8 ({e.reason})", path) from e


def parse_source(
    text: str,
    mode: SourceMode = SourceMode.FILE,
    file: Path | None = None,
) -> list[ProbeSpecifier]:
    """
    Parse the specifiers in ``text``.

    Args:
        text: Raw file content
        mode: ``file`` for one specifier, ``lines`` for one per line
        file: Source path, used to locate errors

    Returns:
        Parsed specifiers in source order

    Raises:
        ParseError: The first specifier that fails to parse
    """
    if mode == SourceMode.FILE:
        return [parse_specifier(text.rstrip("\r\n"), file=file)]

    specifiers: list[ProbeSpecifier] = []
    # Only "\n" ends a line, as in errors.locate
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        specifiers.append(parse_specifier(line, file=file, first_line=lineno))
    return specifiers


def parse_file(path: Path, mode: SourceMode = SourceMode.FILE) -> list[ProbeSpecifier]:
    """Read ``path`` and parse the specifiers it holds."""
    text = read_source(path)
    logger.debug(f"Read {len(text)} characters from {path}")
    return parse_source(text, mode, file=path)


def parse_files(
    paths: Iterable[Path],
    mode: SourceMode = SourceMode.FILE,
    fail_fast: bool = True,
) -> Iterator[FileResult]:
    """
    Parse each file in turn.

    With ``fail_fast`` iteration stops after the first file that fails;
    otherwise every file gets a result.
    """
    for path in paths:
        try:
            yield FileResult(path=path, specifiers=parse_file(path, mode))
        except DparseError as e:
            logger.debug(f"Failed to parse {path}: {e.message}")
            yield FileResult(path=path, error=e)
            if fail_fast:
                logger.info(f"Stopping after first failure in {path}")
                return
