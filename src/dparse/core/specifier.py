"""
Probe specifiers (e.g., ``syscall::open*:entry``).

A DTrace probe name has four optional components, separated by colons:

    provider:module:function:action

Grammar:
    specifier  → component? ":" component? ":" component? ":" component? EOF
    component  → NAME_CHAR+
    NAME_CHAR  → [A-Za-z0-9] | "-" | "_" | "*"

Components are matched greedily and never backtracked. Since ":" is not a
name character there is no ambiguity with the separator. Any component may be
empty, in which case it is represented as ``None`` rather than ``""``.
"""

from __future__ import annotations

import logging
import string
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dparse.core.errors import make_incomplete_error, make_malformed_error

logger = logging.getLogger(__name__)

NAME_CHARS = frozenset(string.ascii_letters + string.digits + "-_*")
SEPARATOR = ":"
WILDCARD = "*"


class ProbeSpecifier(BaseModel):
    """
    A parsed probe specifier.

    Examples:
        - ProbeSpecifier.parse("foo:bar:baz:wibble") → all four present
        - ProbeSpecifier.parse(":::") → all four None
        - ProbeSpecifier.parse("perl*:::*-entry") → provider and action only
    """

    provider: str | None = Field(default=None, description="Provider name")
    module: str | None = Field(default=None, description="Module name")
    function: str | None = Field(default=None, description="Function name")
    action: str | None = Field(default=None, description="Action (probe) name")

    model_config = ConfigDict(frozen=True)

    @field_validator("provider", "module", "function", "action")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not value:
            raise ValueError("name must not be empty, use None for an absent component")
        for c in value:
            if c not in NAME_CHARS:
                raise ValueError(f"disallowed character {c!r} in name {value!r}")
        return value

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        file: Path | None = None,
        first_line: int = 1,
    ) -> ProbeSpecifier:
        """Parse a ``ProbeSpecifier`` from a colon-separated string."""
        return parse_specifier(text, file=file, first_line=first_line)

    def __str__(self) -> str:
        return render_specifier(self)

    @property
    def components(self) -> tuple[str | None, str | None, str | None, str | None]:
        """The four components in order: provider, module, function, action."""
        return (self.provider, self.module, self.function, self.action)

    @property
    def is_wildcard(self) -> bool:
        """True if any present component contains a ``*``."""
        return any(WILDCARD in name for name in self.components if name)


class _Parser:
    """Recursive descent parser over a single specifier string."""

    def __init__(self, text: str, file: Path | None, first_line: int) -> None:
        self.text = text
        self.file = file
        self.first_line = first_line
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # -- Grammar rules --

    def parse_specifier(self) -> ProbeSpecifier:
        """component? ":" component? ":" component? ":" component? EOF"""
        provider = self.parse_component()
        self.expect_separator()
        module = self.parse_component()
        self.expect_separator()
        function = self.parse_component()
        self.expect_separator()
        action = self.parse_component()
        self.expect_end()

        return ProbeSpecifier(
            provider=provider,
            module=module,
            function=function,
            action=action,
        )

    def parse_component(self) -> str | None:
        """Longest run of name characters, or None if there is none."""
        start = self.pos
        while not self.at_end and self.text[self.pos] in NAME_CHARS:
            self.pos += 1
        return self.text[start : self.pos] or None

    def expect_separator(self) -> None:
        if self.at_end:
            raise make_incomplete_error(
                self.text,
                self.pos,
                needed=1,
                expected=repr(SEPARATOR),
                file=self.file,
                first_line=self.first_line,
            )
        if self.text[self.pos] != SEPARATOR:
            raise make_malformed_error(
                self.text,
                self.pos,
                expected=f"name character or {SEPARATOR!r}",
                file=self.file,
                first_line=self.first_line,
            )
        self.pos += 1

    def expect_end(self) -> None:
        if not self.at_end:
            raise make_malformed_error(
                self.text,
                self.pos,
                expected="name character or end of input",
                file=self.file,
                first_line=self.first_line,
            )


def parse_specifier(
    text: str,
    *,
    file: Path | None = None,
    first_line: int = 1,
) -> ProbeSpecifier:
    """
    Parse a probe specifier.

    The whole of ``text`` must be consumed; nothing (not even whitespace) is
    stripped.

    Args:
        text: Specifier text, e.g. ``"syscall::open:entry"``
        file: Source file, used only to locate errors
        first_line: Line number of ``text`` within ``file``

    Returns:
        The parsed ProbeSpecifier

    Raises:
        IncompleteError: The text ended before all three separators were seen
        MalformedError: A character cannot appear at its position
    """
    spec = _Parser(text, file, first_line).parse_specifier()
    logger.debug(f"Parsed probe specifier {spec} from {text!r}")
    return spec


def render_specifier(spec: ProbeSpecifier) -> str:
    """Render a specifier in canonical form: always four slots, three colons."""
    return SEPARATOR.join(name or "" for name in spec.components)
