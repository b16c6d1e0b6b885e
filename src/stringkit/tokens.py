"""Shared value types, tokenizer options, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stringkit.errors import Diagnostic

# Space, tab, newline
DEFAULT_DELIMITERS = " \t\n"
DEFAULT_QUOTES = '"'
DEFAULT_QUOTE_ESCAPE = "\\"

# Characters that can be quotes when callers opt in to all quote styles,
# spelled "all" in config and on the command line.
ALL_QUOTES = "\"'`"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class TokenizerOptions:
    """Recognized tokenizer settings.

    ``escape`` marks a quote as literal; the empty string disables escaping.
    """

    delimiters: str = DEFAULT_DELIMITERS
    quotes: str = DEFAULT_QUOTES
    escape: str = DEFAULT_QUOTE_ESCAPE


DEFAULT_OPTIONS = TokenizerOptions()


@dataclass(frozen=True, slots=True)
class TokenizeResult:
    """Tokens scanned from a source plus any structural diagnostics."""

    tokens: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


@dataclass(frozen=True, slots=True)
class ParseResult:
    """An integer parse: the (possibly clamped) value and an overflow flag."""

    value: int
    out_of_range: bool = False


def is_ascii_letter(ch: str) -> bool:
    """Return True if ch is A-Z or a-z."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_ascii_digit(ch: str) -> bool:
    """Return True if ch is 0-9."""
    return "0" <= ch <= "9"


def is_hex_digit(ch: str) -> bool:
    """Return True if ch is a hexadecimal digit."""
    return ch != "" and ch in "0123456789abcdefABCDEF"


def is_octal_digit(ch: str) -> bool:
    """Return True if ch is an octal digit."""
    return "0" <= ch <= "7"


def is_identifier_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return is_ascii_letter(ch) or ch == "_"


def is_identifier_char(ch: str) -> bool:
    """Return True if ch may appear after the first identifier character."""
    return is_ascii_letter(ch) or is_ascii_digit(ch) or ch == "_"
