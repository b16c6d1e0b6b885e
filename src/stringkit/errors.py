"""Diagnostics and error types with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass

from stringkit.tokens import Position


class StringKitError(Exception):
    """Base class for errors raised by stringkit front ends."""


class ConfigError(StringKitError):
    """Raised when a configuration value is missing the expected shape."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A structural problem found while scanning, anchored at a source offset."""

    message: str
    offset: int

    def position(self, source: str) -> Position:
        """Convert the offset into a 1-based line/column position in source."""
        offset = max(0, min(self.offset, len(source)))
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1, offset)

    def format(self, source: str, filename: str = "<input>") -> str:
        pos = self.position(source)
        lines = source.splitlines(keepends=True)
        line_idx = pos.line - 1
        col = pos.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)
        line_num = str(pos.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{pos.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
