"""Identifier validation and sanitizing."""

from __future__ import annotations

from stringkit.tokens import is_identifier_char, is_identifier_start


def is_valid_identifier(identifier: str) -> bool:
    """Return True if identifier follows the C/Python identifier convention.

    It must be non-empty, start with an ASCII letter or underscore, and
    contain only ASCII letters, digits and underscores.
    """
    if not identifier or not is_identifier_start(identifier[0]):
        return False
    return all(is_identifier_char(ch) for ch in identifier[1:])


def make_valid_identifier(text: str) -> str:
    """Produce a valid identifier from text by replacing invalid characters with '_'."""
    if not text:
        return "_"
    first = text[0] if is_identifier_start(text[0]) else "_"
    rest = (ch if is_identifier_char(ch) else "_" for ch in text[1:])
    return first + "".join(rest)
