"""Dictionary ordering for strings.

Strings compare case-insensitively; case only matters when two strings differ
by capitalization alone, in which case uppercase sorts first:

    ["abacus", "Albert", "albert", "baby", "Bert", "file01", "file10", "file2"]

Characters whose codes fall between uppercase and lowercase letters
(``[ \\ ] ^ _ ```) sort after every letter. Digit runs are compared character
by character, not by numeric value.
"""

from __future__ import annotations

from collections.abc import Iterable

_LOWER_Z = ord("z")
_BETWEEN_FIRST = ord("[")
_BETWEEN_LAST = ord("`")


def _rank(ch: str) -> int:
    code = ord(ch)
    if 0x41 <= code <= 0x5A:
        code += 0x20
    # Ranks are spaced by 8 so the six in-between characters fit in the gap
    # directly after "z".
    if _BETWEEN_FIRST <= code <= _BETWEEN_LAST:
        return _LOWER_Z * 8 + 1 + (code - _BETWEEN_FIRST)
    return code * 8


def dictionary_key(s: str) -> tuple[tuple[int, ...], str]:
    """Sort key implementing dictionary order."""
    return tuple(_rank(ch) for ch in s), s


def dictionary_less_than(lhs: str, rhs: str) -> bool:
    """Return True if lhs sorts before rhs in dictionary order."""
    return dictionary_key(lhs) < dictionary_key(rhs)


def dictionary_sorted(strings: Iterable[str]) -> list[str]:
    return sorted(strings, key=dictionary_key)
