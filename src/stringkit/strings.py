"""Small string helpers: trimming, prefixes, suffixes, glob patterns."""

from __future__ import annotations

TRIM_CHARS = " \n\t\r"


def trim_left(s: str, chars: str = TRIM_CHARS) -> str:
    """Remove leading characters found in chars."""
    return s.lstrip(chars)


def trim_right(s: str, chars: str = TRIM_CHARS) -> str:
    """Remove trailing characters found in chars."""
    return s.rstrip(chars)


def trim(s: str, chars: str = TRIM_CHARS) -> str:
    """Remove leading and trailing characters found in chars."""
    return s.strip(chars)


def common_prefix(a: str, b: str) -> str:
    """Return the longest prefix shared by a and b."""
    n = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            break
        n += 1
    return a[:n]


def get_suffix(name: str, delimiter: str = ".") -> str:
    """Return the text after the last delimiter, or "" if there is none.

    ``get_suffix("abc.def")`` is "def".
    """
    i = name.rfind(delimiter)
    if i < 0:
        return ""
    return name[i + len(delimiter) :]


def get_before_suffix(name: str, delimiter: str = ".") -> str:
    """Return the text before the last delimiter, or name if there is none."""
    i = name.rfind(delimiter)
    if i < 0:
        return name
    return name[:i]


def glob_to_regex(s: str) -> str:
    # Order matters: "." must be escaped before "*" introduces ".*"
    return s.replace(".", "\\.").replace("*", ".*").replace("?", ".")
