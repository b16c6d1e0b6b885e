"""Fast text-to-number converters with overflow clamping.

The integer converters expect text matching ``-?[0-9]+`` (``[0-9]+`` for the
unsigned ones). They do not validate: scanning stops at the first character
that is not a digit, so text outside the grammar yields a deterministic but
meaningless value. Overflow is the only condition that is reported.
"""

from __future__ import annotations

import re

from stringkit.tokens import ParseResult

# LP64: long and unsigned long are 64 bits wide.
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
ULONG_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_DIGITS = re.compile(r"[0-9]*")

# 2**64 has 20 decimal digits.
_MAX_SIGNIFICANT = 20
_DOUBLE = re.compile(
    r"""
    (?P<sign>-)?
    (?P<number>
        (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)
        (?:[eE][-+]?[0-9]+)?
    )?
    """,
    re.VERBOSE,
)


def _magnitude(digits: str) -> int | None:
    """Return the value of a digit run, or None when it cannot fit 64 bits."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_SIGNIFICANT:
        return None
    return int(significant or "0")


def _parse_signed(text: str, minimum: int, maximum: int) -> ParseResult:
    negative = text.startswith("-")
    start = 1 if negative else 0
    digits = _DIGITS.match(text, start).group()
    if not digits:
        return ParseResult(0)
    value = _magnitude(digits)
    if negative:
        if value is None or -value < minimum:
            return ParseResult(minimum, True)
        return ParseResult(-value)
    if value is None or value > maximum:
        return ParseResult(maximum, True)
    return ParseResult(value)


def _parse_unsigned(text: str, maximum: int) -> ParseResult:
    digits = _DIGITS.match(text).group()
    if not digits:
        return ParseResult(0)
    value = _magnitude(digits)
    if value is None or value > maximum:
        return ParseResult(maximum, True)
    return ParseResult(value)


def string_to_long(text: str) -> ParseResult:
    """Convert ``-?[0-9]+`` to a long, clamping to LONG_MIN/LONG_MAX."""
    return _parse_signed(text, LONG_MIN, LONG_MAX)


def string_to_ulong(text: str) -> ParseResult:
    """Convert ``[0-9]+`` to an unsigned long, clamping to ULONG_MAX."""
    return _parse_unsigned(text, ULONG_MAX)


def string_to_int64(text: str) -> ParseResult:
    """Convert ``-?[0-9]+`` to an int64, clamping to INT64_MIN/INT64_MAX."""
    return _parse_signed(text, INT64_MIN, INT64_MAX)


def string_to_uint64(text: str) -> ParseResult:
    """Convert ``[0-9]+`` to a uint64, clamping to UINT64_MAX."""
    return _parse_unsigned(text, UINT64_MAX)


def string_to_double(text: str) -> float:
    """Convert the leading numeric part of text to a float.

    Accepts ``(-?[0-9]+(\\.[0-9]*)?|-?\\.[0-9]+)([eE][-+]?[0-9]+)?`` and stops
    at the first character that does not extend the match. Never fails:

        string_to_double("") == 0.0
        string_to_double("blah") == 0.0
        string_to_double("-") == -0.0
        string_to_double("1.2foo") == 1.2
    """
    m = _DOUBLE.match(text)
    number = m.group("number")
    negative = m.group("sign") is not None
    if number is None:
        return -0.0 if negative else 0.0
    value = float(number)
    return -value if negative else value
