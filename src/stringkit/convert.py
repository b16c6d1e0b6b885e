"""Explicit text conversion for scalar values.

Types opt in by implementing TextConvertible; builtin scalars and enums use
the converters below. Conversions from text never raise: a failure is
reported through ConversionResult.ok.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from stringkit.numeric import string_to_double, string_to_int64

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})

_INT_PREFIX = re.compile(r"\s*([-+]?)([0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*(-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)")


@runtime_checkable
class TextConvertible(Protocol):
    """A type that knows its own text form."""

    def to_text(self) -> str: ...

    @classmethod
    def from_text(cls, text: str) -> Any:
        """Build an instance from text, raising ValueError if it is malformed."""
        ...


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """A value converted from text and whether the conversion succeeded."""

    value: Any
    ok: bool = True


def stringify(value: object) -> str:
    """Return the text form of value."""
    if isinstance(value, TextConvertible):
        return value.to_text()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, float):
        return repr(value)
    return str(value)


def unstringify(text: str, target: type) -> ConversionResult:
    """Convert text to an instance of target without raising."""
    if issubclass(target, TextConvertible):
        try:
            return ConversionResult(target.from_text(text))
        except ValueError:
            return ConversionResult(None, False)
    if issubclass(target, bool):
        return _to_bool(text)
    if issubclass(target, Enum):
        return _to_enum(text, target)
    if issubclass(target, int):
        return _to_int(text)
    if issubclass(target, float):
        return _to_float(text)
    if issubclass(target, str):
        return ConversionResult(text)
    return ConversionResult(None, False)


def _to_bool(text: str) -> ConversionResult:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return ConversionResult(True)
    if word in _FALSE_WORDS:
        return ConversionResult(False)
    return ConversionResult(False, False)


def _to_enum(text: str, target: type[Enum]) -> ConversionResult:
    member = target.__members__.get(text.strip())
    if member is None:
        return ConversionResult(next(iter(target), None), False)
    return ConversionResult(member)


def _to_int(text: str) -> ConversionResult:
    m = _INT_PREFIX.match(text)
    if m is None:
        return ConversionResult(0, False)
    sign, digits = m.groups()
    parsed = string_to_int64(("-" if sign == "-" else "") + digits)
    return ConversionResult(parsed.value, not parsed.out_of_range)


def _to_float(text: str) -> ConversionResult:
    m = _FLOAT_PREFIX.match(text)
    if m is None:
        return ConversionResult(0.0, False)
    return ConversionResult(string_to_double(m.group(1)))
