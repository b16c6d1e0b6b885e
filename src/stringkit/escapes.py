"""C-style escape decoding and XML escaping."""

from __future__ import annotations

from stringkit.tokens import is_hex_digit, is_octal_digit

_SIMPLE_ESCAPES = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_XML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def unescape_string(text: str) -> str:
    """Process the escape sequences of an ANSI C string constant.

    Accepted sequences:

    - ``\\\\`` ``\\a`` ``\\b`` ``\\f`` ``\\n`` ``\\r`` ``\\t`` ``\\v``
    - ``\\xhh...`` hex constant of any length
    - ``\\ddd`` octal constant of up to three digits

    Each hex or octal constant produces one character (its value modulo 256).
    An unknown sequence ``\\c`` becomes ``c``. Decoding stops at a NUL
    character; anything after it is ignored.
    """
    out: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch == "\0":
            break
        if ch != "\\":
            out.append(ch)
            pos += 1
            continue

        pos += 1  # consume backslash
        if pos >= end or text[pos] == "\0":
            break
        ch = text[pos]

        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
            pos += 1
        elif ch == "x":
            pos += 1
            value = 0
            while pos < end and is_hex_digit(text[pos]):
                value = (value * 16 + int(text[pos], 16)) & 0xFF
                pos += 1
            out.append(chr(value))
        elif is_octal_digit(ch):
            value = 0
            count = 0
            while count < 3 and pos < end and is_octal_digit(text[pos]):
                value = value * 8 + int(text[pos])
                pos += 1
                count += 1
            out.append(chr(value & 0xFF))
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


def xml_escape(text: str) -> str:
    """Replace &, <, >, " and ' with their XML entity references."""
    result: list[str] = []
    for ch in text:
        result.append(_XML_ENTITIES.get(ch, ch))
    return "".join(result)
