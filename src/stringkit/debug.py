"""--debug result dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from stringkit.tokens import ParseResult, TokenizeResult


def dump_result(
    command: str,
    source: str,
    result: object,
    *,
    file: TextIO | None = None,
) -> None:
    """Print a human-readable description of a command's result to *file*.

    *file* defaults to the current ``sys.stderr``.
    """
    if file is None:
        file = sys.stderr
    file.write(f"{command} {source!r}\n")
    if isinstance(result, TokenizeResult):
        _dump_tokenize_result(result, 1, file)
    elif isinstance(result, ParseResult):
        flag = " (out of range)" if result.out_of_range else ""
        file.write(f"{_indent(1)}Value {result.value}{flag}\n")
    elif isinstance(result, (list, set)):
        _dump_tokens(sorted(result) if isinstance(result, set) else result, 1, file)
    else:
        file.write(f"{_indent(1)}Value {result!r}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_tokens(tokens: list[str], depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Tokens ({len(tokens)})\n")
    for i, tok in enumerate(tokens):
        f.write(f"{_indent(depth + 1)}[{i}] {tok!r}\n")


def _dump_tokenize_result(result: TokenizeResult, depth: int, f: TextIO) -> None:
    _dump_tokens(result.tokens, depth, f)
    if result.diagnostics:
        f.write(f"{_indent(depth)}Diagnostics ({len(result.diagnostics)})\n")
        for d in result.diagnostics:
            f.write(f"{_indent(depth + 1)}@{d.offset} {d.message}\n")
