"""Tokenizers: literal split, delimiter runs, quoted spans, and matched delimiters."""

from __future__ import annotations

from stringkit.errors import Diagnostic
from stringkit.tokens import (
    DEFAULT_DELIMITERS,
    DEFAULT_OPTIONS,
    TokenizeResult,
    TokenizerOptions,
)


def split(source: str, separator: str) -> list[str]:
    """Split source on every occurrence of separator, keeping empty tokens.

    Behaves like ``str.split(separator)`` except that an empty source yields
    no tokens and an empty separator yields the source unchanged.
    """
    if not source:
        return []
    if not separator:
        return [source]
    return source.split(separator)


def tokenize(source: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Split source on runs of any character in delimiters.

    Adjacent delimiters collapse, so empty tokens never result.
    """
    tokens: list[str] = []
    chars: list[str] = []
    for ch in source:
        if ch in delimiters:
            if chars:
                tokens.append("".join(chars))
                chars = []
        else:
            chars.append(ch)
    if chars:
        tokens.append("".join(chars))
    return tokens


def tokenize_to_set(source: str, delimiters: str = DEFAULT_DELIMITERS) -> set[str]:
    """Same as tokenize() but returns the distinct tokens as a set."""
    return set(tokenize(source, delimiters))


class _QuotedScanner:
    """Split on delimiters, treating quoted spans as part of a single token."""

    def __init__(self, source: str, options: TokenizerOptions) -> None:
        self._source = source
        self._delimiters = options.delimiters
        self._quotes = options.quotes
        self._escape = options.escape
        self._pos = 0
        self._tokens: list[str] = []
        self._diagnostics: list[Diagnostic] = []

    def scan(self) -> TokenizeResult:
        for q in self._quotes:
            if q in self._delimiters:
                self._error(f"cannot use quote character {q!r} as a delimiter", 0)
                return TokenizeResult([], self._diagnostics)
        if self._escape and self._escape in self._quotes:
            self._error(f"cannot use quote character {self._escape!r} as the escape", 0)
            return TokenizeResult([], self._diagnostics)

        while True:
            self._skip_delimiters()
            if self._pos >= len(self._source):
                break
            if not self._lex_token():
                break
        return TokenizeResult(self._tokens, self._diagnostics)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _error(self, message: str, offset: int) -> None:
        self._diagnostics.append(Diagnostic(message, offset))

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _skip_delimiters(self) -> None:
        while self._pos < len(self._source) and self._peek() in self._delimiters:
            self._pos += 1

    def _lex_token(self) -> bool:
        """Scan one token. Returns False once the source is exhausted early."""
        chars: list[str] = []
        while self._pos < len(self._source):
            ch = self._peek()
            if ch in self._delimiters:
                break

            nxt = self._peek(1)
            if self._escape and ch == self._escape and nxt and nxt in self._quotes:
                # Escaped quote is literal and keeps its escape
                chars.append(self._advance())
                chars.append(self._advance())
                continue

            if ch in self._quotes:
                start = self._pos
                closing = self._find_closing_quote(ch, start + 1)
                if closing < 0:
                    chars.append(self._source[start + 1 :])
                    self._pos = len(self._source)
                    self._tokens.append("".join(chars))
                    self._error(f"string is missing an end-quote ({ch!r})", start)
                    return False
                chars.append(self._source[start + 1 : closing])
                self._pos = closing + 1
                continue

            chars.append(self._advance())

        self._tokens.append("".join(chars))
        return True

    def _find_closing_quote(self, quote: str, start: int) -> int:
        idx = self._source.find(quote, start)
        if not self._escape:
            return idx
        while idx >= 0 and self._source[idx - 1] == self._escape:
            idx = self._source.find(quote, idx + 1)
        return idx


def quoted_tokenize(source: str, options: TokenizerOptions = DEFAULT_OPTIONS) -> TokenizeResult:
    """Tokenize source on options.delimiters, keeping quoted spans together.

    Quote characters are removed and the text between them, delimiters
    included, becomes part of the token. Quotes preceded by options.escape
    (a backslash by default) keep that escape and are kept literally, as are
    quotes of a different kind inside an open span. An empty escape turns
    escaping off. An unterminated quote produces a diagnostic and a final
    token holding the rest of the source.
    """
    return _QuotedScanner(source, options).scan()


class _MatchedScanner:
    """Collect the contents of top-level balanced delimiter pairs."""

    def __init__(self, source: str, open_delimiter: str, close_delimiter: str, escape: str) -> None:
        self._source = source
        self._open = open_delimiter
        self._close = close_delimiter
        self._escape = escape
        self._tokens: list[str] = []
        self._diagnostics: list[Diagnostic] = []

    def scan(self) -> TokenizeResult:
        if len(self._open) != 1 or len(self._close) != 1:
            self._error("open and close delimiters must be single characters", 0)
            return TokenizeResult([], self._diagnostics)
        if self._open == self._close:
            self._error(f"open and close delimiters cannot be the same ({self._open!r})", 0)
            return TokenizeResult([], self._diagnostics)
        if self._escape and self._escape in (self._open, self._close):
            self._error(f"escape character {self._escape!r} cannot be a delimiter", 0)
            return TokenizeResult([], self._diagnostics)

        pos = 0
        end = len(self._source)
        while pos < end:
            ch = self._source[pos]
            if self._escape and ch == self._escape:
                pos += 2
            elif ch == self._open:
                pos = self._lex_span(pos)
            elif ch == self._close:
                self._error(f"string is missing an open-delimiter ({self._open!r})", pos)
                pos += 1
            else:
                pos += 1
        return TokenizeResult(self._tokens, self._diagnostics)

    def _error(self, message: str, offset: int) -> None:
        self._diagnostics.append(Diagnostic(message, offset))

    def _lex_span(self, start: int) -> int:
        """Scan from an open delimiter at start; return the offset after its match."""
        depth = 1
        pos = start + 1
        end = len(self._source)
        while pos < end:
            ch = self._source[pos]
            if self._escape and ch == self._escape:
                pos += 2
                continue
            if ch == self._open:
                depth += 1
            elif ch == self._close:
                depth -= 1
                if depth == 0:
                    self._tokens.append(self._source[start + 1 : pos])
                    return pos + 1
            pos += 1

        # Unterminated: the partial span is dropped
        self._error(f"string is missing a close-delimiter ({self._close!r})", start)
        return end


def matched_tokenize(
    source: str,
    open_delimiter: str,
    close_delimiter: str,
    escape: str = "",
) -> TokenizeResult:
    """Extract the contents of each top-level open/close delimiter pair.

    ``matched_tokenize("{a} string {to {be} split}", "{", "}")`` yields
    ``["a", "to {be} split"]``. Text outside the pairs is dropped. When escape
    is set, the character following it never opens or closes a pair; the
    escape itself stays in the token.
    """
    return _MatchedScanner(source, open_delimiter, close_delimiter, escape).scan()
