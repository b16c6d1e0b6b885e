"""Test shared value types and character helpers."""

from stringkit.errors import Diagnostic
from stringkit.tokens import (
    DEFAULT_DELIMITERS,
    DEFAULT_OPTIONS,
    ParseResult,
    TokenizeResult,
    TokenizerOptions,
    is_ascii_digit,
    is_ascii_letter,
    is_hex_digit,
    is_octal_digit,
)


class TestDefaults:
    def test_default_delimiters(self):
        assert DEFAULT_DELIMITERS == " \t\n"

    def test_default_options(self):
        assert DEFAULT_OPTIONS == TokenizerOptions(" \t\n", '"', "\\")

    def test_parse_result_flag_defaults_false(self):
        assert ParseResult(3).out_of_range is False


class TestTokenizeResult:
    def test_ok_without_diagnostics(self):
        assert TokenizeResult(["a"]).ok

    def test_not_ok_with_diagnostics(self):
        assert not TokenizeResult([], [Diagnostic("bad", 0)]).ok


class TestCharHelpers:
    def test_letters(self):
        assert is_ascii_letter("a") and is_ascii_letter("Z")
        assert not is_ascii_letter("_")
        assert not is_ascii_letter("\xe9")

    def test_digits(self):
        assert is_ascii_digit("0") and is_ascii_digit("9")
        assert not is_ascii_digit("a")

    def test_hex(self):
        for ch in "09afAF":
            assert is_hex_digit(ch), ch
        assert not is_hex_digit("g")
        assert not is_hex_digit("")

    def test_octal(self):
        assert is_octal_digit("7")
        assert not is_octal_digit("8")
