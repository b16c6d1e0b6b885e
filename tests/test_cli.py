"""Tests for the CLI module: arg parsing, commands, output formats, exit codes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stringkit.cli import build_parser, exit_code_for, read_text, write_result
from stringkit.tokens import ParseResult, TokenizeResult

# ---------------------------------------------------------------------------
# Arg parsing via build_parser
# ---------------------------------------------------------------------------


class TestArgParsing:
    def test_split_requires_separator(self) -> None:
        p = build_parser()
        with pytest.raises(SystemExit):
            p.parse_args(["split", "a,b"])

    def test_global_flags(self) -> None:
        p = build_parser()
        ns = p.parse_args(["--json", "--debug", "tokenize", "a b"])
        assert ns.json is True
        assert ns.debug is True
        assert ns.command == "tokenize"

    def test_matched_flags(self) -> None:
        p = build_parser()
        ns = p.parse_args(["matched", "x", "--open", "(", "--close", ")", "--escape", "\\"])
        assert ns.open_delimiter == "("
        assert ns.close_delimiter == ")"
        assert ns.escape == "\\"

    def test_number_type_default(self) -> None:
        p = build_parser()
        ns = p.parse_args(["number", "1.5"])
        assert ns.type == "double"

    def test_number_type_choices(self) -> None:
        p = build_parser()
        with pytest.raises(SystemExit):
            p.parse_args(["number", "1", "--type", "int8"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_read_text_literal(self) -> None:
        import io

        assert read_text("abc", io.StringIO("ignored")) == "abc"

    def test_read_text_stdin_strips_one_newline(self) -> None:
        import io

        assert read_text("-", io.StringIO("a b\n\n")) == "a b\n"

    def test_exit_codes(self) -> None:
        assert exit_code_for(TokenizeResult(["a"])) == 0
        assert exit_code_for(ParseResult(5, True)) == 1
        assert exit_code_for(False) == 1
        assert exit_code_for("text") == 0

    def test_write_result_json_tokens(self) -> None:
        import io

        buf = io.StringIO()
        write_result(["a", "b"], True, buf)
        assert json.loads(buf.getvalue()) == ["a", "b"]


# ---------------------------------------------------------------------------
# Commands end to end
# ---------------------------------------------------------------------------


class TestCommands:
    def test_split(self, run_cli) -> None:
        code, out, _ = run_cli(["split", "a,,b", "-s", ","])
        assert code == 0
        assert out == "a\n\nb\n"

    def test_tokenize(self, run_cli) -> None:
        code, out, _ = run_cli(["tokenize", "  a  b "])
        assert code == 0
        assert out == "a\nb\n"

    def test_tokenize_set(self, run_cli) -> None:
        code, out, _ = run_cli(["tokenize", "b a b", "--set"])
        assert out == "a\nb\n"

    def test_quoted(self, run_cli) -> None:
        code, out, err = run_cli(["quoted", 'a "b c" d'])
        assert code == 0
        assert out == "a\nb c\nd\n"
        assert err == ""

    def test_quoted_unterminated(self, run_cli) -> None:
        code, out, err = run_cli(["quoted", 'a "b c'])
        assert code == 1
        assert out == "a\nb c\n"
        assert "end-quote" in err
        assert "<input>:1:3" in err

    def test_quoted_stdin(self, run_cli) -> None:
        code, out, err = run_cli(["quoted", "-"], stdin='x "y\n')
        assert code == 1
        assert "<stdin>:1:3" in err

    def test_matched(self, run_cli) -> None:
        code, out, _ = run_cli(
            ["matched", "{a} string {to {be} split}", "--open", "{", "--close", "}"]
        )
        assert code == 0
        assert out == "a\nto {be} split\n"

    def test_matched_without_delimiters(self, run_cli, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        code, _, err = run_cli(["matched", "{a}"])
        assert code == 2
        assert "error:" in err

    def test_matched_bad_delimiter(self, run_cli, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        code, _, err = run_cli(["matched", "{a}", "--open", "{{", "--close", "}"])
        assert code == 2
        assert "matched.open" in err

    def test_cat_paths(self, run_cli) -> None:
        code, out, _ = run_cli(["cat-paths", "foo/bar", "../jive"])
        assert code == 0
        assert out == "foo/jive\n"

    def test_unescape(self, run_cli) -> None:
        code, out, _ = run_cli(["unescape", "a\\tb"])
        assert out == "a\tb\n"

    def test_xml_escape(self, run_cli) -> None:
        code, out, _ = run_cli(["xml-escape", "<a & b>"])
        assert out == "&lt;a &amp; b&gt;\n"

    def test_identifier(self, run_cli) -> None:
        code, out, _ = run_cli(["identifier", "9 lives"])
        assert code == 0
        assert out == "__lives\n"

    def test_identifier_check(self, run_cli) -> None:
        assert run_cli(["identifier", "ok_name", "--check"])[:2] == (0, "true\n")
        assert run_cli(["identifier", "bad-name", "--check"])[:2] == (1, "false\n")

    def test_sort_stdin(self, run_cli) -> None:
        code, out, _ = run_cli(["sort"], stdin="baby\nalbert\nAlbert\na_b\n")
        assert code == 0
        assert out == "Albert\nalbert\na_b\nbaby\n"

    def test_sort_file(self, run_cli, tmp_path: Path) -> None:
        f = tmp_path / "names.txt"
        f.write_text("file2\nfile10\n")
        code, out, _ = run_cli(["sort", str(f)])
        assert out == "file10\nfile2\n"

    def test_sort_missing_file(self, run_cli, tmp_path: Path) -> None:
        code, _, err = run_cli(["sort", str(tmp_path / "missing.txt")])
        assert code == 2
        assert "error:" in err

    def test_number_double(self, run_cli) -> None:
        code, out, _ = run_cli(["number", "1.2foo"])
        assert out == "1.2\n"

    def test_number_overflow(self, run_cli) -> None:
        code, out, _ = run_cli(["number", "99999999999999999999", "--type", "int64"])
        assert code == 1
        assert out == f"{2**63 - 1}\n"


# ---------------------------------------------------------------------------
# JSON output and debug dump
# ---------------------------------------------------------------------------


class TestOutputModes:
    def test_json_tokenize_result(self, run_cli) -> None:
        code, out, _ = run_cli(["--json", "quoted", 'a "b'])
        payload = json.loads(out)
        assert payload["tokens"] == ["a", "b"]
        assert payload["diagnostics"][0]["offset"] == 2

    def test_json_number(self, run_cli) -> None:
        code, out, _ = run_cli(["--json", "number", "-5", "--type", "long"])
        assert json.loads(out) == {"value": -5, "out_of_range": False}

    def test_json_string(self, run_cli) -> None:
        code, out, _ = run_cli(["--json", "unescape", "\\n"])
        assert json.loads(out) == "\n"

    def test_debug_writes_stderr(self, run_cli) -> None:
        code, out, err = run_cli(["--debug", "tokenize", "a b"])
        assert out == "a\nb\n"
        assert "Tokens (2)" in err

    def test_json_infinite_number(self, run_cli) -> None:
        code, out, _ = run_cli(["--json", "number", "1e999"])
        assert code == 0
        assert json.loads(out) == "inf"

    def test_json_negative_infinite_number(self, run_cli) -> None:
        code, out, _ = run_cli(["--json", "number", "-1e999"])
        assert json.loads(out) == "-inf"

    def test_quoted_escape_flag(self, run_cli) -> None:
        code, out, _ = run_cli(["quoted", 'a^"b c', "-e", "^"])
        assert code == 0
        assert out == 'a^"b\nc\n'

    def test_quoted_all_quotes_flag(self, run_cli) -> None:
        code, out, _ = run_cli(["quoted", "'b c' `d e`", "-q", "all"])
        assert code == 0
        assert out == "b c\nd e\n"
