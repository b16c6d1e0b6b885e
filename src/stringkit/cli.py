"""Command-line interface for stringkit."""

from __future__ import annotations

import argparse
import json
import math
import sys
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from stringkit.convert import stringify
from stringkit.errors import ConfigError
from stringkit.escapes import unescape_string, xml_escape
from stringkit.identifiers import is_valid_identifier, make_valid_identifier
from stringkit.numeric import (
    string_to_double,
    string_to_int64,
    string_to_long,
    string_to_uint64,
    string_to_ulong,
)
from stringkit.ordering import dictionary_sorted
from stringkit.paths import cat_paths
from stringkit.tokenizers import matched_tokenize, quoted_tokenize, split, tokenize, tokenize_to_set
from stringkit.tokens import ALL_QUOTES, DEFAULT_OPTIONS, ParseResult, TokenizeResult, TokenizerOptions

CONFIG_FILENAME = "stringkit.toml"

_NUMBER_PARSERS: dict[str, Callable[[str], ParseResult | float]] = {
    "long": string_to_long,
    "ulong": string_to_ulong,
    "int64": string_to_int64,
    "uint64": string_to_uint64,
    "double": string_to_double,
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Tokenizer settings merged from defaults, config file and CLI flags."""

    tokenizer: TokenizerOptions = DEFAULT_OPTIONS
    open_delimiter: str | None = None
    close_delimiter: str | None = None
    matched_escape: str = ""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="stringkit",
        description="String parsing and tokenization utilities",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument("--json", action="store_true", help="Write results as JSON")
    p.add_argument("--debug", action="store_true", help="Dump results to stderr")
    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    s = sub.add_parser("split", help="Split on a literal separator")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument("-s", "--separator", required=True, help="Separator string")

    s = sub.add_parser("tokenize", help="Split on runs of delimiter characters")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument("-d", "--delimiters", help="Delimiter characters")
    s.add_argument("--set", action="store_true", help="Print distinct tokens only")

    s = sub.add_parser("quoted", help="Tokenize, keeping quoted spans together")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument("-d", "--delimiters", help="Delimiter characters")
    s.add_argument("-q", "--quotes", help="Quote characters, or 'all'")
    s.add_argument(
        "-e", "--escape", dest="quote_escape", help="Quote escape character ('' disables)"
    )

    s = sub.add_parser("matched", help="Extract balanced delimiter spans")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument("--open", dest="open_delimiter", help="Open delimiter character")
    s.add_argument("--close", dest="close_delimiter", help="Close delimiter character")
    s.add_argument("--escape", help="Escape character")

    s = sub.add_parser("cat-paths", help="Join two paths, resolving leading '..'")
    s.add_argument("prefix")
    s.add_argument("suffix")

    s = sub.add_parser("unescape", help="Decode C escape sequences")
    s.add_argument("text", help="Input text ('-' reads stdin)")

    s = sub.add_parser("xml-escape", help="Escape XML special characters")
    s.add_argument("text", help="Input text ('-' reads stdin)")

    s = sub.add_parser("identifier", help="Sanitize or check an identifier")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument("--check", action="store_true", help="Only check validity")

    s = sub.add_parser("sort", help="Sort lines in dictionary order")
    s.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")

    s = sub.add_parser("number", help="Parse a number")
    s.add_argument("text", help="Input text ('-' reads stdin)")
    s.add_argument(
        "-t",
        "--type",
        choices=sorted(_NUMBER_PARSERS),
        default="double",
        help="Target type (default: double)",
    )
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", str(path)) from None


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError("expected a table", name)
    return value


def _get_str(section: dict[str, Any], key: str, qualified: str) -> str | None:
    value = section.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError("expected a string", qualified)
    return value


def _check_char(value: str | None, qualified: str, allow_empty: bool = False) -> None:
    if value is None or (allow_empty and value == ""):
        return
    if len(value) != 1:
        raise ConfigError("expected a single character", qualified)


def settings_from_config(config: dict[str, Any], overrides: dict[str, str | None] | None = None) -> Settings:
    """Build Settings from a loaded config, applying non-None overrides on top."""
    tok_cfg = _section(config, "tokenize")
    matched_cfg = _section(config, "matched")
    values = {
        "delimiters": _get_str(tok_cfg, "delimiters", "tokenize.delimiters"),
        "quotes": _get_str(tok_cfg, "quotes", "tokenize.quotes"),
        "quote_escape": _get_str(tok_cfg, "escape", "tokenize.escape"),
        "open_delimiter": _get_str(matched_cfg, "open", "matched.open"),
        "close_delimiter": _get_str(matched_cfg, "close", "matched.close"),
        "escape": _get_str(matched_cfg, "escape", "matched.escape"),
    }
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    delimiters = values["delimiters"]
    quotes = values["quotes"]
    quote_escape = values["quote_escape"]
    open_delimiter = values["open_delimiter"]
    close_delimiter = values["close_delimiter"]
    escape = values["escape"]

    if delimiters == "":
        raise ConfigError("delimiter set cannot be empty", "tokenize.delimiters")
    _check_char(open_delimiter, "matched.open")
    _check_char(close_delimiter, "matched.close")
    _check_char(escape, "matched.escape", allow_empty=True)
    _check_char(quote_escape, "tokenize.escape", allow_empty=True)
    if quotes == "all":
        quotes = ALL_QUOTES

    tokenizer = TokenizerOptions(
        delimiters=delimiters if delimiters is not None else DEFAULT_OPTIONS.delimiters,
        quotes=quotes if quotes is not None else DEFAULT_OPTIONS.quotes,
        escape=quote_escape if quote_escape is not None else DEFAULT_OPTIONS.escape,
    )
    return Settings(
        tokenizer=tokenizer,
        open_delimiter=open_delimiter,
        close_delimiter=close_delimiter,
        matched_escape=escape or "",
    )


def resolve_settings(args: argparse.Namespace, base_dir: Path | None = None) -> Settings:
    """Merge config file and CLI args into Settings.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir if base_dir is not None else Path("."))
    overrides = {
        name: getattr(args, name, None)
        for name in (
            "delimiters",
            "quotes",
            "quote_escape",
            "open_delimiter",
            "close_delimiter",
            "escape",
        )
    }
    return settings_from_config(config, overrides)


def read_text(arg: str, stdin: TextIO) -> str:
    """Return arg, or stdin's contents (minus one trailing newline) for '-'."""
    if arg != "-":
        return arg
    text = stdin.read()
    return text[:-1] if text.endswith("\n") else text


def run_command(args: argparse.Namespace, settings: Settings, stdin: TextIO) -> tuple[str, object]:
    """Run the selected command; return (source text, result)."""
    cmd = args.command

    if cmd == "cat-paths":
        return f"{args.prefix} + {args.suffix}", cat_paths(args.prefix, args.suffix)

    if cmd == "sort":
        if args.file == "-":
            source = stdin.read()
        else:
            source = Path(args.file).read_text(encoding="utf-8")
        return args.file, dictionary_sorted(source.splitlines())

    source = read_text(args.text, stdin)

    if cmd == "split":
        return source, split(source, args.separator)
    if cmd == "tokenize":
        delimiters = settings.tokenizer.delimiters
        if args.set:
            return source, tokenize_to_set(source, delimiters)
        return source, tokenize(source, delimiters)
    if cmd == "quoted":
        return source, quoted_tokenize(source, settings.tokenizer)
    if cmd == "matched":
        if settings.open_delimiter is None or settings.close_delimiter is None:
            raise ConfigError("open and close delimiters are required", "matched")
        return source, matched_tokenize(
            source,
            settings.open_delimiter,
            settings.close_delimiter,
            settings.matched_escape,
        )
    if cmd == "unescape":
        return source, unescape_string(source)
    if cmd == "xml-escape":
        return source, xml_escape(source)
    if cmd == "identifier":
        if args.check:
            return source, is_valid_identifier(source)
        return source, make_valid_identifier(source)
    if cmd == "number":
        return source, _NUMBER_PARSERS[args.type](source)

    raise ConfigError(f"unknown command: {cmd}")


def write_result(result: object, as_json: bool, out: TextIO) -> None:
    """Write a command result to out, as plain lines or JSON."""
    if isinstance(result, TokenizeResult):
        if as_json:
            payload = {
                "tokens": result.tokens,
                "diagnostics": [
                    {"message": d.message, "offset": d.offset} for d in result.diagnostics
                ],
            }
            out.write(json.dumps(payload) + "\n")
        else:
            for tok in result.tokens:
                out.write(tok + "\n")
        return

    if isinstance(result, set):
        result = dictionary_sorted(result)

    if isinstance(result, list):
        if as_json:
            out.write(json.dumps(result) + "\n")
        else:
            for tok in result:
                out.write(tok + "\n")
        return

    if isinstance(result, ParseResult):
        if as_json:
            payload = {"value": result.value, "out_of_range": result.out_of_range}
            out.write(json.dumps(payload) + "\n")
        else:
            out.write(f"{result.value}\n")
        return

    if as_json:
        if isinstance(result, float) and not math.isfinite(result):
            # JSON has no inf or nan literals
            result = stringify(result)
        out.write(json.dumps(result) + "\n")
    else:
        out.write(stringify(result) + "\n")


def exit_code_for(result: object) -> int:
    """0 for a clean result, 1 when the input itself was at fault."""
    if isinstance(result, TokenizeResult) and not result.ok:
        return 1
    if isinstance(result, ParseResult) and result.out_of_range:
        return 1
    if result is False:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
        source, result = run_command(args, settings, sys.stdin)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.debug:
        from stringkit.debug import dump_result

        dump_result(args.command, source, result)

    write_result(result, args.json, sys.stdout)

    if isinstance(result, TokenizeResult):
        filename = "<stdin>" if getattr(args, "text", None) == "-" else "<input>"
        for d in result.diagnostics:
            print(d.format(source, filename), file=sys.stderr)

    return exit_code_for(result)
