"""String parsing and tokenization toolkit."""

from __future__ import annotations

from stringkit.convert import ConversionResult, TextConvertible, stringify, unstringify
from stringkit.errors import ConfigError, Diagnostic, StringKitError
from stringkit.escapes import unescape_string, xml_escape
from stringkit.identifiers import is_valid_identifier, make_valid_identifier
from stringkit.numeric import (
    string_to_double,
    string_to_int64,
    string_to_long,
    string_to_uint64,
    string_to_ulong,
)
from stringkit.ordering import dictionary_key, dictionary_less_than, dictionary_sorted
from stringkit.paths import base_name, cat_paths, path_name
from stringkit.strings import (
    common_prefix,
    get_before_suffix,
    get_suffix,
    glob_to_regex,
    trim,
    trim_left,
    trim_right,
)
from stringkit.tokenizers import matched_tokenize, quoted_tokenize, split, tokenize, tokenize_to_set
from stringkit.tokens import (
    ALL_QUOTES,
    DEFAULT_DELIMITERS,
    DEFAULT_OPTIONS,
    ParseResult,
    TokenizeResult,
    TokenizerOptions,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_QUOTES",
    "DEFAULT_DELIMITERS",
    "DEFAULT_OPTIONS",
    "ConfigError",
    "ConversionResult",
    "Diagnostic",
    "ParseResult",
    "StringKitError",
    "TextConvertible",
    "TokenizeResult",
    "TokenizerOptions",
    "base_name",
    "cat_paths",
    "common_prefix",
    "dictionary_key",
    "dictionary_less_than",
    "dictionary_sorted",
    "get_before_suffix",
    "get_suffix",
    "glob_to_regex",
    "is_valid_identifier",
    "make_valid_identifier",
    "matched_tokenize",
    "path_name",
    "quoted_tokenize",
    "split",
    "string_to_double",
    "string_to_int64",
    "string_to_long",
    "string_to_uint64",
    "string_to_ulong",
    "stringify",
    "tokenize",
    "tokenize_to_set",
    "trim",
    "trim_left",
    "trim_right",
    "unescape_string",
    "unstringify",
    "xml_escape",
]
