"""Minimal LSP server for quoted argument files: diagnostics only.

Every non-blank line that does not start with '#' is tokenized like a quoted
argument list. When a [matched] delimiter pair is configured in
stringkit.toml, each line is also checked for balanced delimiters.
"""

from __future__ import annotations

from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from stringkit import __version__
from stringkit.cli import Settings, load_config, settings_from_config
from stringkit.errors import ConfigError
from stringkit.errors import Diagnostic as ScanDiagnostic
from stringkit.tokenizers import matched_tokenize, quoted_tokenize

server = LanguageServer(
    "stringkit-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _to_lsp(
    diag: ScanDiagnostic, line: int, severity: DiagnosticSeverity
) -> Diagnostic:
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=diag.offset),
            end=Position(line=line, character=diag.offset + 1),
        ),
        message=diag.message,
        severity=severity,
        source="stringkit",
    )


def check_source(source: str, settings: Settings) -> list[Diagnostic]:
    """Return LSP diagnostics for every malformed line in source."""
    diagnostics: list[Diagnostic] = []
    check_matched = settings.open_delimiter is not None and settings.close_delimiter is not None

    for line_no, line in enumerate(source.splitlines()):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        quoted = quoted_tokenize(line, settings.tokenizer)
        for d in quoted.diagnostics:
            diagnostics.append(_to_lsp(d, line_no, DiagnosticSeverity.Error))

        if check_matched:
            matched = matched_tokenize(
                line,
                settings.open_delimiter,
                settings.close_delimiter,
                settings.matched_escape,
            )
            for d in matched.diagnostics:
                diagnostics.append(_to_lsp(d, line_no, DiagnosticSeverity.Warning))

    return diagnostics


def _validate(ls: LanguageServer, uri: str) -> None:
    """Check the document against the config next to it and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source

    try:
        settings = settings_from_config(load_config(None, Path(doc.path).parent))
    except ConfigError as exc:
        diagnostics = [
            Diagnostic(
                range=Range(
                    start=Position(line=0, character=0),
                    end=Position(line=0, character=1),
                ),
                message=f"config: {exc}",
                severity=DiagnosticSeverity.Error,
                source="stringkit",
            )
        ]
    else:
        diagnostics = check_source(source, settings)

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
