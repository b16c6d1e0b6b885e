"""Shared test fixtures and helpers."""

from __future__ import annotations

import io

import pytest

from stringkit.cli import main
from stringkit.tokens import TokenizeResult


@pytest.fixture
def run_cli(monkeypatch, capsys, tmp_path):
    """Return a helper that runs the CLI and returns (exit code, stdout, stderr).

    Runs inside tmp_path so no stray stringkit.toml is auto-discovered.
    """
    monkeypatch.chdir(tmp_path)

    def _run(argv: list[str], stdin: str = "") -> tuple[int, str, str]:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        code = main(argv)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


def assert_tokens(result: TokenizeResult, expected: list[str]) -> None:
    """Assert that the scanned tokens match the expected list."""
    assert result.tokens == expected, f"Expected {expected}, got {result.tokens}"


def messages(result: TokenizeResult) -> list[str]:
    """Return the diagnostic messages of a tokenize result."""
    return [d.message for d in result.diagnostics]
