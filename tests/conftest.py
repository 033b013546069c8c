"""Shared pytest fixtures and configuration for the minigrep test suite.

Guidelines
----------
* Files are only created under ``tmp_path``.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

from pathlib import Path

import pytest

POEM: str = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."
"""Sample content with one case-sensitive ``duct`` match."""

TRUST_POEM: str = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."
"""Sample content with two case-insensitive ``rust`` matches."""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IGNORE_CASE", raising=False)
    monkeypatch.delenv("MINIGREP_LOG_LEVEL", raising=False)


@pytest.fixture()
def poem_file(tmp_path: Path) -> Path:
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture()
def trust_file(tmp_path: Path) -> Path:
    path = tmp_path / "trust.txt"
    path.write_text(TRUST_POEM, encoding="utf-8")
    return path
