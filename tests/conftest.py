"""Shared fixtures for lexgrep tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.test_helpers.sources import DOCUMENTED_SOURCE, SAMPLE_SOURCE, SourceWriter


@pytest.fixture
def write_source(tmp_path: Path) -> SourceWriter:
    """Return a helper that writes source text under ``tmp_path``.

    Returns
    -------
    SourceWriter
        Callable taking a relative path and its contents.
    """

    def _write(rel_path: str, content: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_file(write_source: SourceWriter) -> Path:
    """Write the quoting scenario file.

    Returns
    -------
    Path
        Path to the written file.
    """
    return write_source("sample.py", SAMPLE_SOURCE)


@pytest.fixture
def documented_file(write_source: SourceWriter) -> Path:
    """Write a file with docstrings, comments, and an f-string.

    Returns
    -------
    Path
        Path to the written file.
    """
    return write_source("documented.py", DOCUMENTED_SOURCE)
