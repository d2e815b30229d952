"""Tests for search request validation."""

from __future__ import annotations

import dataclasses
import re
from pathlib import Path

import pytest

from search.errors import (
    ConflictingInputSpecError,
    InvalidConfigurationError,
    InvalidDirectoryError,
    InvalidFileError,
    InvalidPatternError,
    NoInputSpecifiedError,
    UnknownCategoryError,
)
from search.request import SearchRequest, compile_pattern


def test_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure an empty request searches the cwd for quotes and heredocs."""
    monkeypatch.chdir(tmp_path)
    request = SearchRequest.build()
    assert request.root == Path(".")
    assert request.files == ()
    assert request.categories == ("quote", "heredoc")
    assert request.pattern.pattern == ""
    assert not request.filenames_only
    assert not request.diagnostics_enabled


def test_root_and_files_conflict(sample_file: Path) -> None:
    """Ensure root and explicit files are mutually exclusive."""
    with pytest.raises(ConflictingInputSpecError):
        SearchRequest.build(root=sample_file.parent, files=[sample_file])


def test_missing_root(tmp_path: Path) -> None:
    """Ensure a missing directory is rejected."""
    with pytest.raises(InvalidDirectoryError, match="missing"):
        SearchRequest.build(root=tmp_path / "missing")


def test_root_must_be_directory(sample_file: Path) -> None:
    """Ensure a file is not accepted as the search root."""
    with pytest.raises(InvalidDirectoryError):
        SearchRequest.build(root=sample_file)


def test_missing_file(tmp_path: Path, sample_file: Path) -> None:
    """Ensure every explicit file must exist."""
    with pytest.raises(InvalidFileError, match=r"nope\.py"):
        SearchRequest.build(files=[sample_file, tmp_path / "nope.py"])


def test_single_file_and_category_convenience(sample_file: Path) -> None:
    """Ensure scalar files and categories are accepted."""
    request = SearchRequest.build(files=sample_file, categories="comments")
    assert request.root is None
    assert request.files == (sample_file,)
    assert request.categories == ("comment",)


def test_unknown_category(tmp_path: Path) -> None:
    """Ensure unknown categories are named in the error."""
    with pytest.raises(UnknownCategoryError, match="frobnicate") as excinfo:
        SearchRequest.build(root=tmp_path, categories=["quote", "frobnicate"])
    assert excinfo.value.name == "frobnicate"


def test_categories_are_canonical_and_unique(tmp_path: Path) -> None:
    """Ensure plural forms collapse onto their singular category."""
    request = SearchRequest.build(root=tmp_path, categories=["comments", "pod", "comment"])
    assert request.categories == ("comment", "pod")


def test_invalid_pattern(tmp_path: Path) -> None:
    """Ensure invalid expressions surface the regex complaint."""
    with pytest.raises(InvalidPatternError, match="nothing to repeat") as excinfo:
        SearchRequest.build(root=tmp_path, pattern="?")
    assert isinstance(excinfo.value.__cause__, re.error)


def test_compile_pattern_accepts_compiled() -> None:
    """Ensure precompiled patterns pass through unchanged."""
    compiled = re.compile("abc", re.IGNORECASE)
    assert compile_pattern(compiled) is compiled
    assert compile_pattern(None).pattern == ""


def test_request_is_immutable(tmp_path: Path) -> None:
    """Ensure fields cannot be reassigned after validation."""
    request = SearchRequest.build(root=tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.root = None  # type: ignore[misc]


def test_direct_construction_checks_inputs() -> None:
    """Ensure a request cannot exist without an input."""
    with pytest.raises(NoInputSpecifiedError):
        SearchRequest(root=None, files=(), categories=("quote",), pattern=re.compile(""))


def test_with_root_revalidates(tmp_path: Path, sample_file: Path) -> None:
    """Ensure changing the root checks the new directory and clears files."""
    request = SearchRequest.build(files=[sample_file])
    moved = request.with_root(tmp_path)
    assert moved.root == tmp_path
    assert moved.files == ()
    with pytest.raises(InvalidDirectoryError):
        request.with_root(tmp_path / "missing")


def test_with_files_clears_root(tmp_path: Path, sample_file: Path) -> None:
    """Ensure switching to explicit files clears the root."""
    request = SearchRequest.build(root=tmp_path).with_files([sample_file])
    assert request.root is None
    assert request.files == (sample_file,)


def test_with_categories_and_pattern(tmp_path: Path) -> None:
    """Ensure field mutators re-check only their field."""
    request = SearchRequest.build(root=tmp_path)
    assert request.with_categories("pods").categories == ("pod",)
    assert request.with_pattern("TODO").pattern.pattern == "TODO"
    assert request.with_filenames_only(True).filenames_only
    assert request.with_diagnostics(True).diagnostics_enabled
    with pytest.raises(UnknownCategoryError):
        request.with_categories(["nope"])
    with pytest.raises(InvalidPatternError):
        request.with_pattern("(")


def test_from_config(tmp_path: Path) -> None:
    """Ensure configuration mappings build equivalent requests."""
    request = SearchRequest.from_config(
        {
            "root": str(tmp_path),
            "categories": ["comments"],
            "pattern": "TODO",
            "filenames_only": True,
        }
    )
    assert request.root == tmp_path
    assert request.categories == ("comment",)
    assert request.pattern.pattern == "TODO"
    assert request.filenames_only


def test_from_config_unknown_keys_sorted(tmp_path: Path) -> None:
    """Ensure every unknown key is listed in sorted order."""
    with pytest.raises(InvalidConfigurationError) as excinfo:
        SearchRequest.from_config({"zeta": 1, "root": str(tmp_path), "alpha": 2})
    assert excinfo.value.keys == ("alpha", "zeta")
    assert "(alpha, zeta)" in str(excinfo.value)


def test_from_config_type_mismatch(tmp_path: Path) -> None:
    """Ensure mistyped values are configuration errors."""
    with pytest.raises(InvalidConfigurationError, match="filenames_only"):
        SearchRequest.from_config({"root": str(tmp_path), "filenames_only": "yes"})
