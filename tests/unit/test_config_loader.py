"""Tests for CLI config discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.config_loader import load_search_config
from search.errors import InvalidConfigurationError


def test_discovers_lexgrep_toml_in_parents(tmp_path: Path) -> None:
    """Ensure the nearest lexgrep.toml above the start directory wins."""
    (tmp_path / "lexgrep.toml").write_text('categories = ["comments"]\n', encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert load_search_config(None, start=nested) == {"categories": ["comments"]}


def test_lexgrep_toml_preferred_over_pyproject(tmp_path: Path) -> None:
    """Ensure a dedicated config file outranks pyproject.toml."""
    (tmp_path / "lexgrep.toml").write_text('pattern = "one"\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(
        '[tool.lexgrep]\npattern = "two"\n', encoding="utf-8"
    )
    assert load_search_config(None, start=tmp_path) == {"pattern": "one"}


def test_pyproject_tool_table(tmp_path: Path) -> None:
    """Ensure [tool.lexgrep] in pyproject.toml is used as a fallback."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.lexgrep]\nfilenames_only = true\n',
        encoding="utf-8",
    )
    assert load_search_config(None, start=tmp_path) == {"filenames_only": True}


def test_explicit_missing_file(tmp_path: Path) -> None:
    """Ensure an explicit config path must exist."""
    with pytest.raises(InvalidConfigurationError, match="Config file not found"):
        load_search_config(str(tmp_path / "absent.toml"))


def test_explicit_pyproject_without_table(tmp_path: Path) -> None:
    """Ensure an explicit pyproject.toml must carry the tool table."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match=r"missing \[tool.lexgrep\]"):
        load_search_config(str(path))


def test_invalid_toml(tmp_path: Path) -> None:
    """Ensure undecodable TOML is a configuration error."""
    path = tmp_path / "custom.toml"
    path.write_text("pattern = \n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match="Could not decode"):
        load_search_config(str(path))


def test_relative_inputs_follow_config_directory(tmp_path: Path) -> None:
    """Ensure relative root and files resolve against the config file's directory."""
    (tmp_path / "lexgrep.toml").write_text(
        'root = "src"\nfiles = ["a.py", "/abs/b.py"]\n', encoding="utf-8"
    )
    nested = tmp_path / "sub"
    nested.mkdir()
    config = load_search_config(None, start=nested)
    base = tmp_path.resolve()
    assert config["root"] == str(base / "src")
    assert config["files"] == [str(base / "a.py"), "/abs/b.py"]


def test_pyproject_relative_root(tmp_path: Path) -> None:
    """Ensure [tool.lexgrep] paths are anchored to the pyproject directory."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.lexgrep]\nroot = "lib"\n', encoding="utf-8"
    )
    nested = tmp_path / "lib" / "pkg"
    nested.mkdir(parents=True)
    assert load_search_config(None, start=nested) == {"root": str(tmp_path.resolve() / "lib")}
