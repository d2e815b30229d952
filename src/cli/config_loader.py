"""Config file discovery and decoding for the CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import cast

import msgspec

from core_types import JsonValue
from search.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "lexgrep.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_KEY = "lexgrep"


def load_search_config(
    config_file: str | None,
    *,
    start: Path | None = None,
) -> dict[str, JsonValue]:
    """Load search settings from an explicit file or the nearest config file.

    Without ``config_file``, the first ``lexgrep.toml`` found walking up from
    ``start`` (default: cwd) wins, then a ``pyproject.toml`` with a
    ``[tool.lexgrep]`` table. Relative ``root`` and ``files`` entries are
    resolved against the directory holding the config file.

    Parameters
    ----------
    config_file
        Optional explicit config file path.
    start
        Directory to begin the parent walk from.

    Returns:
    -------
    dict[str, JsonValue]
        Raw configuration contents (validated later by ``SearchRequest``).

    Raises:
    ------
    InvalidConfigurationError
        Raised when an explicit file is missing or lacks its tool table.
    """
    if config_file:
        path = Path(config_file)
        if not path.is_file():
            msg = f"Config file not found: {config_file!r}."
            raise InvalidConfigurationError(msg)
        raw = _read_toml(path)
        if path.name != PYPROJECT_FILENAME:
            return _anchor_paths(raw, path.parent)
        nested = _extract_tool_config(raw)
        if nested is None:
            msg = f"Config validation failed for {path}: missing [tool.{TOOL_KEY}] section."
            raise InvalidConfigurationError(msg)
        return _anchor_paths(nested, path.parent)

    config_path = _find_in_parents(CONFIG_FILENAME, start=start)
    if config_path is not None:
        logger.debug("Using config from %s", config_path)
        return _anchor_paths(_read_toml(config_path), config_path.parent)
    pyproject_path = _find_in_parents(PYPROJECT_FILENAME, start=start)
    if pyproject_path is not None:
        nested = _extract_tool_config(_read_toml(pyproject_path))
        if nested is not None:
            logger.debug("Using config from %s:tool.%s", pyproject_path, TOOL_KEY)
            return _anchor_paths(nested, pyproject_path.parent)
    return {}


def _find_in_parents(filename: str, *, start: Path | None = None) -> Path | None:
    path = (start or Path.cwd()).resolve()
    while True:
        candidate = path / filename
        if candidate.is_file():
            return candidate
        if path.parent == path:
            return None
        path = path.parent


def _read_toml(path: Path) -> dict[str, JsonValue]:
    try:
        payload = msgspec.toml.decode(path.read_text(encoding="utf-8"), type=object)
    except msgspec.DecodeError as exc:
        msg = f"Could not decode config file {path}: {exc}"
        raise InvalidConfigurationError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Expected TOML mapping in {path}, got {type(payload).__name__}."
        raise InvalidConfigurationError(msg)
    return cast("dict[str, JsonValue]", payload)


def _anchor_path(value: JsonValue, base: Path) -> JsonValue:
    if isinstance(value, str) and not Path(value).is_absolute():
        return str(base / value)
    return value


def _anchor_paths(raw: dict[str, JsonValue], base: Path) -> dict[str, JsonValue]:
    anchored = dict(raw)
    if "root" in anchored:
        anchored["root"] = _anchor_path(anchored["root"], base)
    files = anchored.get("files")
    if isinstance(files, list):
        anchored["files"] = [_anchor_path(item, base) for item in files]
    elif files is not None:
        anchored["files"] = _anchor_path(files, base)
    return anchored


def _extract_tool_config(raw: Mapping[str, JsonValue]) -> dict[str, JsonValue] | None:
    tool_section = raw.get("tool")
    if not isinstance(tool_section, dict):
        return None
    nested = tool_section.get(TOOL_KEY)
    if not isinstance(nested, dict):
        return None
    return cast("dict[str, JsonValue]", nested)


__all__ = ["CONFIG_FILENAME", "load_search_config"]
