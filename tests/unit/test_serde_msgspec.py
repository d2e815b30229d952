"""Tests for the shared msgspec helpers."""

from __future__ import annotations

import re
from pathlib import Path

import msgspec
import pytest

from serde_msgspec import (
    StructBaseStrict,
    convert,
    dumps_json,
    field_names,
    validation_error_payload,
)


class _Sample(StructBaseStrict, frozen=True):
    name: str
    where: Path | None = None


def test_dumps_json_encodes_paths() -> None:
    """Ensure paths serialize as strings."""
    payload = {"path": Path("a/b.py")}
    assert dumps_json(payload) == b'{"path":"a/b.py"}'
    assert dumps_json(payload, pretty=True).startswith(b"{\n  ")


def test_dumps_json_rejects_unknown_types() -> None:
    """Ensure unsupported objects fail instead of being coerced."""
    with pytest.raises(TypeError):
        dumps_json({"pattern": re.compile("x+")})


def test_convert_decodes_paths() -> None:
    """Ensure string paths convert into Path fields."""
    sample = convert({"name": "x", "where": "src"}, target_type=_Sample)
    assert sample.where == Path("src")


def test_field_names() -> None:
    """Ensure field names come from the struct definition."""
    assert field_names(_Sample) == frozenset({"name", "where"})


def test_validation_error_payload_splits_path() -> None:
    """Ensure msgspec validation messages are split into summary and path."""
    with pytest.raises(msgspec.ValidationError) as excinfo:
        convert({"name": 3}, target_type=_Sample)
    payload = validation_error_payload(excinfo.value)
    assert payload["type"] == "ValidationError"
    assert payload["summary"] == "Expected `str`, got `int`"
    assert payload["path"] == "$.name"
