"""Shared msgspec policy and helpers."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal

import msgspec


class StructBaseStrict(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Base struct for strict contracts."""


class StructBaseCompat(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=False,
    repr_omit_defaults=True,
    forbid_unknown_fields=False,
):
    """Base struct for forward-compatible output payloads."""


_DEFAULT_ORDER: Literal["deterministic"] = "deterministic"

_VALIDATION_RE = re.compile(r"^(?P<summary>.*?)(?:\s+-\s+at\s+`(?P<path>[^`]+)`)?$")


def _json_enc_hook(obj: object) -> object:
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError


def _dec_hook(type_hint: object, obj: object) -> object:
    if type_hint is Path and isinstance(obj, str):
        return Path(obj)
    return obj


JSON_ENCODER = msgspec.json.Encoder(
    enc_hook=_json_enc_hook,
    order=_DEFAULT_ORDER,
)


def field_names(struct: type[msgspec.Struct]) -> frozenset[str]:
    """Return the encoded field names accepted by a struct type.

    Returns
    -------
    frozenset[str]
        Encoded names of every struct field.
    """
    return frozenset(field.encode_name for field in msgspec.structs.fields(struct))


def validation_error_payload(exc: msgspec.ValidationError) -> dict[str, str]:
    """Normalize a msgspec ValidationError for diagnostics.

    Parameters
    ----------
    exc
        ValidationError raised by msgspec decoding/conversion.

    Returns
    -------
    dict[str, str]
        Normalized error payload containing type, summary, and optional path.
    """
    message = str(exc).strip()
    match = _VALIDATION_RE.match(message)
    payload: dict[str, str] = {"type": exc.__class__.__name__}
    if match:
        summary = (match.group("summary") or "").strip()
        if summary:
            payload["summary"] = summary
        path = match.group("path")
        if path:
            payload["path"] = path
        return payload
    payload["summary"] = message
    return payload


def dumps_json(obj: object, *, pretty: bool = False) -> bytes:
    """Serialize an object to JSON bytes.

    Parameters
    ----------
    obj
        Object to serialize.
    pretty
        Whether to format with indentation.

    Returns
    -------
    bytes
        JSON payload.
    """
    raw = JSON_ENCODER.encode(obj)
    if not pretty:
        return raw
    return msgspec.json.format(raw, indent=2)


def convert[T](
    obj: object,
    *,
    target_type: type[T],
    strict: bool = True,
) -> T:
    """Convert builtins into a typed value using the shared decode hook.

    Returns
    -------
    T
        Converted value.
    """
    return msgspec.convert(obj, type=target_type, strict=strict, dec_hook=_dec_hook)


__all__ = [
    "JSON_ENCODER",
    "StructBaseCompat",
    "StructBaseStrict",
    "convert",
    "dumps_json",
    "field_names",
    "validation_error_payload",
]
