"""Shared type aliases and small typing helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

type PathLike = str | Path
type OneOrMany[T] = T | Sequence[T]

type JsonPrimitive = str | int | float | bool | None
type JsonValue = JsonPrimitive | Mapping[str, JsonValue] | Sequence[JsonValue]


def ensure_path(p: PathLike) -> Path:
    """Return a normalized ``Path`` for the provided value.

    Parameters
    ----------
    p:
        String or ``Path`` input to normalize.

    Returns:
    -------
    pathlib.Path
        Normalized path instance.
    """
    return p if isinstance(p, Path) else Path(p)


def is_sequence(value: object) -> bool:
    """Return whether ``value`` is a non-text sequence.

    Strings and bytes are sequences to Python but never to callers here.

    Returns:
    -------
    bool
        ``True`` for lists, tuples and other non-text sequences.
    """
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def as_tuple[T](value: OneOrMany[T] | None) -> tuple[T, ...]:
    """Normalize a scalar-or-sequence argument into a tuple.

    Returns:
    -------
    tuple[T, ...]
        Empty for ``None``, a 1-tuple for scalars, otherwise the items in order.
    """
    if value is None:
        return ()
    if is_sequence(value):
        return tuple(value)  # type: ignore[arg-type]
    return (value,)  # type: ignore[return-value]


__all__ = [
    "JsonPrimitive",
    "JsonValue",
    "OneOrMany",
    "PathLike",
    "as_tuple",
    "ensure_path",
    "is_sequence",
]
