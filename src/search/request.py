"""Validated search configuration."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

import msgspec

from core_types import OneOrMany, PathLike, as_tuple, ensure_path
from extract.repo_scan_fs import DEFAULT_EXCLUDE_DIRS, DEFAULT_INCLUDE_GLOBS
from search.categories import DEFAULT_CATEGORIES, DEFAULT_REGISTRY, CategoryRegistry
from search.errors import (
    ConflictingInputSpecError,
    InvalidConfigurationError,
    InvalidDirectoryError,
    InvalidFileError,
    InvalidPatternError,
    NoInputSpecifiedError,
    UnknownCategoryError,
)
from serde_msgspec import StructBaseStrict, convert, field_names, validation_error_payload

DEFAULT_ROOT = Path(".")


class SearchConfig(StructBaseStrict, frozen=True):
    """Configuration surface accepted from files and mappings."""

    root: str | None = None
    files: str | list[str] | None = None
    categories: str | list[str] | None = None
    pattern: str | None = None
    filenames_only: bool = False
    diagnostics_enabled: bool = False
    include_globs: list[str] | None = None
    exclude_dirs: list[str] | None = None


CONFIG_KEYS: frozenset[str] = field_names(SearchConfig)


def compile_pattern(pattern: str | re.Pattern[str] | None) -> re.Pattern[str]:
    """Compile a user pattern; ``None`` and ``""`` match every string.

    Returns
    -------
    re.Pattern[str]
        Compiled pattern.

    Raises
    ------
    InvalidPatternError
        Raised when the expression does not compile.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    source = pattern or ""
    try:
        return re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(source, str(exc)) from exc


def _checked_root(root: PathLike) -> Path:
    path = ensure_path(root)
    if not path.is_dir():
        raise InvalidDirectoryError(path)
    return path


def _checked_files(files: Sequence[PathLike]) -> tuple[Path, ...]:
    paths = tuple(ensure_path(item) for item in files)
    for path in paths:
        if not (path.exists() and os.access(path, os.R_OK)):
            raise InvalidFileError(path)
    return paths


def _checked_categories(
    categories: OneOrMany[str] | None,
    registry: CategoryRegistry,
) -> tuple[str, ...]:
    names = as_tuple(categories) or DEFAULT_CATEGORIES
    resolved: list[str] = []
    for name in names:
        if not registry.is_known(name):
            raise UnknownCategoryError(name)
        canonical = registry.canonical(name)
        if canonical not in resolved:
            resolved.append(canonical)
    return tuple(resolved)


@dataclass(frozen=True)
class SearchRequest:
    """Immutable, fully validated search request.

    Exactly one of ``root`` and ``files`` is active. Use ``build`` or
    ``from_config`` to construct one from user input; the ``with_*`` methods
    return a copy with one field replaced and re-checked.
    """

    root: Path | None
    files: tuple[Path, ...]
    categories: tuple[str, ...]
    pattern: re.Pattern[str]
    filenames_only: bool = False
    diagnostics_enabled: bool = False
    include_globs: tuple[str, ...] = DEFAULT_INCLUDE_GLOBS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    registry: CategoryRegistry = field(default=DEFAULT_REGISTRY, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.root is not None and self.files:
            raise ConflictingInputSpecError
        if self.root is None and not self.files:
            raise NoInputSpecifiedError
        if not self.categories:
            msg = "At least one category is required."
            raise InvalidConfigurationError(msg, keys=("categories",))
        for name in self.categories:
            self.registry.resolve(name)

    @classmethod
    def build(
        cls,
        *,
        root: PathLike | None = None,
        files: OneOrMany[PathLike] | None = None,
        categories: OneOrMany[str] | None = None,
        pattern: str | re.Pattern[str] | None = "",
        filenames_only: bool = False,
        diagnostics_enabled: bool = False,
        include_globs: Sequence[str] | None = None,
        exclude_dirs: Sequence[str] | None = None,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
    ) -> SearchRequest:
        """Validate every field and return a request.

        Returns
        -------
        SearchRequest
            Validated request; ``root`` defaults to the current directory.

        Raises
        ------
        ConflictingInputSpecError
            Raised when both ``root`` and ``files`` are supplied.
        """
        file_list = as_tuple(files)
        if root is not None and file_list:
            raise ConflictingInputSpecError
        checked_root = None if file_list else _checked_root(root or DEFAULT_ROOT)
        return cls(
            root=checked_root,
            files=_checked_files(file_list),
            categories=_checked_categories(categories, registry),
            pattern=compile_pattern(pattern),
            filenames_only=bool(filenames_only),
            diagnostics_enabled=bool(diagnostics_enabled),
            include_globs=(
                DEFAULT_INCLUDE_GLOBS if include_globs is None else tuple(include_globs)
            ),
            exclude_dirs=DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else tuple(exclude_dirs),
            registry=registry,
        )

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, object],
        *,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
    ) -> SearchRequest:
        """Build a request from a configuration mapping.

        Returns
        -------
        SearchRequest
            Validated request.

        Raises
        ------
        InvalidConfigurationError
            Raised for unknown keys (listed sorted) or mistyped values.
        """
        unknown = {str(key) for key in config} - CONFIG_KEYS
        if unknown:
            raise InvalidConfigurationError.unknown_keys(unknown)
        try:
            settings = convert(dict(config), target_type=SearchConfig)
        except msgspec.ValidationError as exc:
            details = validation_error_payload(exc)
            location = f" at {details['path']}" if "path" in details else ""
            msg = f"Invalid configuration{location}: {details.get('summary', exc)}"
            raise InvalidConfigurationError(msg) from exc
        return cls.build(
            root=settings.root,
            files=settings.files,
            categories=settings.categories,
            pattern=settings.pattern,
            filenames_only=settings.filenames_only,
            diagnostics_enabled=settings.diagnostics_enabled,
            include_globs=settings.include_globs,
            exclude_dirs=settings.exclude_dirs,
            registry=registry,
        )

    def with_root(self, root: PathLike) -> SearchRequest:
        """Return a copy searching ``root`` instead of the current input.

        Returns
        -------
        SearchRequest
            Request with ``root`` set and ``files`` cleared.
        """
        return replace(self, root=_checked_root(root), files=())

    def with_files(self, files: OneOrMany[PathLike]) -> SearchRequest:
        """Return a copy searching exactly ``files``.

        Returns
        -------
        SearchRequest
            Request with ``files`` set and ``root`` cleared.
        """
        return replace(self, root=None, files=_checked_files(as_tuple(files)))

    def with_categories(self, categories: OneOrMany[str] | None) -> SearchRequest:
        """Return a copy searching ``categories``.

        Returns
        -------
        SearchRequest
            Request with canonical categories.
        """
        return replace(self, categories=_checked_categories(categories, self.registry))

    def with_pattern(self, pattern: str | re.Pattern[str] | None) -> SearchRequest:
        """Return a copy matching ``pattern``.

        Returns
        -------
        SearchRequest
            Request with a recompiled pattern.
        """
        return replace(self, pattern=compile_pattern(pattern))

    def with_filenames_only(self, enabled: bool) -> SearchRequest:
        return replace(self, filenames_only=bool(enabled))

    def with_diagnostics(self, enabled: bool) -> SearchRequest:
        return replace(self, diagnostics_enabled=bool(enabled))


__all__ = ["CONFIG_KEYS", "SearchConfig", "SearchRequest", "compile_pattern"]
