"""Two-level result containers produced by the document scanner.

A ``FileResults`` holds one ``CategoryResults`` group per category that
matched; each group holds rendered matches in document order. Both containers
expose a single forward cursor through ``next()`` (``None`` once exhausted)
and through iteration. The cursor is single-pass: a drained container stays
drained. ``groups``, ``matches`` and ``to_report()`` read the data without
moving the cursor.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

from core_types import PathLike, ensure_path, is_sequence
from search.categories import DEFAULT_REGISTRY, CategoryRegistry
from search.errors import (
    FilenameOnlyResultsUnavailableError,
    NonSequenceResultsOnAddError,
    UnknownTokenOnAddError,
)
from serde_msgspec import StructBaseCompat


class CategoryMatchReport(StructBaseCompat, frozen=True):
    """Serializable snapshot of one category group."""

    category: str
    matches: tuple[str, ...] = ()


class FileMatchReport(StructBaseCompat, frozen=True):
    """Serializable snapshot of one file's results."""

    path: str
    filenames_only: bool = False
    groups: tuple[CategoryMatchReport, ...] = ()


class CategoryResults:
    """Rendered matches for one category in one file."""

    __slots__ = ("_category", "_cursor", "_matches")

    def __init__(self, category: str, matches: Sequence[str]) -> None:
        if not is_sequence(matches):
            raise NonSequenceResultsOnAddError(matches)
        self._category = category
        self._matches = tuple(matches)
        self._cursor = 0

    def __repr__(self) -> str:
        return f"CategoryResults({self._category!r}, {len(self._matches)} matches)"

    @property
    def category(self) -> str:
        return self._category

    @property
    def matches(self) -> tuple[str, ...]:
        return self._matches

    @property
    def remaining(self) -> int:
        return len(self._matches) - self._cursor

    def next(self) -> str | None:
        """Return the next match, or ``None`` when exhausted."""
        if self._cursor >= len(self._matches):
            return None
        item = self._matches[self._cursor]
        self._cursor += 1
        return item

    def __iter__(self) -> Iterator[str]:
        while (item := self.next()) is not None:
            yield item

    def to_report(self) -> CategoryMatchReport:
        return CategoryMatchReport(category=self._category, matches=self._matches)


class FileResults:
    """Per-file results, grouped by category in processing order.

    When ``filenames_only`` is set the container records only that the file
    matched; reading groups raises ``FilenameOnlyResultsUnavailableError``.
    """

    __slots__ = ("_cursor", "_file_path", "_filenames_only", "_groups", "_registry")

    def __init__(
        self,
        file_path: PathLike,
        *,
        filenames_only: bool = False,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._file_path = ensure_path(file_path)
        self._filenames_only = bool(filenames_only)
        self._registry = registry
        self._groups: list[CategoryResults] = []
        self._cursor = 0

    def __repr__(self) -> str:
        if self._filenames_only:
            return f"FileResults({str(self._file_path)!r}, filenames_only=True)"
        names = ", ".join(group.category for group in self._groups)
        return f"FileResults({str(self._file_path)!r}, [{names}])"

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def filenames_only(self) -> bool:
        return self._filenames_only

    @property
    def have_results(self) -> bool:
        """Whether the file matched at all."""
        return self._filenames_only or bool(self._groups)

    @property
    def groups(self) -> tuple[CategoryResults, ...]:
        """Category groups in processing order.

        Raises
        ------
        FilenameOnlyResultsUnavailableError
            Raised for filenames-only results.
        """
        self._require_groups()
        return tuple(self._groups)

    def add_results(self, category: str, matches: Sequence[str]) -> FileResults:
        """Attach matches for ``category``.

        Filenames-only results keep no per-category data, so the call is
        accepted and discarded.

        Returns
        -------
        FileResults
            ``self``, for chaining.

        Raises
        ------
        UnknownTokenOnAddError
            Raised when ``category`` is not registered.
        NonSequenceResultsOnAddError
            Raised when ``matches`` is not a non-text sequence.
        """
        if not self._registry.is_known(category):
            raise UnknownTokenOnAddError(category)
        group = CategoryResults(self._registry.canonical(category), matches)
        if not self._filenames_only:
            self._groups.append(group)
        return self

    def next(self) -> CategoryResults | None:
        """Return the next category group, or ``None`` when exhausted.

        Raises
        ------
        FilenameOnlyResultsUnavailableError
            Raised for filenames-only results.
        """
        self._require_groups()
        if self._cursor >= len(self._groups):
            return None
        group = self._groups[self._cursor]
        self._cursor += 1
        return group

    def __iter__(self) -> Iterator[CategoryResults]:
        self._require_groups()
        while (group := self.next()) is not None:
            yield group

    def to_report(self) -> FileMatchReport:
        """Snapshot the results without moving either cursor.

        Returns
        -------
        FileMatchReport
            Serializable copy of the results.
        """
        groups = () if self._filenames_only else tuple(g.to_report() for g in self._groups)
        return FileMatchReport(
            path=str(self._file_path),
            filenames_only=self._filenames_only,
            groups=groups,
        )

    def _require_groups(self) -> None:
        if self._filenames_only:
            raise FilenameOnlyResultsUnavailableError(self._file_path)


__all__ = [
    "CategoryMatchReport",
    "CategoryResults",
    "FileMatchReport",
    "FileResults",
]
