"""Filesystem-backed source file listing."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

DEFAULT_INCLUDE_GLOBS: tuple[str, ...] = ("*.py", "*.pyi")
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    ".git",
    ".hg",
    ".svn",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    ".venv",
    "__pycache__",
    "node_modules",
)


def _matches_any_glob(rel_path: Path, globs: Sequence[str]) -> bool:
    rel_posix = rel_path.as_posix()
    return any(
        fnmatch.fnmatch(rel_path.name, glob) or fnmatch.fnmatch(rel_posix, glob)
        for glob in globs
    )


def iter_source_files(
    root: Path,
    *,
    include_globs: Sequence[str] = DEFAULT_INCLUDE_GLOBS,
    exclude_dirs: Sequence[str] = DEFAULT_EXCLUDE_DIRS,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Yield source files under ``root`` depth-first with pruning.

    Parameters
    ----------
    root : Path
        Directory to walk.
    include_globs : Sequence[str]
        Glob patterns matched against the file name or root-relative path
        (empty means include all).
    exclude_dirs : Sequence[str]
        Directory names to prune during traversal.
    follow_symlinks : bool
        Whether to follow symlinked directories and files.

    Yields
    ------
    Path
        File paths joined onto ``root``, in sorted walk order.
    """
    excluded = frozenset(exclude_dirs)
    for current, dirs, files in os.walk(root, followlinks=follow_symlinks):
        current_path = Path(current)
        dirs[:] = sorted(
            name
            for name in dirs
            if name not in excluded
            and (follow_symlinks or not (current_path / name).is_symlink())
        )
        for filename in sorted(files):
            path = current_path / filename
            if not follow_symlinks and path.is_symlink():
                continue
            if include_globs and not _matches_any_glob(path.relative_to(root), include_globs):
                continue
            yield path


__all__ = ["DEFAULT_EXCLUDE_DIRS", "DEFAULT_INCLUDE_GLOBS", "iter_source_files"]
