"""Text and JSON presentation of search results."""

from __future__ import annotations

from collections.abc import Iterable

from search.results import FileResults
from serde_msgspec import dumps_json


def render_text(found: FileResults) -> str:
    """Render one file's results, draining its cursors.

    Returns
    -------
    str
        The file path, then each category group with one ``repr`` per match.
    """
    lines = [str(found.file_path)]
    if not found.filenames_only:
        for group in found:
            lines.append(f"  '{group.category}' matched:")
            lines.extend(f"    {item!r}" for item in group)
    return "\n".join(lines) + "\n"


def render_json(results: Iterable[FileResults]) -> str:
    """Render results as an indented JSON array.

    Returns
    -------
    str
        JSON document followed by a newline.
    """
    reports = [found.to_report() for found in results]
    return dumps_json(reports, pretty=True).decode("utf-8") + "\n"


__all__ = ["render_json", "render_text"]
