"""Scan one document for category-restricted pattern matches."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from extract.tokens import DocumentParseError, DocumentParser
from extract.tree_sitter_parse import TreeSitterDocumentParser
from search.request import SearchRequest
from search.results import FileResults
from serde_msgspec import StructBaseStrict

logger = logging.getLogger(__name__)


class SearchDiagnostic(StructBaseStrict, frozen=True):
    """Non-fatal per-file problem reported during a search."""

    path: str
    message: str


type DiagnosticSink = Callable[[SearchDiagnostic], None]


def log_diagnostic(diagnostic: SearchDiagnostic) -> None:
    """Default sink: log the diagnostic at WARNING."""
    logger.warning("%s", diagnostic.message)


def scan_file(
    path: Path,
    request: SearchRequest,
    *,
    parser: DocumentParser | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> FileResults | None:
    """Search one file for the request's categories and pattern.

    Categories are processed in request order and matches keep document order.
    In filenames-only mode the first match anywhere ends the scan.

    Returns
    -------
    FileResults | None
        Results for the file, or ``None`` when nothing matched or the file
        could not be parsed.
    """
    active_parser = parser if parser is not None else TreeSitterDocumentParser()
    try:
        document = active_parser.parse(path)
    except DocumentParseError as exc:
        if request.diagnostics_enabled:
            sink = on_diagnostic if on_diagnostic is not None else log_diagnostic
            sink(SearchDiagnostic(path=str(path), message=f"{exc}. Skipping."))
        return None

    found = FileResults(
        path,
        filenames_only=request.filenames_only,
        registry=request.registry,
    )
    pattern = request.pattern
    for category in request.categories:
        descriptor = request.registry.resolve(category)
        matches: list[str] = []
        for token in document.find(descriptor.kinds):
            rendered = descriptor.render(token)
            if pattern.search(rendered) is None:
                continue
            if request.filenames_only:
                logger.debug("Matched %s in %s; stopping early", descriptor.name, path)
                return found
            matches.append(rendered)
        if matches:
            found.add_results(descriptor.name, matches)
    if request.filenames_only or not found.have_results:
        return None
    return found


__all__ = ["DiagnosticSink", "SearchDiagnostic", "log_diagnostic", "scan_file"]
