"""Drive a search across every input file."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from extract.repo_scan_fs import iter_source_files
from extract.tokens import DocumentParser
from extract.tree_sitter_parse import TreeSitterDocumentParser
from search.errors import NoInputSpecifiedError
from search.request import SearchRequest
from search.results import FileResults
from search.scanner import DiagnosticSink, scan_file

logger = logging.getLogger(__name__)

type ResultSink = Callable[[FileResults], None]


def iter_file_paths(request: SearchRequest) -> Iterator[Path]:
    """Yield the files a request covers, in enumeration order.

    Yields
    ------
    Path
        Walked files under ``root``, or the explicit files as given.

    Raises
    ------
    NoInputSpecifiedError
        Raised when the request has neither a root nor files.
    """
    if request.root is not None:
        yield from iter_source_files(
            request.root,
            include_globs=request.include_globs,
            exclude_dirs=request.exclude_dirs,
        )
    elif request.files:
        yield from request.files
    else:
        raise NoInputSpecifiedError


def iter_search(
    request: SearchRequest,
    *,
    parser: DocumentParser | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> Iterator[FileResults]:
    """Yield results file by file as soon as each file is scanned.

    Files that fail to parse are skipped; they never end the run.

    Yields
    ------
    FileResults
        Non-empty results in enumeration order.
    """
    active_parser = parser if parser is not None else TreeSitterDocumentParser()
    scanned = 0
    matched = 0
    for path in iter_file_paths(request):
        scanned += 1
        found = scan_file(path, request, parser=active_parser, on_diagnostic=on_diagnostic)
        if found is None:
            continue
        matched += 1
        yield found
    logger.debug("Scanned %d files, %d matched", scanned, matched)


def search(
    request: SearchRequest,
    *,
    parser: DocumentParser | None = None,
    on_result: ResultSink | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> list[FileResults]:
    """Run a search and collect every non-empty result.

    ``on_result``, when given, receives each result as it is produced.

    Returns
    -------
    list[FileResults]
        Results in enumeration order.
    """
    results: list[FileResults] = []
    for found in iter_search(request, parser=parser, on_diagnostic=on_diagnostic):
        if on_result is not None:
            on_result(found)
        results.append(found)
    return results


__all__ = ["ResultSink", "iter_file_paths", "iter_search", "search"]
