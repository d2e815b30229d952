"""Extraction layer.

Parsers turn source files into token documents; scanners enumerate the files
to parse.

Exports:
- token model -> Token, TokenKind, SourceDocument
- tree-sitter parsing -> TreeSitterDocumentParser
- filesystem listing -> iter_source_files
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extract.repo_scan_fs import iter_source_files
    from extract.tokens import (
        DocumentParseError,
        DocumentParser,
        SourceDocument,
        Token,
        TokenKind,
    )
    from extract.tree_sitter_parse import TreeSitterDocumentParser

_EXPORTS: dict[str, tuple[str, str]] = {
    "DocumentParseError": ("extract.tokens", "DocumentParseError"),
    "DocumentParser": ("extract.tokens", "DocumentParser"),
    "SourceDocument": ("extract.tokens", "SourceDocument"),
    "Token": ("extract.tokens", "Token"),
    "TokenKind": ("extract.tokens", "TokenKind"),
    "TreeSitterDocumentParser": ("extract.tree_sitter_parse", "TreeSitterDocumentParser"),
    "iter_source_files": ("extract.repo_scan_fs", "iter_source_files"),
}


def __getattr__(name: str) -> object:
    target = _EXPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr = target
    module = importlib.import_module(module_name)
    return getattr(module, attr)


def __dir__() -> list[str]:
    return sorted(list(globals()) + list(_EXPORTS))


__all__ = (
    "DocumentParseError",
    "DocumentParser",
    "SourceDocument",
    "Token",
    "TokenKind",
    "TreeSitterDocumentParser",
    "iter_source_files",
)
