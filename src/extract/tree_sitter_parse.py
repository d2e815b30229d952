"""Classify Python source regions into search tokens using tree-sitter."""

from __future__ import annotations

import ast
import logging
import warnings
from collections.abc import Iterator
from pathlib import Path

import tree_sitter_python
from tree_sitter import (
    LANGUAGE_VERSION,
    MIN_COMPATIBLE_LANGUAGE_VERSION,
    Language,
    Node,
    Parser,
)

from extract.tokens import DocumentParseError, SourceDocument, Token, TokenKind

logger = logging.getLogger(__name__)

PY_LANGUAGE = Language(tree_sitter_python.language())

_TRIPLE_QUOTES = (b'"""', b"'''")
_DOC_OWNERS = frozenset({"class_definition", "function_definition"})


def _assert_language_abi(lang: Language) -> None:
    if not (MIN_COMPATIBLE_LANGUAGE_VERSION <= lang.abi_version <= LANGUAGE_VERSION):
        msg = f"Tree-sitter ABI mismatch: {lang.abi_version}"
        raise ValueError(msg)


def _node_source(node: Node, data: bytes) -> str:
    return data[node.start_byte : node.end_byte].decode("utf-8")


def _is_triple_quoted(node: Node) -> bool:
    start = node.child(0)
    if start is None or start.type != "string_start":
        return False
    text = start.text
    return text is not None and text.endswith(_TRIPLE_QUOTES)


def _is_docstring(node: Node) -> bool:
    statement = node.parent
    if (
        statement is None
        or statement.type != "expression_statement"
        or statement.named_child_count != 1
    ):
        return False
    body = statement.parent
    if body is None:
        return False
    if body.type == "block":
        owner = body.parent
        if owner is None or owner.type not in _DOC_OWNERS:
            return False
    elif body.type != "module":
        return False
    # Comments are named extras and never own a docstring slot.
    first = next((child for child in body.named_children if child.type != "comment"), None)
    return first is not None and first == statement


def _raw_body(node: Node, data: bytes) -> str:
    if node.type == "concatenated_string":
        return "".join(
            _raw_body(child, data) for child in node.named_children if child.type == "string"
        )
    start = node.child(0)
    end = node.child(node.child_count - 1)
    if start is None or end is None or start == end:
        return _node_source(node, data)
    return data[start.end_byte : end.start_byte].decode("utf-8")


def _literal_value(node: Node, data: bytes) -> str:
    text = _node_source(node, data)
    with warnings.catch_warnings():
        # Invalid escapes such as "\d" are legal but noisy.
        warnings.simplefilter("ignore", SyntaxWarning)
        warnings.simplefilter("ignore", DeprecationWarning)
        try:
            value = ast.literal_eval(text)
        except (SyntaxError, ValueError):
            # f-strings and t-strings have no literal value.
            return _raw_body(node, data)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    return _raw_body(node, data)


def _classify(node: Node, data: bytes) -> tuple[Token | None, bool]:
    """Return the token for ``node`` and whether the walk should descend into it."""
    if node.type == "comment":
        text = _node_source(node, data)
        return Token(TokenKind.COMMENT, text, text, node.start_byte), False
    if node.type not in {"string", "concatenated_string"}:
        return None, True
    if _is_docstring(node):
        kind = TokenKind.POD
    elif node.type == "concatenated_string":
        return None, True
    elif _is_triple_quoted(node):
        kind = TokenKind.HEREDOC
    else:
        kind = TokenKind.QUOTE
    token = Token(kind, _node_source(node, data), _literal_value(node, data), node.start_byte)
    return token, False


def iter_tokens(root: Node, data: bytes) -> Iterator[Token]:
    """Yield classified tokens in depth-first document order.

    String literals are leaves for the walk: strings nested in f-string
    interpolations belong to the enclosing literal.

    Yields
    ------
    Token
        Tokens in source order.
    """
    cursor = root.walk()
    while True:
        node = cursor.node
        descend = True
        if node is not None:
            token, descend = _classify(node, data)
            if token is not None:
                yield token
        if descend and cursor.goto_first_child():
            continue
        if cursor.goto_next_sibling():
            continue
        while True:
            if not cursor.goto_parent():
                return
            if cursor.goto_next_sibling():
                break


def _first_error(root: Node) -> Node | None:
    cursor = root.walk()
    while True:
        node = cursor.node
        if node is not None and (node.is_error or node.is_missing):
            return node
        if node is not None and node.has_error and cursor.goto_first_child():
            continue
        if cursor.goto_next_sibling():
            continue
        while True:
            if not cursor.goto_parent():
                return None
            if cursor.goto_next_sibling():
                break


class TreeSitterDocumentParser:
    """Parse Python files into token documents.

    A parser instance is reusable across files; no tree outlives ``parse``.
    """

    def __init__(self, language: Language = PY_LANGUAGE) -> None:
        _assert_language_abi(language)
        self._parser = Parser(language)

    def parse(self, path: Path) -> SourceDocument:
        """Parse ``path`` into a document of classified tokens.

        Returns
        -------
        SourceDocument
            Tokens in document order.

        Raises
        ------
        DocumentParseError
            Raised when the file cannot be read, decoded, or parsed cleanly.
        """
        try:
            with path.open("rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise DocumentParseError(path, exc.strerror or str(exc)) from exc
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"not valid UTF-8 at byte {exc.start}"
            raise DocumentParseError(path, msg) from exc
        tree = self._parser.parse(data)
        root = tree.root_node
        if root.has_error:
            error = _first_error(root)
            line = error.start_point.row + 1 if error is not None else 1
            raise DocumentParseError(path, f"syntax error near line {line}")
        tokens = tuple(iter_tokens(root, data))
        logger.debug("Parsed %s into %d tokens", path, len(tokens))
        return SourceDocument(path=path, tokens=tokens)


__all__ = ["PY_LANGUAGE", "TreeSitterDocumentParser", "iter_tokens"]
