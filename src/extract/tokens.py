"""Token model shared by document parsers and the category registry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Protocol


class TokenKind(StrEnum):
    """Lexical region kinds a parser can classify."""

    QUOTE = "quote"
    HEREDOC = "heredoc"
    POD = "pod"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class Token:
    """One classified region of a parsed document.

    Parameters
    ----------
    kind
        Lexical classification of the region.
    text
        Raw source text of the region.
    value
        Literal value for strings, raw text for comments.
    start_byte
        Byte offset of the region in the source file.
    """

    kind: TokenKind
    text: str
    value: str
    start_byte: int = 0

    def lines(self, *, keepends: bool = False) -> list[str]:
        """Return the value split into lines.

        Returns
        -------
        list[str]
            Lines of ``value``; terminators kept only when ``keepends`` is set.
        """
        return self.value.splitlines(keepends=keepends)


@dataclass(frozen=True)
class SourceDocument:
    """Tokens extracted from one file, in document order."""

    path: Path
    tokens: tuple[Token, ...] = ()

    def find(self, kinds: Iterable[TokenKind]) -> tuple[Token, ...]:
        """Return tokens whose kind is in ``kinds``, preserving document order.

        Returns
        -------
        tuple[Token, ...]
            Matching tokens.
        """
        wanted = frozenset(kinds)
        return tuple(token for token in self.tokens if token.kind in wanted)


class DocumentParseError(RuntimeError):
    """Raised when a parser cannot produce a document for a file."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot create a document for ({path}): {reason}")


class DocumentParser(Protocol):
    """Parse a file into a token-classified document."""

    def parse(self, path: Path) -> SourceDocument:
        """Return the parsed document or raise ``DocumentParseError``."""
        ...


__all__ = [
    "DocumentParseError",
    "DocumentParser",
    "SourceDocument",
    "Token",
    "TokenKind",
]
