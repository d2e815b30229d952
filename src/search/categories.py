"""Registry of searchable token categories and their renderers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from extract.tokens import Token, TokenKind
from search.errors import UnknownCategoryError

type Renderer = Callable[[Token], str]

PLURAL_SUFFIX = "s"


def render_quote(token: Token) -> str:
    """Render a quoted string as its literal value.

    Returns
    -------
    str
        Literal string value.
    """
    return token.value


def render_heredoc(token: Token) -> str:
    """Render a triple-quoted string with its line terminators kept.

    Returns
    -------
    str
        Lines joined back together, terminators included.
    """
    return "".join(token.lines(keepends=True))


def render_pod(token: Token) -> str:
    """Render a docstring as newline-joined lines.

    Only ``\\n`` separates lines; a single trailing newline is dropped.

    Returns
    -------
    str
        Docstring lines joined with ``\\n``.
    """
    lines = token.value.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def render_comment(token: Token) -> str:
    """Render a comment as written, ``#`` included.

    Returns
    -------
    str
        Raw comment text.
    """
    return token.text


@dataclass(frozen=True)
class CategoryDescriptor:
    """Selector and renderer for one searchable category.

    Parameters
    ----------
    name
        Canonical category name.
    kinds
        Token kinds selected from a parsed document.
    render
        Turns one selected token into the text tested against the pattern.
    """

    name: str
    kinds: frozenset[TokenKind]
    render: Renderer

    @property
    def plural(self) -> str:
        return f"{self.name}{PLURAL_SUFFIX}"


class CategoryRegistry:
    """Immutable name-to-descriptor table with plural aliases."""

    __slots__ = ("_by_name", "_descriptors")

    def __init__(self, descriptors: Iterable[CategoryDescriptor]) -> None:
        ordered = tuple(descriptors)
        by_name: dict[str, CategoryDescriptor] = {}
        for descriptor in ordered:
            for alias in (descriptor.name, descriptor.plural):
                if alias in by_name:
                    msg = f"Duplicate category name {alias!r}."
                    raise ValueError(msg)
                by_name[alias] = descriptor
        self._descriptors = ordered
        self._by_name: Mapping[str, CategoryDescriptor] = MappingProxyType(by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"CategoryRegistry({', '.join(self.names())})"

    def is_known(self, name: object) -> bool:
        """Return whether ``name`` or its singular form is registered.

        Returns
        -------
        bool
            ``True`` when ``resolve`` would succeed.
        """
        return name in self

    def resolve(self, name: str) -> CategoryDescriptor:
        """Return the descriptor registered for ``name``.

        Returns
        -------
        CategoryDescriptor
            Descriptor for the category or its plural alias.

        Raises
        ------
        UnknownCategoryError
            Raised when no descriptor matches ``name``.
        """
        descriptor = self._by_name.get(name) if isinstance(name, str) else None
        if descriptor is None:
            raise UnknownCategoryError(name)
        return descriptor

    def canonical(self, name: str) -> str:
        """Return the canonical name for ``name``.

        Returns
        -------
        str
            Singular category name.
        """
        return self.resolve(name).name

    def names(self) -> tuple[str, ...]:
        """Return canonical names in registration order.

        Returns
        -------
        tuple[str, ...]
            Canonical category names.
        """
        return tuple(descriptor.name for descriptor in self._descriptors)

    def descriptors(self) -> tuple[CategoryDescriptor, ...]:
        return self._descriptors

    def extend(self, *descriptors: CategoryDescriptor) -> CategoryRegistry:
        """Return a new registry with ``descriptors`` appended.

        Returns
        -------
        CategoryRegistry
            Registry holding the existing and added descriptors.
        """
        return CategoryRegistry((*self._descriptors, *descriptors))


BUILTIN_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor("quote", frozenset({TokenKind.QUOTE}), render_quote),
    CategoryDescriptor("heredoc", frozenset({TokenKind.HEREDOC}), render_heredoc),
    CategoryDescriptor("pod", frozenset({TokenKind.POD}), render_pod),
    CategoryDescriptor("comment", frozenset({TokenKind.COMMENT}), render_comment),
)

DEFAULT_REGISTRY = CategoryRegistry(BUILTIN_CATEGORIES)

DEFAULT_CATEGORIES: tuple[str, ...] = ("quote", "heredoc")


__all__ = [
    "BUILTIN_CATEGORIES",
    "DEFAULT_CATEGORIES",
    "DEFAULT_REGISTRY",
    "CategoryDescriptor",
    "CategoryRegistry",
    "Renderer",
    "render_comment",
    "render_heredoc",
    "render_pod",
    "render_quote",
]
