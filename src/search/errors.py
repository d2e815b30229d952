"""Exception taxonomy for token-classified search."""

from __future__ import annotations

from collections.abc import Iterable


class SearchConfigError(ValueError):
    """Base exception for invalid search configuration."""


class ConflictingInputSpecError(SearchConfigError):
    """Raised when both a root directory and explicit files are supplied."""

    def __init__(self) -> None:
        super().__init__('You cannot specify both "root" and "files".')


class InvalidDirectoryError(SearchConfigError):
    """Raised when the search root is missing or not a directory."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Cannot find directory ({path}).")


class InvalidFileError(SearchConfigError):
    """Raised when an explicit file is missing or unreadable."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Cannot find or read file ({path}).")


class UnknownCategoryError(SearchConfigError):
    """Raised when a category name does not resolve in the registry."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Don't know how to search for ({name}).")


class InvalidPatternError(SearchConfigError):
    """Raised when the search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Could not search on ({pattern}): {reason}")


class InvalidConfigurationError(SearchConfigError):
    """Raised when a configuration payload has unknown or mistyped keys."""

    def __init__(self, message: str, *, keys: Iterable[str] = ()) -> None:
        self.keys = tuple(keys)
        super().__init__(message)

    @classmethod
    def unknown_keys(cls, keys: Iterable[str]) -> InvalidConfigurationError:
        """Build an error listing unknown keys in sorted order.

        Returns
        -------
        InvalidConfigurationError
            Error naming every offending key.
        """
        ordered = tuple(sorted(keys))
        return cls(f"Unknown configuration keys: ({', '.join(ordered)})", keys=ordered)


class NoInputSpecifiedError(SearchConfigError):
    """Raised when neither a root directory nor files are available to search."""

    def __init__(self) -> None:
        super().__init__("No files or directories to search in.")


class ResultsContractError(AssertionError):
    """Base exception for misuse of result containers."""


class FilenameOnlyResultsUnavailableError(ResultsContractError):
    """Raised when per-category results are read from a filenames-only result."""

    def __init__(self, file_path: object) -> None:
        self.file_path = file_path
        super().__init__(f"Results for ({file_path}) only record the filename.")


class UnknownTokenOnAddError(ResultsContractError):
    """Raised when results are attached for an unregistered category."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Cannot add results for unknown category ({name}).")


class NonSequenceResultsOnAddError(ResultsContractError):
    """Raised when attached matches are not a sequence."""

    def __init__(self, value: object) -> None:
        kind = type(value).__name__
        super().__init__(f"Results must be a sequence such as a list or tuple, not a ({kind}).")


__all__ = [
    "ConflictingInputSpecError",
    "FilenameOnlyResultsUnavailableError",
    "InvalidConfigurationError",
    "InvalidDirectoryError",
    "InvalidFileError",
    "InvalidPatternError",
    "NoInputSpecifiedError",
    "NonSequenceResultsOnAddError",
    "ResultsContractError",
    "SearchConfigError",
    "UnknownCategoryError",
    "UnknownTokenOnAddError",
]
