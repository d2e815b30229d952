"""Token-classified search: find patterns only inside chosen lexical regions."""

from __future__ import annotations

from search.categories import (
    DEFAULT_CATEGORIES,
    DEFAULT_REGISTRY,
    CategoryDescriptor,
    CategoryRegistry,
)
from search.errors import (
    ConflictingInputSpecError,
    FilenameOnlyResultsUnavailableError,
    InvalidConfigurationError,
    InvalidDirectoryError,
    InvalidFileError,
    InvalidPatternError,
    NoInputSpecifiedError,
    NonSequenceResultsOnAddError,
    ResultsContractError,
    SearchConfigError,
    UnknownCategoryError,
    UnknownTokenOnAddError,
)
from search.orchestrator import iter_file_paths, iter_search, search
from search.request import SearchConfig, SearchRequest
from search.results import CategoryResults, FileMatchReport, FileResults
from search.scanner import SearchDiagnostic, scan_file

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_REGISTRY",
    "CategoryDescriptor",
    "CategoryRegistry",
    "CategoryResults",
    "ConflictingInputSpecError",
    "FileMatchReport",
    "FileResults",
    "FilenameOnlyResultsUnavailableError",
    "InvalidConfigurationError",
    "InvalidDirectoryError",
    "InvalidFileError",
    "InvalidPatternError",
    "NoInputSpecifiedError",
    "NonSequenceResultsOnAddError",
    "ResultsContractError",
    "SearchConfig",
    "SearchConfigError",
    "SearchDiagnostic",
    "SearchRequest",
    "UnknownCategoryError",
    "UnknownTokenOnAddError",
    "iter_file_paths",
    "iter_search",
    "scan_file",
    "search",
]
