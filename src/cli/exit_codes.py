"""Exit code taxonomy for the lexgrep CLI."""

from __future__ import annotations

from enum import IntEnum

from search.errors import ResultsContractError, SearchConfigError


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1: Unexpected failure
    - 2-4: Usage, validation, and configuration errors
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Parameters
        ----------
        exc
            Exception to classify.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        cyclopts_code = _exit_code_for_cyclopts(exc)
        if cyclopts_code is not None:
            return cyclopts_code
        type_code = _exit_code_for_exception_type(exc)
        if type_code is not None:
            return type_code
        return cls.GENERAL_ERROR


def _exit_code_for_cyclopts(exc: BaseException) -> ExitCode | None:
    module = exc.__class__.__module__
    if not module.startswith("cyclopts"):
        return None
    if exc.__class__.__name__ == "ValidationError":
        return ExitCode.VALIDATION_ERROR
    return ExitCode.PARSE_ERROR


def _exit_code_for_exception_type(exc: BaseException) -> ExitCode | None:
    if isinstance(exc, ResultsContractError):
        return ExitCode.GENERAL_ERROR
    if isinstance(exc, SearchConfigError):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, (ValueError, TypeError)):
        return ExitCode.VALIDATION_ERROR
    if isinstance(exc, (FileNotFoundError, PermissionError)):
        return ExitCode.CONFIG_ERROR
    return None


__all__ = ["ExitCode"]
