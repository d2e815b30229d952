"""CLI result contract for structured command returns."""

from __future__ import annotations

from dataclasses import dataclass

from cli.exit_codes import ExitCode


@dataclass(frozen=True)
class CliResult:
    """Structured result from CLI command execution.

    Parameters
    ----------
    exit_code
        Integer exit code for the command.
    summary
        Optional human-readable summary of the result.
    """

    exit_code: int
    summary: str | None = None

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        summary: str | None = None,
    ) -> CliResult:
        """Create an error result from an exception.

        Parameters
        ----------
        exc
            Exception that caused the error.
        summary
            Optional custom summary (defaults to exception message).

        Returns:
        -------
        CliResult
            Error result with exit code derived from exception type.
        """
        return cls(
            exit_code=int(ExitCode.from_exception(exc)),
            summary=summary or str(exc),
        )

    @property
    def ok(self) -> bool:
        """Check if the result indicates success.

        Returns:
        -------
        bool
            True if exit_code is 0.
        """
        return self.exit_code == ExitCode.SUCCESS


__all__ = ["CliResult"]
