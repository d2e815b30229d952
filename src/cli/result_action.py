"""Result action handler for Cyclopts integration."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from cyclopts import App


def cli_result_action(
    app: App,
    cmd: object,
    result: Any,
) -> int:
    """Handle command results and convert to exit codes.

    Successful summaries go to stdout; failing summaries go to stderr.

    Parameters
    ----------
    app
        The Cyclopts application instance.
    cmd
        The resolved command that was executed.
    result
        The return value from the command function.

    Returns
    -------
    int
        Exit code for the process.
    """
    _ = app
    _ = cmd
    from rich.console import Console

    if result is None:
        return ExitCode.SUCCESS

    if isinstance(result, int):
        return int(result)

    from cli.result import CliResult

    if isinstance(result, CliResult):
        if result.summary:
            console = Console(stderr=not result.ok, highlight=False, soft_wrap=True)
            console.print(result.summary, markup=False)
        return int(result.exit_code)

    Console(stderr=True).print(
        f"Unexpected command return type: {type(result).__name__} (value: {result!r})",
        markup=False,
    )
    return ExitCode.GENERAL_ERROR


__all__ = ["cli_result_action"]
