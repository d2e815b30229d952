"""Main application setup for the lexgrep CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Parameter

from cli.config_loader import load_search_config
from cli.exit_codes import ExitCode
from cli.groups import input_group, match_group, output_group, session_group
from cli.render import render_json, render_text
from cli.result import CliResult
from cli.result_action import cli_result_action
from cli.version import get_version
from core_types import JsonValue
from search.errors import SearchConfigError
from search.orchestrator import iter_search, search
from search.request import SearchRequest

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HELP_EPILOGUE = """
Examples:
  lexgrep TODO --search comments            TODO inside comments under .
  lexgrep '\\{\\w+\\}' --root src             Braces inside string literals
  lexgrep --search pod -l 'deprecated'      Files whose docstrings say deprecated
  lexgrep secret --file a.py --file b.py    Search only the given files

Categories:
  quote     single-line string literals
  heredoc   triple-quoted strings that are not docstrings
  pod       module, class and function docstrings
  comment   # comments
  Plural forms (quotes, heredocs, pods, comments) are accepted.

Configuration:
  Defaults are read from lexgrep.toml or [tool.lexgrep] in pyproject.toml.
"""

app = App(
    name="lexgrep",
    help="Search Python sources for patterns inside strings, docstrings, and comments.",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(show_default=True, show_env_var=True),
    result_action=cli_result_action,
    exit_on_error=True,
    print_error=True,
    help_on_error=False,
)


def _merge_overrides(
    config: dict[str, JsonValue],
    overrides: dict[str, JsonValue | None],
) -> dict[str, JsonValue]:
    merged = dict(config)
    # An input chosen on the command line replaces either input from the file.
    if overrides.get("root") is not None or overrides.get("files") is not None:
        merged.pop("root", None)
        merged.pop("files", None)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


@app.default
def search_command(
    pattern: Annotated[
        str | None,
        Parameter(help="Regular expression to search for (default: match everything)."),
    ] = None,
    *,
    root: Annotated[
        Path | None,
        Parameter(
            name=["--root", "--dir", "-d"],
            help="Directory to search (default: current directory).",
            group=input_group,
        ),
    ] = None,
    files: Annotated[
        list[Path] | None,
        Parameter(
            name=["--file", "-f"],
            help="Search exactly these files (repeatable).",
            negative=(),
            group=input_group,
        ),
    ] = None,
    categories: Annotated[
        list[str] | None,
        Parameter(
            name=["--search", "-s"],
            help="Token categories to search (default: quote, heredoc).",
            negative=(),
            group=match_group,
        ),
    ] = None,
    filenames_only: Annotated[
        bool | None,
        Parameter(
            name=["--filenames-only", "-l"],
            help="Only print the names of files that match.",
            group=match_group,
        ),
    ] = None,
    warnings: Annotated[
        bool | None,
        Parameter(
            name="--warnings",
            help="Report files that cannot be parsed.",
            group=output_group,
        ),
    ] = None,
    output_format: Annotated[
        Literal["text", "json"],
        Parameter(name="--format", help="Output format.", group=output_group),
    ] = "text",
    config_file: Annotated[
        str | None,
        Parameter(
            name="--config",
            help="Path to configuration file (overrides default search).",
            group=session_group,
        ),
    ] = None,
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="LEXGREP_LOG_LEVEL",
            group=session_group,
        ),
    ] = "WARNING",
) -> int | CliResult:
    """Search source files for PATTERN inside the chosen token categories.

    Returns
    -------
    int | CliResult
        Exit status, or an error result for invalid configuration.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s: %(message)s")
    overrides: dict[str, JsonValue | None] = {
        "root": str(root) if root is not None else None,
        "files": [str(path) for path in files] if files else None,
        "categories": list(categories) if categories else None,
        "pattern": pattern,
        "filenames_only": filenames_only,
        "diagnostics_enabled": warnings,
    }
    try:
        config = load_search_config(config_file)
        request = SearchRequest.from_config(_merge_overrides(config, overrides))
    except SearchConfigError as exc:
        return CliResult.from_exception(exc, summary=f"lexgrep: {exc}")

    if output_format == "json":
        sys.stdout.write(render_json(search(request)))
        return ExitCode.SUCCESS
    for found in iter_search(request):
        sys.stdout.write(render_text(found))
        sys.stdout.flush()
    return ExitCode.SUCCESS


def main() -> int:
    """Run the lexgrep CLI.

    Returns
    -------
    int
        Process exit status.
    """
    return int(app())


__all__ = ["app", "main", "search_command"]
