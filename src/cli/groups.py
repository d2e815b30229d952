"""Shared help-panel groups for the lexgrep CLI."""

from __future__ import annotations

from cyclopts import Group, validators

session_group = Group(
    "Session",
    help="Logging and configuration options.",
    sort_key=0,
)

input_group = Group(
    "Input",
    help="Choose where to search. --root and --file are mutually exclusive.",
    sort_key=1,
    validator=validators.LimitedChoice(),
)

match_group = Group(
    "Matching",
    help="Choose what to search and how.",
    sort_key=2,
)

output_group = Group(
    "Output",
    help="Configure result output.",
    sort_key=3,
)


__all__ = ["input_group", "match_group", "output_group", "session_group"]
