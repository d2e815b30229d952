"""Version reporting for the lexgrep CLI."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


def get_version() -> str:
    """Get the lexgrep package version string.

    Returns:
    -------
    str
        Version string, or "0.0.0-dev" if not installed.
    """
    try:
        return pkg_version("lexgrep")
    except PackageNotFoundError:
        return "0.0.0-dev"


__all__ = ["get_version"]
