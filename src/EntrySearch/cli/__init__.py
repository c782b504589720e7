"""CLI package for EntrySearch command orchestration.

This package contains the modular CLI components for the search command,
factored into separate modules for better maintainability and testability.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from EntrySearch.cli.runner import CommandRunner
from EntrySearch.cli.ui import cli


def main() -> None:
    """Run EntrySearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
