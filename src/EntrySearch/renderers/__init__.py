"""Output renderers for command results.

Provides the OutputWriter abstraction with console table and JSON
implementations, and a factory that picks one from configuration.
"""

from __future__ import annotations

from EntrySearch.renderers.base import OutputWriter
from EntrySearch.renderers.console import ConsoleOutputWriter, render_summary, render_table
from EntrySearch.renderers.json import JsonOutputWriter, render_json


def create_output_writer(output_format: str) -> OutputWriter:
    """Create output writer for a format name.

    Args:
        output_format: "console" or "json".

    Returns:
        Matching OutputWriter instance.

    Raises:
        ValueError: If the format is unknown.
    """
    if output_format == "console":
        return ConsoleOutputWriter()
    if output_format == "json":
        return JsonOutputWriter()
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "create_output_writer",
    "render_json",
    "render_summary",
    "render_table",
]
