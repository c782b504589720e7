"""Console table output.

Renders match records into a plain-text table and writes it to stdout.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import click

from EntrySearch.core.models import MatchRecord
from EntrySearch.renderers.base import OutputWriter

COLUMNS = (
    ("ID", "entry_id"),
    ("Content Type", "content_type_id"),
    ("Field", "field_name"),
    ("Locale", "locale"),
    ("Link", "link"),
    ("Snippet", "snippet"),
)


def _cell(value: str) -> str:
    # Table rows must stay on one line.
    return " ".join(value.split())


def render_table(records: Iterable[MatchRecord]) -> str:
    """Render match records as an aligned text table.

    Args:
        records: Match records.

    Returns:
        Table text ending with a newline.
    """
    headers = [title for title, _ in COLUMNS]
    rows = [[_cell(str(getattr(record, attr))) for _, attr in COLUMNS] for record in records]
    widths = [max([len(header)] + [len(row[idx]) for row in rows]) for idx, header in enumerate(headers)]

    def fmt(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt(headers), "-+-".join("-" * width for width in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines) + "\n"


def render_summary(records: Sequence[MatchRecord], term: str, locale: str) -> str:
    """Render the full console report, including the no-match message."""
    if not records:
        return f'No case-sensitive matches found for "{term}" in locale "{locale}"\n'
    header = f'Found {len(records)} case-sensitive matches for "{term}" in locale "{locale}":'
    return f"{header}\n{render_table(records)}"


class ConsoleOutputWriter(OutputWriter):
    """Write results to stdout as a table."""

    def write_results(self, records: Sequence[MatchRecord], term: str, locale: str) -> None:
        click.echo(render_summary(records, term, locale), nl=False)
