"""JSON output renderer."""

from __future__ import annotations

import json
from typing import Iterable, Sequence

import click

from EntrySearch.core.models import MatchRecord
from EntrySearch.renderers.base import OutputWriter


def render_json(records: Iterable[MatchRecord]) -> list[dict]:
    """Render match records into JSON-serializable Python objects."""
    return [
        {
            "id": record.entry_id,
            "content_type": record.content_type_id,
            "field": record.field_name,
            "locale": record.locale,
            "link": record.link,
            "snippet": record.snippet,
        }
        for record in records
    ]


class JsonOutputWriter(OutputWriter):
    """Write results to stdout as a JSON document."""

    def write_results(self, records: Sequence[MatchRecord], term: str, locale: str) -> None:
        payload = {
            "term": term,
            "locale": locale,
            "count": len(records),
            "matches": render_json(records),
        }
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
