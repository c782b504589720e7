"""Command implementations for EntrySearch CLI.

Encapsulates business logic for the search command, separated from
CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from EntrySearch.core.models import MatchRecord, SearchTerm
from EntrySearch.renderers import OutputWriter
from EntrySearch.services.search import ExactMatchSearchService
from EntrySearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one exact-match search and hand the records to the output writer."""

    search_service: ExactMatchSearchService
    output_writer: OutputWriter
    term: SearchTerm
    locale: str

    def execute(self) -> list[MatchRecord]:
        """Execute the search and write its results.

        Returns:
            The match records that were written.
        """
        log.info('Searching "%s" in locale %s', self.term, self.locale)
        records = self.search_service.search(self.term, self.locale)
        log.info("Matched %d entries", len(records))
        self.output_writer.write_results(records, self.term.text, self.locale)
        return records
