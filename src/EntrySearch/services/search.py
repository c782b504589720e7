"""Exact-match search over paginated content entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from EntrySearch.core.errors import EntryProcessingError
from EntrySearch.core.models import DEFAULT_LOCALE, Entry, EntryPage, MatchRecord, SearchTerm
from EntrySearch.richtext import document_to_plain_text
from EntrySearch.services.diagnostics import LoggingObserver, SearchObserver
from EntrySearch.services.normalizer import Renderer, normalize_field
from EntrySearch.sources.contentful.parser import entry_id_hint, parse_entry

DEFAULT_PAGE_SIZE = 1000
SNIPPET_CONTEXT = 30
ELLIPSIS = "…"
DEFAULT_APP_HOST = "app.contentful.com"


class EntrySource(Protocol):
    """Protocol for a paged entry API."""

    def fetch_entries(
        self,
        *,
        query: str,
        limit: int,
        skip: int,
        include: int = 1,
        locale: str | None = None,
    ) -> EntryPage:
        """Fetch one page of entries."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


def make_snippet(text: str, offset: int, term: str, context: int = SNIPPET_CONTEXT) -> str:
    """Build a context excerpt around a match.

    Args:
        text: String that contains the match.
        offset: Zero-based offset of the match in ``text``.
        term: Matched term.
        context: Maximum characters kept on each side.

    Returns:
        ``pre[term]post`` with a leading/trailing ellipsis when context was cut.
    """
    end = offset + len(term)
    pre = text[max(0, offset - context):offset]
    post = text[end:end + context]
    lead = ELLIPSIS if offset > context else ""
    trail = ELLIPSIS if end + context < len(text) else ""
    return f"{lead}{pre}[{term}]{post}{trail}"


def entry_link(entry_id: str, *, space_id: str, environment_id: str, app_host: str = DEFAULT_APP_HOST) -> str:
    """Return the web app deep link for an entry."""
    return f"https://{app_host}/spaces/{space_id}/environments/{environment_id}/entries/{entry_id}"


@dataclass(slots=True)
class ExactMatchSearchService:
    """Pages through a content source and finds exact, case-sensitive matches.

    The source's full-text query only narrows the candidate set; every
    candidate is re-checked locally with a case-sensitive substring test.
    """

    source: EntrySource
    space_id: str
    environment_id: str = "master"
    app_host: str = DEFAULT_APP_HOST
    page_size: int = DEFAULT_PAGE_SIZE
    include: int = 1
    send_locale: bool = False
    observer: SearchObserver = field(default_factory=LoggingObserver)
    renderer: Renderer = document_to_plain_text

    def search(self, term: SearchTerm | str, locale: str = DEFAULT_LOCALE) -> list[MatchRecord]:
        """Search all pages for entries containing ``term``.

        Args:
            term: Exact text to find.
            locale: Locale used to resolve localized fields.

        Returns:
            One match record per matching entry, in API order.

        Raises:
            ConfigurationError: If ``term`` is empty.
            TransportError: If a page request fails.
        """
        if not isinstance(term, SearchTerm):
            term = SearchTerm(term)
        self.observer.search_started(term, locale)

        records: list[MatchRecord] = []
        skip = 0
        page_number = 0
        while True:
            page = self.source.fetch_entries(
                query=term.text,
                limit=self.page_size,
                skip=skip,
                include=self.include,
                locale=locale if self.send_locale else None,
            )
            page_number += 1
            self.observer.page_fetched(page, page_number)

            for item in page.items:
                record = self._process_item(item, term, locale)
                if record is not None:
                    records.append(record)

            skip += self.page_size
            if skip >= page.total:
                break

        return records

    def close(self) -> None:
        """Close the underlying source."""
        self.source.close()

    def _process_item(self, item: Any, term: SearchTerm, locale: str) -> MatchRecord | None:
        try:
            entry = parse_entry(item)
            self.observer.entry_checked(entry)
            return self._match_entry(entry, term, locale)
        except EntryProcessingError as error:
            self.observer.entry_skipped(entry_id_hint(item), error)
        except Exception as error:  # noqa: BLE001 - one bad entry must not abort the page
            self.observer.entry_skipped(entry_id_hint(item), EntryProcessingError(str(error)))
        return None

    def _match_entry(self, entry: Entry, term: SearchTerm, locale: str) -> MatchRecord | None:
        """Return a record for the first field that contains ``term``."""
        record: MatchRecord | None = None
        for field_name, raw_value in entry.fields.items():
            value = normalize_field(raw_value, field_name, locale, renderer=self.renderer)
            self.observer.field_normalized(entry, field_name, value)
            if value is None:
                continue

            offset = value.find(term.text)
            if offset == -1:
                self.observer.field_missed(entry, field_name, value, term)
                continue

            record = MatchRecord(
                entry_id=entry.id,
                content_type_id=entry.content_type_id,
                field_name=field_name,
                locale=locale,
                link=entry_link(
                    entry.id,
                    space_id=self.space_id,
                    environment_id=self.environment_id,
                    app_host=self.app_host,
                ),
                snippet=make_snippet(value, offset, term.text),
            )
            self.observer.match_found(record, offset)
            break
        return record
