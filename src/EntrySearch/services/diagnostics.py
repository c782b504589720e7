"""Diagnostic hooks for the search driver.

The search loop reports what it does through a single ``SearchObserver``
instead of logging inline. ``LoggingObserver`` writes progress at DEBUG level
and skipped entries at WARNING, so verbosity follows the configured log level.
"""

from __future__ import annotations

from typing import Protocol

from EntrySearch.core.models import Entry, EntryPage, MatchRecord, SearchTerm
from EntrySearch.utils.log import log

_PREVIEW_LEN = 50


class SearchObserver(Protocol):
    """Receives search progress events."""

    def search_started(self, term: SearchTerm, locale: str) -> None:
        """Called once before the first page request."""
        raise NotImplementedError

    def page_fetched(self, page: EntryPage, page_number: int) -> None:
        """Called after each page response arrives."""
        raise NotImplementedError

    def entry_checked(self, entry: Entry) -> None:
        """Called before the fields of an entry are examined."""
        raise NotImplementedError

    def entry_skipped(self, entry_id: str | None, error: Exception) -> None:
        """Called when an entry could not be processed."""
        raise NotImplementedError

    def field_normalized(self, entry: Entry, field_name: str, value: str | None) -> None:
        """Called with the normalized value of each examined field."""
        raise NotImplementedError

    def field_missed(self, entry: Entry, field_name: str, value: str, term: SearchTerm) -> None:
        """Called when a searchable field does not contain the term."""
        raise NotImplementedError

    def match_found(self, record: MatchRecord, offset: int) -> None:
        """Called when an entry produces its match record."""
        raise NotImplementedError


class LoggingObserver:
    """Observer that writes all events to the EntrySearch logger.

    The case-insensitive near-miss check runs only when ``verbose`` is set.
    """

    __slots__ = ("verbose",)

    def __init__(self, verbose: bool = True) -> None:
        self.verbose = verbose

    def search_started(self, term: SearchTerm, locale: str) -> None:
        log.debug('Searching for exact case-sensitive matches of "%s" in locale "%s"', term, locale)

    def page_fetched(self, page: EntryPage, page_number: int) -> None:
        log.debug(
            "Found %d potential entries (page %d, skip=%d, total=%d)",
            len(page.items),
            page_number,
            page.skip,
            page.total,
        )

    def entry_checked(self, entry: Entry) -> None:
        log.debug("Checking entry: %s (%s)", entry.id, entry.content_type_id)

    def entry_skipped(self, entry_id: str | None, error: Exception) -> None:
        log.warning("Skipping entry %s: %s", entry_id or "<unknown>", error)

    def field_normalized(self, entry: Entry, field_name: str, value: str | None) -> None:
        if value is None:
            log.debug("  Field %s is not searchable", field_name)
            return
        preview = value[:_PREVIEW_LEN] + ("..." if len(value) > _PREVIEW_LEN else "")
        log.debug('  Checking "%s" value: "%s"', field_name, preview)

    def field_missed(self, entry: Entry, field_name: str, value: str, term: SearchTerm) -> None:
        if self.verbose and term.text.lower() in value.lower():
            log.debug("  Field %s would match if case-insensitive", field_name)

    def match_found(self, record: MatchRecord, offset: int) -> None:
        log.debug("MATCH FOUND in %s at position %d: %s", record.field_name, offset, record.snippet)
