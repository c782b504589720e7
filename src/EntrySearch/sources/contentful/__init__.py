"""Contentful content API adapter."""

from __future__ import annotations

from EntrySearch.sources.contentful.client import ContentfulApiClient
from EntrySearch.sources.contentful.parser import entry_id_hint, parse_entry

__all__ = ["ContentfulApiClient", "entry_id_hint", "parse_entry"]
