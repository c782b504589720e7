"""Rich text helpers."""

from __future__ import annotations

from EntrySearch.richtext.plain_text import document_to_plain_text

__all__ = ["document_to_plain_text"]
