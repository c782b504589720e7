"""Contentful entry payload parser."""

from __future__ import annotations

from typing import Any, Mapping

from EntrySearch.core.errors import EntryProcessingError
from EntrySearch.core.models import UNKNOWN_CONTENT_TYPE, Entry


def parse_entry(item: Any) -> Entry:
    """Parse one raw entry payload into an Entry.

    Args:
        item: Raw item from the ``items`` array.

    Returns:
        The parsed entry. Entries without ``fields`` get an empty mapping.

    Raises:
        EntryProcessingError: If ``sys.id`` is missing or ``fields`` is not an object.
    """
    if not isinstance(item, Mapping):
        raise EntryProcessingError(f"Entry must be an object, got {type(item).__name__}")

    sys_block = item.get("sys")
    entry_id = sys_block.get("id") if isinstance(sys_block, Mapping) else None
    if not isinstance(entry_id, str) or not entry_id:
        raise EntryProcessingError("Entry is missing sys.id")

    fields = item.get("fields")
    if fields is None:
        fields = {}
    if not isinstance(fields, Mapping):
        raise EntryProcessingError(f"Entry {entry_id} fields must be an object")

    return Entry(id=entry_id, content_type_id=_content_type_id(sys_block), fields=fields)


def entry_id_hint(item: Any) -> str | None:
    """Best-effort entry id for diagnostics on unparseable items."""
    if isinstance(item, Mapping) and isinstance(item.get("sys"), Mapping):
        entry_id = item["sys"].get("id")
        return entry_id if isinstance(entry_id, str) else None
    return None


def _content_type_id(sys_block: Mapping[str, Any]) -> str:
    content_type = sys_block.get("contentType")
    if isinstance(content_type, Mapping):
        link = content_type.get("sys")
        if isinstance(link, Mapping) and isinstance(link.get("id"), str):
            return link["id"]
    return UNKNOWN_CONTENT_TYPE
