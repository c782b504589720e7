from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from EntrySearch.core.errors import ConfigurationError

DEFAULT_LOCALE = "en-US"
UNKNOWN_CONTENT_TYPE = "Unknown"


@dataclass(frozen=True, slots=True)
class SearchTerm:
    """Exact, case-sensitive text to look for.

    Attributes:
        text: The literal character sequence; never empty.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise ConfigurationError('Usage: entry-search "string to search" [locale]')

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Entry:
    """Content entry as delivered by the content API.

    Attributes:
        id: Entry identifier (``sys.id``).
        content_type_id: Content type identifier, or "Unknown".
        fields: Raw field values keyed by field name, in API order.
    """

    id: str
    content_type_id: str = UNKNOWN_CONTENT_TYPE
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True, slots=True)
class EntryPage:
    """One page of raw entry payloads plus the API-reported total."""

    items: Sequence[Mapping[str, Any]]
    total: int
    skip: int
    limit: int


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """Single exact match found in an entry.

    Attributes:
        entry_id: Matched entry identifier.
        content_type_id: Content type of the entry.
        field_name: First field that contained the term.
        locale: Locale used to resolve localized fields.
        link: Deep link to the entry in the web app.
        snippet: Context excerpt with the term in square brackets.
    """

    entry_id: str
    content_type_id: str
    field_name: str
    locale: str
    link: str
    snippet: str
