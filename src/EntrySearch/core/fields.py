"""Field value variants.

Content APIs deliver the same logical field in different shapes depending on
whether it is localized and whether it is rich text. ``classify`` maps a raw
JSON value onto exactly one of the variants below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True, slots=True)
class PlainString:
    value: str


@dataclass(frozen=True, slots=True)
class RichDocument:
    """Rich text tree: a node carrying ``nodeType`` and ``content``."""

    node: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class LocaleMap:
    """Mapping of locale code to a localized raw value."""

    values: Mapping[str, Any]

    def get(self, locale: str) -> FieldValue | None:
        """Return the classified value for ``locale``, or None when missing."""
        if locale not in self.values:
            return None
        return classify(self.values[locale])


@dataclass(frozen=True, slots=True)
class Other:
    """Arrays, numbers, booleans, links and nulls. Never searchable."""

    raw: Any


FieldValue = Union[PlainString, RichDocument, LocaleMap, Other]


def is_rich_document(value: Any) -> bool:
    """Return True when ``value`` looks like a rich text node."""
    return isinstance(value, Mapping) and bool(value.get("nodeType")) and value.get("content") is not None


def classify(value: Any) -> FieldValue:
    """Map a raw field value onto its variant.

    Args:
        value: Raw JSON-decoded value.

    Returns:
        One of PlainString, RichDocument, LocaleMap or Other.
    """
    if isinstance(value, str):
        return PlainString(value)
    if is_rich_document(value):
        return RichDocument(value)
    if isinstance(value, Mapping):
        return LocaleMap(value)
    return Other(value)
