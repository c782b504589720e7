"""Field normalization for exact substring search.

Collapses the four shapes a field value can take (plain string, rich text
document, locale map of either, anything else) into one searchable string.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Mapping

from EntrySearch.core.fields import FieldValue, LocaleMap, Other, PlainString, RichDocument, classify
from EntrySearch.richtext import document_to_plain_text
from EntrySearch.utils.log import log

Renderer = Callable[[Mapping[str, Any]], str]


def normalize_field(
    value: Any,
    field_name: str,
    locale: str,
    *,
    renderer: Renderer = document_to_plain_text,
) -> str | None:
    """Return a flat searchable string for a raw field value.

    Args:
        value: Raw field value from the entry payload.
        field_name: Field name, used for diagnostics only.
        locale: Locale used to resolve locale maps.
        renderer: Rich text to plain text converter.

    Returns:
        The searchable string, or None when the field is not searchable
        (unsupported shape, missing locale, or rich text that fails to render).
    """
    return _normalize_variant(classify(value), field_name, locale, renderer, localized=False)


def _normalize_variant(
    variant: FieldValue,
    field_name: str,
    locale: str,
    renderer: Renderer,
    *,
    localized: bool,
) -> str | None:
    if isinstance(variant, PlainString):
        return variant.value

    if isinstance(variant, RichDocument):
        return _render(variant, field_name, renderer)

    if isinstance(variant, LocaleMap):
        # Locale maps only nest one level; a map inside a map is not a field value.
        if localized:
            return None
        localized_value = variant.get(locale)
        if localized_value is None:
            log.debug("Field %s has no value for locale %s", field_name, locale)
            return None
        return _normalize_variant(localized_value, field_name, locale, renderer, localized=True)

    if isinstance(variant, Other):
        return None

    raise TypeError(f"Unsupported field variant: {type(variant).__name__}")


def _render(document: RichDocument, field_name: str, renderer: Renderer) -> str | None:
    try:
        return renderer(document.node)
    except Exception as error:  # noqa: BLE001 - render failure only disables this field
        log.warning("Rich text render failed: field=%s error=%s", field_name, error)
        return None
