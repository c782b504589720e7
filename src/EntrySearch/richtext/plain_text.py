"""Rich text to plain text rendering.

Walks a rich text document tree and concatenates its text node values.
Sibling blocks are separated by ``block_divisor`` so that words from
adjacent paragraphs do not run together.
"""

from __future__ import annotations

from typing import Any, Mapping

from EntrySearch.core.errors import RenderError

TEXT_NODE = "text"

# Node types that render as blocks; anything else with content is inline.
BLOCK_NODE_TYPES = frozenset(
    {
        "document",
        "paragraph",
        "heading-1",
        "heading-2",
        "heading-3",
        "heading-4",
        "heading-5",
        "heading-6",
        "ordered-list",
        "unordered-list",
        "list-item",
        "hr",
        "blockquote",
        "embedded-entry-block",
        "embedded-asset-block",
        "embedded-resource-block",
        "table",
        "table-row",
        "table-cell",
        "table-header-cell",
    }
)


def document_to_plain_text(document: Mapping[str, Any], block_divisor: str = " ") -> str:
    """Render a rich text document into a flat string.

    Args:
        document: Root node with ``nodeType`` and ``content``.
        block_divisor: Separator inserted before each block sibling.

    Returns:
        Concatenated text of all text nodes.

    Raises:
        RenderError: If the tree is malformed.
    """
    if not isinstance(document, Mapping):
        raise RenderError(f"Rich text node must be an object, got {type(document).__name__}")
    content = document.get("content")
    if content is not None and not isinstance(content, list):
        raise RenderError(f"Rich text content of {document.get('nodeType')!r} must be a list")
    return _render_children(document, block_divisor)


def _render_children(node: Mapping[str, Any], block_divisor: str) -> str:
    content = node.get("content")
    # Nested nodes without a content list (embedded entries, links) render empty.
    if not isinstance(content, list):
        return ""

    parts: list[str] = []
    for idx, child in enumerate(content):
        if not isinstance(child, Mapping):
            raise RenderError(f"Rich text child must be an object, got {type(child).__name__}")

        if child.get("nodeType") == TEXT_NODE:
            value = child.get("value", "")
            if not isinstance(value, str):
                raise RenderError("Rich text text node value must be a string")
            text = value
        else:
            text = _render_children(child, block_divisor)
            if not text:
                continue

        parts.append(text)
        next_child = content[idx + 1] if idx + 1 < len(content) else None
        if _is_block(next_child):
            parts.append(block_divisor)

    return "".join(parts)


def _is_block(node: Any) -> bool:
    return isinstance(node, Mapping) and node.get("nodeType") in BLOCK_NODE_TYPES
