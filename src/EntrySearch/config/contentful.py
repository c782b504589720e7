"""Contentful API domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from EntrySearch.config.common import (
    expect_bool,
    expect_float,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)

# Contentful rejects pages larger than this.
_MAX_PAGE_SIZE = 1000
_MAX_INCLUDE = 10


@dataclass(frozen=True, slots=True)
class ContentfulConfig:
    """Store validated content API settings."""

    api_host: str
    app_host: str
    page_size: int
    include: int
    timeout: float
    send_locale: bool


def load_contentful(raw: Mapping[str, Any]) -> ContentfulConfig:
    """Load contentful domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed content API configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "contentful")
    return ContentfulConfig(
        api_host=expect_str(
            get_optional_value(section, "api_host", "preview.contentful.com"), "contentful.api_host"
        ),
        app_host=expect_str(get_optional_value(section, "app_host", "app.contentful.com"), "contentful.app_host"),
        page_size=expect_int(get_optional_value(section, "page_size", _MAX_PAGE_SIZE), "contentful.page_size"),
        include=expect_int(get_optional_value(section, "include", 1), "contentful.include"),
        timeout=expect_float(get_optional_value(section, "timeout", 30), "contentful.timeout"),
        send_locale=expect_bool(get_optional_value(section, "send_locale", False), "contentful.send_locale"),
    )


def check_contentful(config: ContentfulConfig) -> None:
    """Validate content API constraints.

    Raises:
        ValueError: If values violate API limits.
    """
    if not config.api_host.strip():
        raise ValueError("contentful.api_host must not be empty")
    if not config.app_host.strip():
        raise ValueError("contentful.app_host must not be empty")
    if not 1 <= config.page_size <= _MAX_PAGE_SIZE:
        raise ValueError(f"contentful.page_size must be between 1 and {_MAX_PAGE_SIZE}")
    if not 0 <= config.include <= _MAX_INCLUDE:
        raise ValueError(f"contentful.include must be between 0 and {_MAX_INCLUDE}")
    if config.timeout <= 0:
        raise ValueError("contentful.timeout must be > 0")
