"""Search service layer for EntrySearch.

Provides the exact-match search driver, field normalization and a factory
that wires them to the configured content API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from EntrySearch.services.diagnostics import LoggingObserver, SearchObserver
from EntrySearch.services.normalizer import normalize_field
from EntrySearch.services.search import EntrySource, ExactMatchSearchService, make_snippet

if TYPE_CHECKING:
    from EntrySearch.config import AppConfig


def create_search_service(config: AppConfig) -> ExactMatchSearchService:
    """Create a search service bound to the Contentful preview API.

    Args:
        config: Application configuration with credentials and API settings.

    Returns:
        Configured ExactMatchSearchService instance.
    """
    from EntrySearch.sources.contentful.client import ContentfulApiClient

    credentials = config.credentials
    client = ContentfulApiClient(
        space_id=credentials.space_id,
        access_token=credentials.access_token,
        environment_id=credentials.environment_id,
        host=config.contentful.api_host,
        timeout=config.contentful.timeout,
    )
    return ExactMatchSearchService(
        source=client,
        space_id=credentials.space_id,
        environment_id=credentials.environment_id,
        app_host=config.contentful.app_host,
        page_size=config.contentful.page_size,
        include=config.contentful.include,
        send_locale=config.contentful.send_locale,
        observer=LoggingObserver(verbose=config.debug),
    )


__all__ = [
    "EntrySource",
    "ExactMatchSearchService",
    "LoggingObserver",
    "SearchObserver",
    "create_search_service",
    "make_snippet",
    "normalize_field",
]
