"""Exception hierarchy for EntrySearch."""

from __future__ import annotations


class EntrySearchError(Exception):
    """Base exception for EntrySearch."""


class ConfigurationError(EntrySearchError, ValueError):
    """Missing or invalid configuration detected before any network activity."""


class TransportError(EntrySearchError):
    """The content API request failed.

    The originating exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RenderError(EntrySearchError):
    """Rich text document could not be converted to plain text."""


class EntryProcessingError(EntrySearchError):
    """An entry payload has an unexpected shape."""
