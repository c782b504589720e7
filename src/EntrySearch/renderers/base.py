"""Base class for output writers.

Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from EntrySearch.core.models import MatchRecord


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_results(self, records: Sequence[MatchRecord], term: str, locale: str) -> None:
        """Write the results of one search.

        Args:
            records: Match records in API order; may be empty.
            term: The searched term.
            locale: The locale used for the search.
        """
