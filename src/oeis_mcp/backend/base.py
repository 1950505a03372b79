"""
Backend interface for querying the OEIS database.

Handlers depend on OEISBackend only; the concrete implementation (network or
in-memory) is injected when the app is created.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models import SequenceRecord


class BackendError(Exception):
    """Raised when the backend cannot be reached or returns an unusable body."""


def id_query(sequence_id: str) -> str:
    """Build the search query for a lookup by ID."""
    return f"id:{sequence_id}"


def subsequence_key(terms: Sequence[int]) -> str:
    """Join terms with commas, keeping signs: [-1, 0, 1] -> '-1,0,1'."""
    return ",".join(str(term) for term in terms)


def subsequence_query(terms: Sequence[int]) -> str:
    """Build the search query for a subsequence search."""
    return f"seq:{subsequence_key(terms)}"


class OEISBackend(ABC):
    """Abstract access to the OEIS search API."""

    @abstractmethod
    async def find_by_id(self, sequence_id: str) -> Optional[SequenceRecord]:
        """
        Look up a single sequence by ID.

        Returns:
            The matching sequence, or None when nothing matched

        Raises:
            BackendError: If the request or response parsing failed
        """

    @abstractmethod
    async def search_by_subsequence(self, terms: Sequence[int]) -> List[SequenceRecord]:
        """
        Find sequences containing the given terms.

        Returns:
            Matching sequences in backend order (empty if none matched)

        Raises:
            BackendError: If the request or response parsing failed
        """
