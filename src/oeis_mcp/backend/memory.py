"""
In-memory backend with canned responses, used to exercise the handlers
without network access.
"""

from typing import Dict, List, Optional, Sequence, Union

from .base import BackendError, OEISBackend, subsequence_key
from .models import SequenceRecord


class _Error:
    """Marker for a forced backend failure."""

    def __init__(self, message: str):
        self.message = message


Outcome = Union[Optional[SequenceRecord], List[SequenceRecord], _Error]


class InMemoryOEISClient(OEISBackend):
    """
    Deterministic backend keyed by query string.

    Lookups use the raw ID as key, searches use the comma-joined terms
    (see subsequence_key). Unknown keys behave as "no match".
    """

    def __init__(self):
        self.responses: Dict[str, Outcome] = {}
        self.calls: List[str] = []

    def with_sequence(self, sequence_id: str, sequence: SequenceRecord) -> "InMemoryOEISClient":
        self.responses[sequence_id] = sequence
        return self

    def with_sequences(self, terms: Sequence[int], sequences: List[SequenceRecord]) -> "InMemoryOEISClient":
        self.responses[subsequence_key(terms)] = list(sequences)
        return self

    def with_not_found(self, key: str) -> "InMemoryOEISClient":
        self.responses[key] = None
        return self

    def with_error(self, key: str, message: str = "Mock error") -> "InMemoryOEISClient":
        self.responses[key] = _Error(message)
        return self

    async def find_by_id(self, sequence_id: str) -> Optional[SequenceRecord]:
        self.calls.append(sequence_id)
        outcome = self.responses.get(sequence_id)
        if isinstance(outcome, _Error):
            raise BackendError(outcome.message)
        if isinstance(outcome, list):
            raise BackendError("InMemoryOEISClient: use with_sequence for find_by_id")
        return outcome

    async def search_by_subsequence(self, terms: Sequence[int]) -> List[SequenceRecord]:
        key = subsequence_key(terms)
        self.calls.append(key)
        outcome = self.responses.get(key)
        if isinstance(outcome, _Error):
            raise BackendError(outcome.message)
        if isinstance(outcome, SequenceRecord):
            raise BackendError("InMemoryOEISClient: use with_sequences for subsequence searches")
        return list(outcome or [])
