"""
Shared lookup path for all MCP handlers.

Tools, the prompt and the resource resolve sequences through OEISService so
that "not found" and backend failures map to the same errors everywhere.
"""

import logging
from typing import List, Sequence

from .backend.base import BackendError, OEISBackend
from .backend.models import SequenceRecord
from .config import DEFAULT_BASE_URL
from .errors import from_backend_error, sequence_not_found

logger = logging.getLogger(__name__)


class OEISService:
    """Wraps an injected OEISBackend and applies the error mapping."""

    def __init__(self, backend: OEISBackend, base_url: str = DEFAULT_BASE_URL):
        self.backend = backend
        self.base_url = base_url

    async def find_sequence(self, sequence_id: str) -> SequenceRecord:
        """
        Find a sequence by ID.

        Raises:
            McpError: INVALID_PARAMS if nothing matched, INTERNAL_ERROR if the backend failed
        """
        try:
            result = await self.backend.find_by_id(sequence_id)
        except BackendError as e:
            logger.error(f"Backend error finding {sequence_id}: {e}")
            raise from_backend_error(e) from e

        if result is None:
            raise sequence_not_found(sequence_id)
        return result

    async def search_sequences(self, terms: Sequence[int]) -> List[SequenceRecord]:
        """
        Search sequences by subsequence. No match is an empty list, not an error.

        Raises:
            McpError: INTERNAL_ERROR if the backend failed
        """
        try:
            return await self.backend.search_by_subsequence(terms)
        except BackendError as e:
            logger.error(f"Backend error searching {list(terms)}: {e}")
            raise from_backend_error(e) from e
