"""
HTTP client for the OEIS search API.

Queries https://oeis.org/search with fmt=json. The API answers with a JSON array
of sequences, or JSON null when nothing matched.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

import requests
from pydantic import TypeAdapter, ValidationError

from ..config import DEFAULT_SEARCH_URL
from .base import BackendError, OEISBackend, id_query, subsequence_query
from .models import SequenceRecord

logger = logging.getLogger(__name__)

_RESPONSE_ADAPTER = TypeAdapter(Optional[List[SequenceRecord]])


class OEISClient(OEISBackend):
    """Backend that calls the OEIS search API over HTTP."""

    def __init__(
        self,
        search_url: str = DEFAULT_SEARCH_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.search_url = search_url
        self.session = session or requests.Session()
        self.timeout = timeout

        logger.info(f"OEIS client initialized with URL: {self.search_url}")

    async def find_by_id(self, sequence_id: str) -> Optional[SequenceRecord]:
        results = await self._query(id_query(sequence_id))
        return results[0] if results else None

    async def search_by_subsequence(self, terms: Sequence[int]) -> List[SequenceRecord]:
        return await self._query(subsequence_query(terms))

    async def _query(self, query: str) -> List[SequenceRecord]:
        # requests is blocking, keep it off the event loop
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._query_sync, query)

    def _query_sync(self, query: str) -> List[SequenceRecord]:
        """Run one search request and parse the body (runs in executor)."""
        try:
            response = self.session.get(
                self.search_url,
                params={"fmt": "json", "q": query},
                timeout=self.timeout,
            )
            logger.debug(f"OEIS response for {query!r}: {response.status_code}")
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"OEIS request failed for {query!r}: {e}")
            raise BackendError(f"OEIS request failed: {e}") from e

        try:
            results = _RESPONSE_ADAPTER.validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected OEIS response for {query!r}: {e}")
            raise BackendError(f"Failed to parse OEIS response: {e}") from e

        return results or []
