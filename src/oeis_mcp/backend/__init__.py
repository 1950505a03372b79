"""
OEIS backends

- base: OEISBackend interface, BackendError and query builders
- client: OEISClient, the network-backed implementation
- memory: InMemoryOEISClient, a deterministic implementation for tests
"""

from .base import BackendError, OEISBackend, id_query, subsequence_key, subsequence_query
from .client import OEISClient
from .memory import InMemoryOEISClient
from .models import SequenceRecord

__all__ = [
    "BackendError",
    "OEISBackend",
    "OEISClient",
    "InMemoryOEISClient",
    "SequenceRecord",
    "id_query",
    "subsequence_key",
    "subsequence_query",
]
