"""Shared fixtures for OEIS MCP server tests."""

# region imports
import pytest
from fastapi.testclient import TestClient

from oeis_mcp.backend.memory import InMemoryOEISClient
from oeis_mcp.backend.models import SequenceRecord
from oeis_mcp.config import Settings
from oeis_mcp.server import create_app
from oeis_mcp.service import OEISService
# endregion


def create_test_sequence(number: int, name: str) -> SequenceRecord:
    return SequenceRecord(
        number=number,
        data="0, 1, 1, 2, 3, 5, 8",
        name=name,
        comment=["Test comment"],
        formula=["Test formula"],
        xref=["A000001"],
        keyword="nonn",
    )


TEST_SETTINGS = Settings(
    base_url="https://oeis.org",
    search_url="https://oeis.org/search",
    request_timeout=None,
    host="127.0.0.1",
    port=8000,
    log_level="INFO",
)


@pytest.fixture
def fibonacci() -> SequenceRecord:
    return create_test_sequence(45, "Fibonacci numbers")


@pytest.fixture
def catalan() -> SequenceRecord:
    return create_test_sequence(108, "Catalan numbers")


@pytest.fixture
def backend(fibonacci, catalan) -> InMemoryOEISClient:
    """Backend with one known sequence, a miss, a failure and a few searches."""
    return (
        InMemoryOEISClient()
        .with_sequence("A000045", fibonacci)
        .with_not_found("NON_EXISTENT")
        .with_error("ERROR_CASE")
        .with_sequences([0, 1, 1, 2, 3, 5, 8], [fibonacci, catalan])
        .with_error("1,2,3")
    )


@pytest.fixture
def service(backend) -> OEISService:
    return OEISService(backend)


@pytest.fixture
def client(backend) -> TestClient:
    return TestClient(create_app(backend, settings=TEST_SETTINGS))
