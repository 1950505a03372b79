"""
Server configuration loaded from environment variables (and an optional .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

import dotenv

dotenv.load_dotenv()


DEFAULT_BASE_URL = "https://oeis.org"
DEFAULT_SEARCH_URL = "https://oeis.org/search"


def _get_timeout() -> Optional[float]:
    """Outbound request timeout in seconds, or None for the transport default."""
    value = os.getenv("OEIS_REQUEST_TIMEOUT")
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"OEIS_REQUEST_TIMEOUT must be a number of seconds, got {value!r}") from None


def _get_port() -> int:
    value = os.getenv("PORT", "8000")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    base_url: str
    search_url: str
    request_timeout: Optional[float]
    host: str
    port: int
    log_level: str


def get_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        base_url=os.getenv("OEIS_BASE_URL", DEFAULT_BASE_URL),
        search_url=os.getenv("OEIS_SEARCH_URL", DEFAULT_SEARCH_URL),
        request_timeout=_get_timeout(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_get_port(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
