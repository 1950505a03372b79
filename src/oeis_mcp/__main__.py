"""Run the OEIS MCP server with uvicorn: python -m oeis_mcp"""

import logging

import uvicorn

from .config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting OEIS MCP server at {settings.host}:{settings.port}")
    uvicorn.run(
        "oeis_mcp.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
