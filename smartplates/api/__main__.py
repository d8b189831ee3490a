"""Run the SmartPlates API with uvicorn.

Usage:
    python -m smartplates.api

Host, port, reload and log level come from API_HOST, API_PORT, API_DEBUG
and API_LOG_LEVEL.
"""

import logging

import uvicorn

from smartplates.api.config import config

_LOGGER = logging.getLogger(__name__)


def main() -> None:
    """Start the server."""
    _LOGGER.info("Starting SmartPlates API on %s:%s", config.host, config.port)
    uvicorn.run(
        "smartplates.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
