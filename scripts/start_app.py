#!/usr/bin/env python3
"""Start the API server with logging and Logfire configured first."""

import sys

import logfire
import uvicorn

from threadline.config import Settings
from threadline.util.logging import setup_logging
from threadline.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the app with uvicorn."""
    settings = Settings()

    setup_logging(settings)
    # Before the app import so startup errors are captured
    configure_logfire(settings)

    try:
        logfire.info("Starting FastAPI application", host=settings.host, port=settings.port)

        uvicorn.run(
            "threadline.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
