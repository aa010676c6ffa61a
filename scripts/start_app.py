#!/usr/bin/env python3
"""Start the comments API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from tube.config import Settings
from tube.util.logging import setup_logging
from tube.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging and Logfire before the app module is imported
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting comments API", port=settings.port)

        uvicorn.run(
            "tube.interface.api.app:app",
            host="0.0.0.0",
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
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
