"""Logging configuration for the application.

Application code logs through logfire; this configures the standard
library loggers used by uvicorn, SQLAlchemy and other dependencies.
"""

import logging
import sys

from tube.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logging.getLogger("tube").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
