"""Logging configuration.

The library only creates module loggers; applications call ``configure_logging``
to attach a handler.
"""

import logging
import sys

from tryresult.shared.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure logging for an application using this library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the ``log_level`` setting.
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=settings.log_format,
        datefmt=settings.log_date_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
