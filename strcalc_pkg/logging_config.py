"""Structured logging configuration for strcalc."""

import logging
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL

LOGGER_NAME = "strcalc"


class StructuredFormatter(logging.Formatter):
    """Render ``<iso timestamp> [LEVEL] strcalc.<module>: message``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def _structured_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    level: str = LOG_LEVEL, log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the ``strcalc`` logger for the CLI.

    Replaces any handlers from an earlier call, so configuring twice never
    duplicates lines. Records always go to stderr and, when ``log_file`` is
    given, are appended to that file as well. Unknown level names fall back
    to WARNING.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_structured_handler(logging.StreamHandler(sys.stderr)))
    if log_file:
        logger.addHandler(_structured_handler(logging.FileHandler(log_file)))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``strcalc.<name>`` child logger for a module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
