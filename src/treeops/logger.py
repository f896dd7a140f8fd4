"""Logging functions for treeops."""

from __future__ import annotations

import logging
from contextlib import contextmanager

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger for command line use.

    Unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)


@contextmanager
def suppress_info_and_below():
    """Suppress INFO and below log messages.

    A context manager that temporarily changes the logging level to WARNING,
    suppressing INFO, DEBUG, and NOTSET level messages within its context.
    The original logging level is restored when exiting the context.
    """
    logger = logging.getLogger()
    original_level = logger.getEffectiveLevel()
    logger.setLevel(logging.WARNING)
    try:
        yield
    finally:
        logger.setLevel(original_level)
