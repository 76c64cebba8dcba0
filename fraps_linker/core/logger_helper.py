"""
logger_helper.py - Logging Helpers

Diagnostics go to stderr so stdout only carries the user-facing messages.
"""

import logging
import os
import sys
from typing import Optional


LOG_LEVEL_ENV = "FRAPS_LINKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger with the given name, or the package logger if None.

    Args:
        name: Optional logger name (usually the caller's ``__name__``)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or "fraps_linker")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger

    Args:
        level: Level name; falls back to $FRAPS_LINKER_LOG_LEVEL, then WARNING

    Returns:
        The configured package logger
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = get_logger()
    logger.setLevel(numeric_level)

    # Calling twice (e.g. CLI then GUI in one process) must not duplicate output
    if not any(getattr(h, "_fraps_linker", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        handler._fraps_linker = True
        logger.addHandler(handler)

    return logger
