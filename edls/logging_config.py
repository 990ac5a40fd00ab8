"""Logging setup for the edls command.

Diagnostics go to stderr so they never mix with listing rows on stdout.
The level comes from the caller or the ``EDLS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "EDLS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: str | None = None) -> int:
    """Map a level name (or the env default) to a ``logging`` level constant."""
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = getattr(logging, str(log_level).strip().upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(component_name: str = "edls", log_level: str | None = None) -> logging.Logger:
    """Configure and return the component logger.

    Calling this again only updates the level; the stderr handler is added
    once.
    """
    level = resolve_log_level(log_level)
    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


__all__ = [
    "LOG_LEVEL_ENV",
    "DEFAULT_LOG_LEVEL",
    "resolve_log_level",
    "setup_logging",
    "get_logger",
]
