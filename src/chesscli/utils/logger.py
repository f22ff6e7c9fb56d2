"""Minimal logging utilities for chesscli.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from chesscli.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Parsing options")
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "CHESSCLI_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "chesscli." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'chesscli.mymodule'
    """
    if not (name == "chesscli" or name.startswith("chesscli.")):
        name = f"chesscli.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """Install a stderr handler for command line use.

    The library itself never installs handlers; only the entry point calls
    this.

    Args:
        level: Level name; defaults to $CHESSCLI_LOG_LEVEL, then WARNING.
            Unknown names fall back to WARNING.
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(name)s: %(levelname)s: %(message)s",
    )
