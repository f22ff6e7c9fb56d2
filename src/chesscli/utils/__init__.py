"""Utility modules for chesscli.

Provides:
- logger: get_logger and configure_logging
"""

from chesscli.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
