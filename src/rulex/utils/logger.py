"""Minimal logging utilities for rulex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from rulex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Compiling rules")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "rulex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'rulex.mymodule'
    """
    if not (name == "rulex" or name.startswith("rulex.")):
        name = f"rulex.{name}"
    return logging.getLogger(name)
