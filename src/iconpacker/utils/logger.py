"""Minimal logging utilities for iconpacker.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from iconpacker.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Writing enum")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "iconpacker." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'iconpacker.mymodule'
    """
    if not (name == "iconpacker" or name.startswith("iconpacker.")):
        name = f"iconpacker.{name}"
    return logging.getLogger(name)
