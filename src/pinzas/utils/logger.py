"""Minimal logging utilities for Pinzas.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pinzas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning buffer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pinzas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pinzas.mymodule'
    """
    # Ensure pinzas prefix for consistent namespacing
    if not (name == "pinzas" or name.startswith("pinzas.")):
        name = f"pinzas.{name}"
    return logging.getLogger(name)
