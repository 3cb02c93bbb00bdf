"""Minimal logging utilities for pygkit.

Provides a simple get_logger function that wraps the standard library logging.
pygkit never installs handlers; the embedding application decides where
records go.

Example:
    >>> from pygkit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Running lexer tool")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pygkit." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("runner")
        >>> logger.name
        'pygkit.runner'
    """
    if not (name == "pygkit" or name.startswith("pygkit.")):
        name = f"pygkit.{name}"
    return logging.getLogger(name)
