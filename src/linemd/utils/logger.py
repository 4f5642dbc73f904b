"""Minimal logging utilities for linemd.

Provides a get_logger function that namespaces standard library loggers
under "linemd.". The library never installs handlers; applications opt in
with logging.basicConfig() or their own configuration.

Example:
    >>> from linemd.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("unterminated fence at offset %d", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance under the "linemd" namespace

    Example:
        >>> get_logger("mymodule").name
        'linemd.mymodule'
        >>> get_logger("linemd.lexer.core").name
        'linemd.lexer.core'
    """
    if not (name == "linemd" or name.startswith("linemd.")):
        name = f"linemd.{name}"
    return logging.getLogger(name)
