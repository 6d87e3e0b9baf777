"""Minimal logging utilities for Monkey.

Example:
    >>> from monkey.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``monkey.``.

    Example:
        >>> get_logger("cli").name
        'monkey.cli'
    """
    if not (name == "monkey" or name.startswith("monkey.")):
        name = f"monkey.{name}"
    return logging.getLogger(name)
