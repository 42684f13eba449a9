"""Minimal logging utilities for Publication.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications (and the CLI) configure
logging themselves.

Example:
    >>> from publication.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d blocks", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "publication." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'publication.mymodule'
    """
    if not (name == "publication" or name.startswith("publication.")):
        name = f"publication.{name}"
    return logging.getLogger(name)


def _install_null_handler() -> logging.Logger:
    """Attach a NullHandler to the package root logger."""
    root = logging.getLogger("publication")
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    return root


_install_null_handler()
