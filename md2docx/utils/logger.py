"""Logging helper for md2docx.

Example:
    >>> from md2docx.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d blocks", 12)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "md2docx"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``md2docx``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("tables").name
        'md2docx.tables'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Route md2docx log records to stderr.

    Args:
        verbose: Log at DEBUG when True, otherwise WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
