"""
Logging configuration for Matrix Reorder.

Modules obtain their logger with ``get_logger(__name__)``; applications call
``setup_logging()`` once at startup to attach handlers to the package logger.
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "matrix_reorder"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for a module.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Standard library logger
    """
    return logging.getLogger(name)


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger with a console handler and an optional file handler.

    Calling it again replaces the previous handlers, so repeated setup (for
    example when a Panel server reloads) does not duplicate log lines.

    Args:
        level: Logging level (``logging.DEBUG``, ``"INFO"``...). Defaults to
            ``config.log_level``.
        log_file: Optional path to also write logs to

    Returns:
        The configured package logger
    """
    if level is None:
        from ..config import config

        level = config.log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
