"""Logging setup for sortscope. The library is silent until this is called."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAME = "sortscope"

_console_handler = None


def enable_console_logging(level="INFO") -> logging.Handler:
    """Attach a single stream handler to the package logger."""
    global _console_handler
    logger = logging.getLogger(LOGGER_NAME)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    _console_handler = handler
    return handler


def disable_console_logging():
    """Detach the handler added by ``enable_console_logging``."""
    global _console_handler
    logger = logging.getLogger(LOGGER_NAME)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler = None
    logger.setLevel(logging.NOTSET)
