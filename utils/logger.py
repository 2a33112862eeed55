"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

The vault is a library, so handlers are attached to the package loggers
listed in `_PACKAGES` rather than to the root logger. The host
application's own logging setup is left untouched.
"""

import logging
import sys

from config import LOG_FILE, LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PACKAGES = ("db", "repositories", "services")
_initialized = False


def _build_handler() -> logging.Handler:
    if LOG_FILE:
        handler: logging.Handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return handler


def _init_logging() -> None:
    """Attach one shared handler to every vault package logger."""
    global _initialized
    if _initialized:
        return
    handler = _build_handler()
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    for package in _PACKAGES:
        pkg_logger = logging.getLogger(package)
        pkg_logger.setLevel(level)
        pkg_logger.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger that propagates to its package handler.
    """
    _init_logging()
    return logging.getLogger(name)
