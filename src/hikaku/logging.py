"""Logging setup shared by the exporter and the differ."""
from __future__ import annotations

import logging
import os
import sys
from typing import Final

from hikaku.constants import LOG_LEVEL_ENV

PACKAGE_LOGGER_NAME: Final[str] = "hikaku"

# Allow environment override without touching handlers
_LEVEL_NAME: Final[str] = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
_PACKAGE_LOGGER_LEVEL: Final[int] = getattr(logging, _LEVEL_NAME, logging.INFO)

_handler: logging.Handler | None = None


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without altering handlers.

    Module loggers inherit their level from the package logger, which is the
    only logger :func:`configure_logging` adjusts.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger for one CLI invocation."""
    global _handler

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _PACKAGE_LOGGER_LEVEL

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = _StderrHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging", "get_logger"]
