"""
Logging port for the orbit core.

Library code never configures handlers. Functions that swallow errors accept
an optional ``logger`` so callers can route diagnostics wherever they like;
without one they fall back to the ``solar_orbit`` package logger.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "solar_orbit"

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())


def get_logger(logger: Optional[LoggerLike] = None, name: Optional[str] = None) -> LoggerLike:
    """Return the injected logger, or a child of the package logger."""
    if logger is not None:
        return logger
    if name is None or name == PACKAGE_LOGGER_NAME:
        return _package_logger
    if name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return _package_logger.getChild(name)


def configure_debug_logging(enabled: bool = True, logger: Optional[logging.Logger] = None) -> bool:
    """
    Switch verbose per-call diagnostics on or off for the package logger
    (or the given one). Returns the new state.
    """
    target = logger if logger is not None else _package_logger
    target.setLevel(logging.DEBUG if enabled else logging.WARNING)
    return enabled
