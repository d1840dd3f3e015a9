"""Logging setup for scripts using the client."""
from __future__ import annotations
import logging
import sys

PACKAGE_LOGGER = "genderize"

def setup_logging(level: int = logging.INFO, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Attach a stdout handler to the client's loggers.

    Only the named logger is touched, so handlers an application installs on
    the root logger stay as they are. Records stop at this logger.

    Args:
        level: Logging level.
        name: Logger to configure; defaults to the package logger.

    Returns:
        The configured logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
