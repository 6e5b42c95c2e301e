"""Logging configuration for the lstree command line.

Library modules only create loggers with ``logging.getLogger(__name__)``; the
command line attaches a single stderr handler to the package logger.
"""

import logging
import os
import sys

LOGGER_NAME = "lstree"
LOG_LEVEL_ENV = "LSTREE_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s: %(message)s"


def resolve_level(verbosity: int = 0) -> int:
    """Compute the effective log level.

    The base level comes from the LSTREE_LOG_LEVEL environment variable, falling back
    to WARNING for unset or unknown values. Each verbosity step lowers it by one level,
    down to DEBUG.

    Args:
        verbosity: Number of -v flags given.

    Returns:
        A logging level number.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    base = logging.getLevelName(name) if name else DEFAULT_LEVEL
    if not isinstance(base, int):
        base = DEFAULT_LEVEL
    return max(logging.DEBUG, base - 10 * verbosity)


def setup_logger(verbosity: int = 0) -> logging.Logger:
    """Configure and return the package logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        verbosity: Number of -v flags given.

    Returns:
        The configured "lstree" logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = resolve_level(verbosity)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_lstree_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._lstree_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
