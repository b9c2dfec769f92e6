"""
Logging configuration for pointshape.

Library modules only ask for loggers; the application decides where the
output goes by calling setup_logging().

Usage:
    from pointshape.core.logging_config import get_logger, setup_logging

    setup_logging(level=logging.DEBUG)
    logger = get_logger(__name__)
    logger.debug("Point moved to %s", point.get_location())
"""

from __future__ import annotations
import logging
import sys
from typing import IO, Optional

# Package-wide logger name prefix
LOGGER_PREFIX = "pointshape"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

# Silent until an application attaches a handler.
logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a stream handler to the pointshape logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Root logger for pointshape
    """
    global _handler

    root_logger = logging.getLogger(LOGGER_PREFIX)

    # Reinitializing replaces the previous handler instead of stacking another.
    if _handler is not None:
        root_logger.removeHandler(_handler)

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _handler = handler
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the pointshape namespace.

    Args:
        name: Module name (typically __name__)
    """
    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime."""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Enable DEBUG level logging."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Set logging back to INFO level."""
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
