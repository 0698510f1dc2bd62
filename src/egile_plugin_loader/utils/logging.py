"""Logging configuration for Egile Plugin Loader.

Loader diagnostics carry a tag (``COMMANDS``, ``COMMANDS CRITICAL``) next to
the message. ``LoggingDebug`` attaches it as the ``tag`` record attribute;
records from plain module loggers get their logger name instead, so one
format covers both.
"""

import logging
import sys
from typing import Literal, get_args

from egile_plugin_loader.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)

PACKAGE_LOGGER = "egile_plugin_loader"
TAGGED_FORMAT = "%(asctime)s %(levelname)-8s [%(tag)s] %(message)s"


class TagFilter(logging.Filter):
    """Give untagged records a tag derived from their logger name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "tag"):
            name = record.name
            if name.startswith(f"{PACKAGE_LOGGER}."):
                name = name[len(PACKAGE_LOGGER) + 1 :]
            record.tag = name
        return True


def resolve_level(level: str) -> int:
    """
    Map a level name to its logging constant.

    Raises:
        ConfigurationError: If ``level`` is not one of ``LOG_LEVELS``.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}"
        )
    return logging.getLevelName(name)


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    stream: bool = True,
) -> None:
    """
    Send the loader's tagged diagnostics to stdout.

    Args:
        level: Level name, case-insensitive.
        format_string: Custom format string. ``%(tag)s`` is always available.
        stream: If True, log to stdout.

    Raises:
        ConfigurationError: If ``level`` is not a known level name.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))
    logger.handlers.clear()

    if stream:
        handler = logging.StreamHandler(sys.stdout)
        handler.addFilter(TagFilter())
        handler.setFormatter(logging.Formatter(format_string or TAGGED_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
