"""Level name to severity resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .models import LogLevel

# Lower rank means more severe; OFF and ALL bracket the usable range.
LEVEL_RANKS: Mapping[LogLevel, int] = {
    LogLevel.OFF: 0,
    LogLevel.FATAL: 100,
    LogLevel.ERROR: 200,
    LogLevel.WARN: 300,
    LogLevel.INFO: 400,
    LogLevel.DEBUG: 500,
    LogLevel.TRACE: 600,
    LogLevel.ALL: 2147483647,
}

_LEVEL_ALIASES = {
    "WARNING": "WARN",
    "ERR": "ERROR",
    "CRITICAL": "FATAL",
    "SEVERE": "FATAL",
    "FINE": "DEBUG",
}


def parse_level(value: str) -> LogLevel | None:
    """Parse a level name (case-insensitive, common aliases accepted)."""
    name = value.strip().upper()
    if not name:
        return None
    name = _LEVEL_ALIASES.get(name, name)
    try:
        return LogLevel[name]
    except KeyError:
        return None


def level_rank(level: LogLevel) -> int:
    """Return the integer severity of a level."""
    return LEVEL_RANKS[level]


def level_from_logging(levelno: int) -> LogLevel:
    """Map a standard library logging level number onto a LogLevel."""
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE
