"""Core data models for rule matching."""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from enum import Enum


class LogLevel(str, Enum):
    """Severity levels understood by rule criteria (log4j naming)."""

    OFF = "OFF"
    FATAL = "FATAL"
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"
    ALL = "ALL"


# Captured groups keyed by group name or 1-based index ("1", "2", ...).
MatchGroups = dict[str, str]


def render_exception(exc: BaseException | str) -> str:
    """Render an exception (or an already-rendered trace) as stack trace text."""
    if isinstance(exc, str):
        return exc
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A single log/error event to classify."""

    level: LogLevel
    message: str | None = None
    exception: BaseException | str | None = None  # str means a pre-rendered trace
    thread_name: str | None = None
    logger_name: str | None = None

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> LogEvent:
        """Build an event from a standard library log record."""
        from .levels import level_from_logging

        exception: BaseException | str | None = None
        if record.exc_info and record.exc_info[1] is not None:
            exception = record.exc_info[1]
        elif record.exc_text:
            exception = record.exc_text

        return cls(
            level=level_from_logging(record.levelno),
            message=record.getMessage(),
            exception=exception,
            thread_name=record.threadName,
            logger_name=record.name,
        )
