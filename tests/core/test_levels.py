from __future__ import annotations

import logging
import sys

import pytest

from log_event_rules.core.compile import compile_all, compile_levels, compile_patterns
from log_event_rules.core.levels import LEVEL_RANKS, level_from_logging, parse_level
from log_event_rules.core.models import LogEvent, LogLevel, render_exception
from log_event_rules.core.parts import PartRegistry


def test_level_ranks_are_ordered_by_severity() -> None:
    ordered = [
        LogLevel.FATAL,
        LogLevel.ERROR,
        LogLevel.WARN,
        LogLevel.INFO,
        LogLevel.DEBUG,
        LogLevel.TRACE,
    ]
    ranks = [LEVEL_RANKS[level] for level in ordered]

    assert ranks == sorted(ranks)
    assert LEVEL_RANKS[LogLevel.ERROR] == 200


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("error", LogLevel.ERROR),
        (" WARN ", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("CRITICAL", LogLevel.FATAL),
        ("trace", LogLevel.TRACE),
        ("loud", None),
        ("", None),
    ],
)
def test_parse_level(raw: str, expected: LogLevel | None) -> None:
    assert parse_level(raw) == expected


@pytest.mark.parametrize(
    ("levelno", "expected"),
    [
        (logging.CRITICAL, LogLevel.FATAL),
        (logging.ERROR, LogLevel.ERROR),
        (logging.WARNING, LogLevel.WARN),
        (logging.INFO, LogLevel.INFO),
        (logging.DEBUG, LogLevel.DEBUG),
        (5, LogLevel.TRACE),
    ],
)
def test_level_from_logging(levelno: int, expected: LogLevel) -> None:
    assert level_from_logging(levelno) == expected


def test_compile_levels_collapses_duplicates_and_reports_unknown() -> None:
    ranks, failures = compile_levels(["ERROR", "error", "nope", "WARN"])

    assert ranks == {200, 300}
    assert [f.entry for f in failures] == ["nope"]


def test_compile_patterns_reports_substituted_failures() -> None:
    parts = PartRegistry({"id": "[0-9"})

    patterns, failures = compile_patterns(["ok", "user-{id}"], parts)

    assert [p.pattern for p in patterns] == ["ok"]
    assert failures[0].entry == "user-(?<id>[0-9)"
    assert failures[0].error


def test_compile_all_only_catches_listed_errors() -> None:
    def _boom(entry: str) -> int:
        raise KeyError(entry)

    with pytest.raises(KeyError):
        compile_all(["x"], _boom)


def test_event_from_record_keeps_exception() -> None:
    try:
        raise RuntimeError("disk full")
    except RuntimeError:
        record = logging.LogRecord(
            "storage", logging.CRITICAL, __file__, 1, "write failed", None, sys.exc_info()
        )

    event = LogEvent.from_record(record)

    assert event.level == LogLevel.FATAL
    assert event.logger_name == "storage"
    assert event.message == "write failed"
    assert isinstance(event.exception, RuntimeError)
    assert "RuntimeError: disk full" in render_exception(event.exception)


def test_render_exception_passes_strings_through() -> None:
    assert render_exception("already rendered") == "already rendered"


def test_event_from_record_falls_back_to_exc_text() -> None:
    record = logging.LogRecord("worker", logging.ERROR, __file__, 1, "job failed", None, None)
    record.exc_text = "Traceback (most recent call last):\nValueError: bad row"

    event = LogEvent.from_record(record)

    assert event.exception == record.exc_text
    assert render_exception(event.exception).endswith("ValueError: bad row")
