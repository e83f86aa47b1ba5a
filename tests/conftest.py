from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from log_event_rules.core.models import LogEvent, LogLevel
from log_event_rules.core.stats import default_stats


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    def _make(
        level: LogLevel = LogLevel.ERROR,
        message: str | None = "something happened",
        **kwargs: Any,
    ) -> LogEvent:
        return LogEvent(level=level, message=message, **kwargs)

    return _make


@pytest.fixture
def rules_config() -> dict[str, Any]:
    return {
        "parts": {"id": "[0-9]+", "unused": ""},
        "events": {
            "filters": {
                "ignore_debug": {"matchLevel": ["DEBUG", "TRACE"]},
            },
            "rules": {
                "user_error": {
                    "matchLevel": ["ERROR"],
                    "matchMessage": ["user-{id} failed"],
                },
                "any_error": {"matchLevel": ["ERROR", "FATAL"]},
            },
        },
        "breadcrumbs": {
            "rules": {
                "db": {"matchLoggerName": [r"^db\.(?<component>\w+)"]},
            },
        },
    }


@pytest.fixture
def raised_error() -> ValueError:
    try:
        raise ValueError("bad value for key=abc")
    except ValueError as exc:
        return exc


@pytest.fixture(autouse=True)
def _reset_default_stats():
    default_stats().snapshot(reset=True)
    yield
    default_stats().snapshot(reset=True)
