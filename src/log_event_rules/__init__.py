"""Rule-based classification of log/error events.

Rules constrain an event's level, message, exception trace, thread name and
logger name with regex criteria; matching rules report the groups they captured.
"""

from __future__ import annotations

from .core import (
    ConfigShapeError,
    LogEvent,
    LogLevel,
    MatchStats,
    PartRegistry,
    RuleHit,
    RuleMatcher,
    RuleSet,
    render_template,
)

__all__ = [
    "ConfigShapeError",
    "LogEvent",
    "LogLevel",
    "MatchStats",
    "PartRegistry",
    "RuleHit",
    "RuleMatcher",
    "RuleSet",
    "render_template",
]
