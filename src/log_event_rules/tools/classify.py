"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from log_event_rules.core.levels import parse_level
from log_event_rules.core.models import LogEvent, LogLevel
from log_event_rules.core.ruleset import RuleHit, RuleSet
from log_event_rules.core.stats import default_stats
from log_event_rules.core.templates import render_template
from log_event_rules.tools.models import ClassifyResponse, EventPayload, RuleHitPayload

EVENT_KINDS = ("events", "breadcrumbs")
ALL_LEVELS = [level.value for level in LogLevel]


def _parse_event(event: Mapping[str, Any]) -> LogEvent:
    """Validate a raw event payload and convert it into a LogEvent."""
    payload = EventPayload.model_validate(event)
    level = parse_level(payload.level)
    if level is None:
        valid = ", ".join(ALL_LEVELS)
        raise ValueError(
            f"Unknown log level '{payload.level}'. Valid values: {valid}. "
            "Tip: level is case-insensitive (e.g., 'error', 'WARNING')."
        )
    return LogEvent(
        level=level,
        message=payload.message,
        exception=payload.exception,
        thread_name=payload.thread_name,
        logger_name=payload.logger_name,
    )


def _hit_to_payload(hit: RuleHit, templates: Mapping[str, str] | None) -> RuleHitPayload:
    rendered = {name: render_template(t, hit.groups) for name, t in (templates or {}).items()}
    return RuleHitPayload(rule=hit.rule, groups=hit.groups, rendered=rendered)


def classify_event_impl(
    *,
    event: Mapping[str, Any],
    rules: Mapping[str, Any],
    kind: str = "events",
    first_only: bool = False,
    templates: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Implementation for the `classify_event` MCP tool.

    Notes
    -----
    - Filters of the selected kind run first; a filtered event reports no hits.
    - first_only stops at the first matching rule (configured order).
    - templates are rendered once per hit with that hit's groups.
    """
    if kind not in EVENT_KINDS:
        raise ValueError(f"kind must be one of: {', '.join(EVENT_KINDS)}")

    log_event = _parse_event(event)
    ruleset = RuleSet.from_config(rules, stats=default_stats())

    if ruleset.is_filtered(log_event, kind=kind):
        return ClassifyResponse(filtered=True, matched=False).model_dump()

    if first_only:
        first = ruleset.first_match(log_event, kind=kind)
        hits = [first] if first is not None else []
    else:
        hits = ruleset.matching_rules(log_event, kind=kind)

    return ClassifyResponse(
        filtered=False,
        matched=bool(hits),
        hits=[_hit_to_payload(h, templates) for h in hits],
    ).model_dump()


def read_match_stats_impl(*, reset: bool = True) -> dict[str, int]:
    """Implementation for the `read_match_stats` MCP tool."""
    return default_stats().snapshot(reset=reset)
