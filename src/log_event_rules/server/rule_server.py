"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: classify an event against inline rules, read match counters
- Resources: level table, payload schemas and a short help text

Run locally (stdio):
    python -m log_event_rules.server.rule_server
"""

from __future__ import annotations

import logging
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from log_event_rules.resources.registry import register_resources
from log_event_rules.tools.classify import classify_event_impl, read_match_stats_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("EVENT_RULES_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("event-rules", json_response=True)

register_resources(mcp)


@mcp.tool()
def classify_event(
    event: dict[str, Any],
    rules: dict[str, Any],
    kind: str = "events",
    first_only: bool = False,
    templates: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Match one log event against a rule configuration.

    Parameters
    ----------
    event:
        {"level": "ERROR", "message": ..., "exception": ..., "thread_name": ..., "logger_name": ...}.
        Only level is required; exception is the rendered stack trace.
    rules:
        Rule tree with optional "parts" plus "events"/"breadcrumbs" sections, each holding
        "filters" and "rules" keyed by rule name. Rule criteria: matchLevel, matchMessage,
        matchException, matchThreadName, matchLoggerName (lists of strings).
    kind:
        Which section to evaluate: "events" or "breadcrumbs".
    first_only:
        Stop at the first matching rule instead of reporting all of them.
    templates:
        Optional name -> template map (e.g. {"title": "Error {code}"}) rendered with each hit's groups.

    Returns
    -------
    dict:
        {"filtered": bool, "matched": bool, "hits": [{"rule", "groups", "rendered"}]}
    """
    return classify_event_impl(
        event=event,
        rules=rules,
        kind=kind,
        first_only=first_only,
        templates=templates,
    )


@mcp.tool()
def read_match_stats(reset: bool = True) -> dict[str, int]:
    """Return the matched/filtered counters since the last reset (and reset them by default)."""
    return read_match_stats_impl(reset=reset)


def main() -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
