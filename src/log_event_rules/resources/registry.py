"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from log_event_rules.core.levels import LEVEL_RANKS
from log_event_rules.core.matcher import CRITERIA_KEYS
from log_event_rules.core.ruleset import RULE_CATEGORIES
from log_event_rules.tools.models import ClassifyResponse, EventPayload


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://event-rules/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs and rule keys."""
        return (
            "Resources:\n"
            "- app://event-rules/help\n"
            "- app://event-rules/levels\n"
            "- app://event-rules/schemas/event\n"
            "- app://event-rules/schemas/classify-response\n"
            f"\nRule categories: {', '.join(RULE_CATEGORIES)}\n"
            f"Rule criteria: {', '.join(CRITERIA_KEYS)}\n"
            "Parts: define `parts: {name: regex}` and reference them as {name}.\n"
        )

    @mcp.resource("app://event-rules/levels")
    def levels() -> dict[str, int]:
        """Return the level-name to severity table."""
        return {level.value: rank for level, rank in LEVEL_RANKS.items()}

    @mcp.resource("app://event-rules/schemas/event")
    def event_schema() -> dict[str, Any]:
        """Return the JSON schema for event payloads."""
        return EventPayload.model_json_schema()

    @mcp.resource("app://event-rules/schemas/classify-response")
    def classify_response_schema() -> dict[str, Any]:
        """Return the JSON schema for classify_event responses."""
        return ClassifyResponse.model_json_schema()
