"""Request/response schemas for the MCP tools."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EventPayload(BaseModel):
    level: str = Field(description="Severity name, e.g. ERROR, WARN, INFO (case-insensitive).")
    message: str | None = Field(default=None, description="Formatted log message.")
    exception: str | None = Field(
        default=None, description="Rendered stack trace of the attached exception, if any."
    )
    thread_name: str | None = Field(default=None, description="Name of the emitting thread.")
    logger_name: str | None = Field(default=None, description="Name of the emitting logger.")


class RuleHitPayload(BaseModel):
    rule: str = Field(description="Dotted path of the matching rule.")
    groups: dict[str, str] = Field(
        default_factory=dict, description="Captured groups by name and 1-based index."
    )
    rendered: dict[str, str] = Field(
        default_factory=dict, description="Templates rendered with this rule's groups."
    )


class ClassifyResponse(BaseModel):
    filtered: bool = Field(description="True when a filter rule dropped the event.")
    matched: bool = Field(description="True when at least one rule matched.")
    hits: list[RuleHitPayload] = Field(default_factory=list)
