from __future__ import annotations

import pytest

from log_event_rules.server.rule_server import mcp


@pytest.mark.asyncio
async def test_server_registers_tools() -> None:
    tools = {t.name for t in await mcp.list_tools()}

    assert {"classify_event", "read_match_stats"} <= tools


@pytest.mark.asyncio
async def test_server_registers_resources() -> None:
    uris = {str(r.uri) for r in await mcp.list_resources()}

    assert "app://event-rules/help" in uris
    assert "app://event-rules/levels" in uris
    assert "app://event-rules/schemas/event" in uris
