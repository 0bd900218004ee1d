"""Integration test fixtures.

Provides a fully wired AppState with the fake-clock cache and a real
httpx client (mocked per test with respx).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from liquidsoap_mcp.config import Settings
from liquidsoap_mcp.fetcher import Fetcher
from liquidsoap_mcp.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from liquidsoap_mcp.cache import DocCache


@pytest.fixture()
def subprocess_env() -> dict[str, str]:
    """Env for subprocess-based MCP tests: quiet logs, no stray config overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("LIQUIDSOAP_MCP__")}
    env["LIQUIDSOAP_MCP__LOGGING__LEVEL"] = "WARNING"
    return env


@pytest.fixture()
async def app_state(cache: DocCache) -> AsyncGenerator[AppState, None]:
    """Full AppState for handler and dispatcher tests."""
    async with httpx.AsyncClient() as client:
        yield AppState(
            settings=Settings(),
            cache=cache,
            fetcher=Fetcher(client, cache),
            http_client=client,
        )
