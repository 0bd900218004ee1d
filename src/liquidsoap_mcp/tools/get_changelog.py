"""Tool handler for get_changelog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from liquidsoap_mcp.changelog import CHANGELOG

if TYPE_CHECKING:
    from liquidsoap_mcp.state import AppState


async def handle(state: AppState) -> str:
    """Handle a get_changelog tool call."""
    structlog.get_logger().bind(tool="get_changelog").info("handler_called")
    return CHANGELOG
