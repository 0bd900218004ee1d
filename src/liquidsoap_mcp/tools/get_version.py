"""Tool handler for get_version."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog

from liquidsoap_mcp import __version__
from liquidsoap_mcp.sections import DOC_BASE_URL, LIQUIDSOAP_VERSION

if TYPE_CHECKING:
    from liquidsoap_mcp.state import AppState


async def handle(state: AppState) -> str:
    """Handle a get_version tool call."""
    structlog.get_logger().bind(tool="get_version").info("handler_called")
    return json.dumps(
        {
            "version": LIQUIDSOAP_VERSION,
            "documentation_base": DOC_BASE_URL,
            "server_version": __version__,
        },
        indent=2,
    )
