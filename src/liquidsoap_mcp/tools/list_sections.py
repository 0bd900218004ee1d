"""Tool handler for list_sections."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog

from liquidsoap_mcp.sections import DOC_SECTIONS

if TYPE_CHECKING:
    from liquidsoap_mcp.state import AppState


async def handle(state: AppState) -> str:
    """Handle a list_sections tool call."""
    structlog.get_logger().bind(tool="list_sections").info("handler_called")
    sections = [
        {"name": section.key, "url": section.url, "description": section.description}
        for section in DOC_SECTIONS.values()
    ]
    return json.dumps(sections, indent=2)
