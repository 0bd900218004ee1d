"""Tool handler for get_documentation.

Resolves the section, fetches its page through the shared cache-first
fetcher, extracts plain text and applies the length cap. No MCP imports:
the dispatcher handles the envelope.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from liquidsoap_mcp.errors import ValidationInputError
from liquidsoap_mcp.extractor import extract_text
from liquidsoap_mcp.models.tools import GetDocumentationInput
from liquidsoap_mcp.sections import LIQUIDSOAP_VERSION, get_section

if TYPE_CHECKING:
    from collections.abc import Mapping

    from liquidsoap_mcp.state import AppState

TRUNCATION_MARKER = "\n\n[Content truncated. Use max_length parameter to adjust.]"


async def handle(arguments: Mapping[str, Any], state: AppState) -> str:
    """Handle a get_documentation tool call."""
    log = structlog.get_logger().bind(tool="get_documentation", section=arguments.get("section"))
    log.info("handler_called")

    try:
        validated = GetDocumentationInput.model_validate(arguments)
    except ValidationError as exc:
        raise ValidationInputError(
            message=str(exc),
            suggestion="Provide a section name and, optionally, a positive max_length.",
        ) from exc

    section = get_section(validated.section)
    html = await state.fetcher.fetch(section.url)
    text = extract_text(html)

    limit = validated.limit
    if len(text) > limit:
        log.info("content_truncated", full_length=len(text), max_length=limit)
        text = text[:limit] + TRUNCATION_MARKER

    return f"# LiquidSoap {LIQUIDSOAP_VERSION} - {section.key}\n\nSource: {section.url}\n\n{text}"
