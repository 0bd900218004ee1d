"""Tool handler for search_functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from liquidsoap_mcp.errors import ValidationInputError
from liquidsoap_mcp.models.tools import SearchFunctionsInput
from liquidsoap_mcp.search import search_functions
from liquidsoap_mcp.sections import REFERENCE_URL

if TYPE_CHECKING:
    from collections.abc import Mapping

    from liquidsoap_mcp.state import AppState


async def handle(arguments: Mapping[str, Any], state: AppState) -> str:
    """Handle a search_functions tool call."""
    log = structlog.get_logger().bind(tool="search_functions", query=arguments.get("query"))
    log.info("handler_called")

    try:
        validated = SearchFunctionsInput.model_validate(arguments)
    except ValidationError as exc:
        raise ValidationInputError(
            message=str(exc),
            suggestion="Provide a non-empty search term (max 500 chars).",
        ) from exc

    search_settings = state.settings.search
    return await search_functions(
        validated.query,
        state.fetcher,
        url=REFERENCE_URL,
        max_results=search_settings.max_results,
        context_lines=search_settings.context_lines,
    )
