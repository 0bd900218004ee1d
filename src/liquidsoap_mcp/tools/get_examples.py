"""Tool handler for get_examples."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from liquidsoap_mcp.errors import ValidationInputError
from liquidsoap_mcp.examples import EXAMPLES, get_example
from liquidsoap_mcp.models.tools import GetExamplesInput

if TYPE_CHECKING:
    from collections.abc import Mapping

    from liquidsoap_mcp.state import AppState


async def handle(arguments: Mapping[str, Any], state: AppState) -> str:
    """Handle a get_examples tool call."""
    log = structlog.get_logger().bind(tool="get_examples", task=arguments.get("task"))
    log.info("handler_called")

    try:
        validated = GetExamplesInput.model_validate(arguments)
    except ValidationError as exc:
        raise ValidationInputError(
            message=str(exc),
            suggestion=f"Provide a task name such as: {', '.join(EXAMPLES)}.",
        ) from exc

    return get_example(validated.task)
