"""Tool handler for validate_script_syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from liquidsoap_mcp.errors import ValidationInputError
from liquidsoap_mcp.models.tools import ValidateScriptInput
from liquidsoap_mcp.validator import validate_script

if TYPE_CHECKING:
    from collections.abc import Mapping

    from liquidsoap_mcp.state import AppState


async def handle(arguments: Mapping[str, Any], state: AppState) -> str:
    """Handle a validate_script_syntax tool call."""
    log = structlog.get_logger().bind(tool="validate_script_syntax")
    log.info("handler_called")

    try:
        validated = ValidateScriptInput.model_validate(arguments)
    except ValidationError as exc:
        raise ValidationInputError(
            message=str(exc),
            suggestion="Provide the Liquidsoap script source as a string.",
        ) from exc

    report = validate_script(validated.script)
    log.info("validation_complete", issues=len(report.issues), warnings=len(report.warnings))
    return report.render()
