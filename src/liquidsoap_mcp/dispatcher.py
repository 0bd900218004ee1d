"""Tool catalog and call routing.

``TOOLS`` is what ``tools/list`` advertises. ``dispatch`` routes a named call
to its handler and wraps the outcome in a ``CallToolResult``. It never
raises: every failure becomes an ``isError=True`` result so the agent always
gets a readable message instead of a protocol fault.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from mcp.types import CallToolResult, TextContent, Tool

import liquidsoap_mcp.tools.get_changelog as t_get_changelog
import liquidsoap_mcp.tools.get_documentation as t_get_documentation
import liquidsoap_mcp.tools.get_examples as t_get_examples
import liquidsoap_mcp.tools.get_version as t_get_version
import liquidsoap_mcp.tools.list_sections as t_list_sections
import liquidsoap_mcp.tools.search_functions as t_search_functions
import liquidsoap_mcp.tools.validate_script_syntax as t_validate_script
from liquidsoap_mcp.errors import LiquidsoapMCPError, MissingArgumentsError, UnknownToolError
from liquidsoap_mcp.examples import EXAMPLES
from liquidsoap_mcp.models.tools import DEFAULT_MAX_LENGTH
from liquidsoap_mcp.sections import DOC_SECTIONS, LIQUIDSOAP_VERSION

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from liquidsoap_mcp.state import AppState

log = structlog.get_logger()

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}

TOOLS: tuple[Tool, ...] = (
    Tool(
        name="get_version",
        description=f"Get the LiquidSoap version this server supports ({LIQUIDSOAP_VERSION})",
        inputSchema=_EMPTY_SCHEMA,
    ),
    Tool(
        name="get_documentation",
        description=f"Fetch a specific section of the LiquidSoap {LIQUIDSOAP_VERSION} documentation",
        inputSchema={
            "type": "object",
            "properties": {
                "section": {
                    "type": "string",
                    "description": (
                        f"Documentation section to fetch. Available: {', '.join(DOC_SECTIONS)}"
                    ),
                    "enum": list(DOC_SECTIONS),
                },
                "max_length": {
                    "type": "number",
                    "description": (
                        "Maximum length of returned content in characters "
                        f"(default: {DEFAULT_MAX_LENGTH})"
                    ),
                },
            },
            "required": ["section"],
        },
    ),
    Tool(
        name="search_functions",
        description="Search for functions or operators in the LiquidSoap API reference",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search term (function name, keyword, or description)",
                },
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="get_changelog",
        description=f"Get the changelog and breaking changes for LiquidSoap {LIQUIDSOAP_VERSION}",
        inputSchema=_EMPTY_SCHEMA,
    ),
    Tool(
        name="get_examples",
        description="Get code examples for common LiquidSoap tasks",
        inputSchema={
            "type": "object",
            "properties": {
                "task": {
                    "type": "string",
                    "description": (
                        "Task to get an example for (e.g., "
                        + ", ".join(f"'{key}'" for key in EXAMPLES)
                        + ")"
                    ),
                },
            },
            "required": ["task"],
        },
    ),
    Tool(
        name="list_sections",
        description="List all available documentation sections with descriptions",
        inputSchema=_EMPTY_SCHEMA,
    ),
    Tool(
        name="validate_script_syntax",
        description="Provide basic syntax validation and best practices for a LiquidSoap script",
        inputSchema={
            "type": "object",
            "properties": {
                "script": {
                    "type": "string",
                    "description": "LiquidSoap script code to validate",
                },
            },
            "required": ["script"],
        },
    ),
)

_NO_ARGUMENT_HANDLERS: dict[str, Callable[[AppState], Awaitable[str]]] = {
    "get_version": t_get_version.handle,
    "list_sections": t_list_sections.handle,
    "get_changelog": t_get_changelog.handle,
}

_ARGUMENT_HANDLERS: dict[str, Callable[[Mapping[str, Any], AppState], Awaitable[str]]] = {
    "get_documentation": t_get_documentation.handle,
    "search_functions": t_search_functions.handle,
    "get_examples": t_get_examples.handle,
    "validate_script_syntax": t_validate_script.handle,
}


def tool_names() -> list[str]:
    return [tool.name for tool in TOOLS]


async def _route(name: str, arguments: Mapping[str, Any] | None, state: AppState) -> str:
    no_arg_handler = _NO_ARGUMENT_HANDLERS.get(name)
    if no_arg_handler is not None:
        return await no_arg_handler(state)

    handler = _ARGUMENT_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(
            message=f"Unknown tool: {name}",
            suggestion=f"Available tools: {', '.join(tool_names())}",
        )
    if not arguments:
        raise MissingArgumentsError(
            message=f"Missing arguments for tool: {name}",
            suggestion="Check the tool's input schema for required fields.",
        )
    return await handler(arguments, state)


def _text_result(text: str, *, is_error: bool) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


async def dispatch(
    name: str,
    arguments: Mapping[str, Any] | None,
    state: AppState,
) -> CallToolResult:
    """Run one tool call and return its result envelope."""
    try:
        text = await _route(name, arguments, state)
    except LiquidsoapMCPError as exc:
        log.warning(
            "tool_error",
            tool=name,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
        )
        return _text_result(exc.to_text(), is_error=True)
    except Exception as exc:
        log.error("tool_unexpected_error", tool=name, exc_info=True)
        return _text_result(f"Error: {exc}", is_error=True)

    return _text_result(text, is_error=False)
