"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the lifespan context manager
- Advertise the tool catalog and hand calls to the dispatcher
- Serve over stdio
"""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import TYPE_CHECKING, Any

import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from liquidsoap_mcp import __version__
from liquidsoap_mcp.cache import DocCache
from liquidsoap_mcp.config import Settings
from liquidsoap_mcp.dispatcher import TOOLS, dispatch
from liquidsoap_mcp.fetcher import Fetcher, build_http_client
from liquidsoap_mcp.sections import DOC_BASE_URL, LIQUIDSOAP_VERSION
from liquidsoap_mcp.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from mcp.types import CallToolResult, Tool

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Send structlog events to stderr at the configured level.

    Runs at the top of the lifespan. Loggers are cached on first use, so
    anything logged before this call keeps structlog's default setup.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if settings.logging.format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.logging.level]
        ),
        context_class=dict,
        # stdout carries the JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(server: Server[AppState, Any]) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    log.info("server_starting", version=__version__, liquidsoap_version=LIQUIDSOAP_VERSION)

    http_client = build_http_client(settings.fetcher)
    cache = DocCache(ttl=timedelta(seconds=settings.cache.ttl_seconds))
    fetcher = Fetcher(http_client, cache)

    state = AppState(
        settings=settings,
        cache=cache,
        fetcher=fetcher,
        http_client=http_client,
    )

    # Readiness announcement on stderr
    log.info(
        "server_started",
        version=__version__,
        transport="stdio",
        documentation_base=DOC_BASE_URL,
        tool_count=len(TOOLS),
    )

    try:
        yield state
    finally:
        await state.http_client.aclose()
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# Server instance and handler registration
# ---------------------------------------------------------------------------

server: Server[AppState, Any] = Server("liquidsoap-mcp", version=__version__, lifespan=lifespan)


@server.list_tools()
async def list_tools() -> list[Tool]:
    return list(TOOLS)


# The dispatcher validates arguments itself so that unknown sections and
# missing fields come back as readable tool errors, not schema failures.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
    state: AppState = server.request_context.lifespan_context
    return await dispatch(name, arguments, state)


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


async def _run_stdio() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    asyncio.run(_run_stdio())


if __name__ == "__main__":
    main()
