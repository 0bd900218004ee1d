"""Shared runtime state for one server process.

The lifespan builds a single ``AppState`` and the dispatcher passes it to
every handler. The lifespan also owns teardown: ``http_client`` is closed
through this object when the server stops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from liquidsoap_mcp.config import Settings
    from liquidsoap_mcp.protocols import CacheProtocol, FetcherProtocol


@dataclass
class AppState:
    settings: Settings
    cache: CacheProtocol
    fetcher: FetcherProtocol
    http_client: httpx.AsyncClient
