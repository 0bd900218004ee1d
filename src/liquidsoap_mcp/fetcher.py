"""HTTP documentation fetcher.

All network I/O goes through a single Fetcher shared across tool calls. It
receives an httpx.AsyncClient and a cache via constructor injection; the
server lifespan owns both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from liquidsoap_mcp.errors import FetchError

if TYPE_CHECKING:
    from liquidsoap_mcp.config import FetcherSettings
    from liquidsoap_mcp.protocols import CacheProtocol

log = structlog.get_logger()


def build_http_client(settings: FetcherSettings) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": settings.user_agent},
    )


class Fetcher:
    """Cache-first documentation fetcher implementing FetcherProtocol."""

    def __init__(self, client: httpx.AsyncClient, cache: CacheProtocol) -> None:
        self._client = client
        self._cache = cache

    async def fetch(self, url: str) -> str:
        """Return the raw body of ``url``, from cache when fresh.

        A single attempt is made on a miss. Raises FetchError on network
        errors and non-2xx responses; failures are never cached.
        """
        cached = self._cache.get(url)
        if cached is not None:
            log.debug("cache_hit", url=url)
            return cached

        log.info("cache_miss_fetching", url=url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(
                message=f"Failed to fetch documentation from {url}: {type(exc).__name__}: {exc}",
                suggestion="The documentation site may be temporarily unreachable.",
                recoverable=True,
            ) from exc

        if not response.is_success:
            raise FetchError(
                message=(
                    f"Failed to fetch documentation from {url}: "
                    f"HTTP {response.status_code}: {response.reason_phrase}"
                ),
                suggestion="The documentation page may have moved or be temporarily unavailable.",
                recoverable=response.status_code >= 500,
            )

        content = response.text
        self._cache.put(url, content)
        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(content),
        )
        return content
