"""In-memory documentation cache with a fixed freshness window.

Entries are keyed by URL and live for the whole process. A stale entry is
reported as a miss; the next successful fetch replaces it. There is no size
cap: in normal operation only the fixed section URLs are ever stored.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import structlog

from liquidsoap_mcp.models.cache import CacheEntry

if TYPE_CHECKING:
    from collections.abc import Callable

log = structlog.get_logger()

DEFAULT_TTL = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DocCache:
    """Dict-backed cache implementing CacheProtocol."""

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get(self, url: str) -> str | None:
        """Return the cached body for ``url`` if still fresh, else ``None``."""
        entry = self._entries.get(url)
        if entry is None:
            return None

        age = self._clock() - entry.fetched_at
        if age >= self._ttl:
            log.debug("cache_entry_stale", url=url, age_seconds=age.total_seconds())
            return None
        return entry.content

    def put(self, url: str, content: str) -> None:
        self._entries[url] = CacheEntry(url=url, content=content, fetched_at=self._clock())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return url in self._entries
