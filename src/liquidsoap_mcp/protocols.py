"""Protocol interfaces for swappable components.

Tool handlers and AppState reference these protocols, not the concrete
implementations, so tests can substitute lightweight fakes.
"""

from __future__ import annotations

from typing import Protocol


class CacheProtocol(Protocol):
    """Interface for the documentation cache."""

    def get(self, url: str) -> str | None: ...

    def put(self, url: str, content: str) -> None: ...


class FetcherProtocol(Protocol):
    """Interface for the cache-first documentation fetcher."""

    async def fetch(self, url: str) -> str: ...
