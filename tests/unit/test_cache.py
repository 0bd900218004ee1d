"""Unit tests for liquidsoap_mcp.cache."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from liquidsoap_mcp.cache import DEFAULT_TTL, DocCache

if TYPE_CHECKING:
    from tests.conftest import FakeClock

URL = "https://www.liquidsoap.info/doc-2.4.0/reference.html"


class TestDocCache:
    def test_default_ttl_is_one_hour(self) -> None:
        assert DEFAULT_TTL == timedelta(hours=1)
        assert DocCache().ttl == DEFAULT_TTL

    def test_get_missing_returns_none(self, cache: DocCache) -> None:
        assert cache.get(URL) is None

    def test_put_then_get(self, cache: DocCache) -> None:
        cache.put(URL, "<html>reference</html>")
        assert cache.get(URL) == "<html>reference</html>"

    def test_fresh_just_before_expiry(self, cache: DocCache, clock: FakeClock) -> None:
        cache.put(URL, "content")
        clock.advance(minutes=59, seconds=59, milliseconds=999)
        assert cache.get(URL) == "content"

    def test_stale_at_expiry(self, cache: DocCache, clock: FakeClock) -> None:
        cache.put(URL, "content")
        clock.advance(hours=1)
        assert cache.get(URL) is None

    def test_stale_entry_is_kept_until_replaced(self, cache: DocCache, clock: FakeClock) -> None:
        cache.put(URL, "old")
        clock.advance(hours=2)
        assert cache.get(URL) is None
        assert URL in cache

    def test_put_after_expiry_replaces_and_refreshes(
        self, cache: DocCache, clock: FakeClock
    ) -> None:
        cache.put(URL, "old")
        clock.advance(hours=2)
        cache.put(URL, "new")
        assert cache.get(URL) == "new"
        assert len(cache) == 1

    def test_custom_ttl(self, clock: FakeClock) -> None:
        cache = DocCache(ttl=timedelta(seconds=10), clock=clock)
        cache.put(URL, "content")
        clock.advance(seconds=9)
        assert cache.get(URL) == "content"
        clock.advance(seconds=1)
        assert cache.get(URL) is None

    def test_entries_keyed_by_url(self, cache: DocCache) -> None:
        cache.put("https://example.com/a", "A")
        cache.put("https://example.com/b", "B")
        assert cache.get("https://example.com/a") == "A"
        assert cache.get("https://example.com/b") == "B"
        assert len(cache) == 2
