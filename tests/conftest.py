"""Shared test fixtures for the liquidsoap_mcp test suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from liquidsoap_mcp.cache import DocCache


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, tzinfo=UTC))


@pytest.fixture()
def cache(clock: FakeClock) -> DocCache:
    """Empty cache driven by the fake clock."""
    return DocCache(clock=clock)
