"""Root conftest — shared fixtures for dataset, clocks and analytics.

Invariants:
    - Tests never read a developer's .env dataset path: the bundled seed is used
    - Clocks are manual: tests advance time explicitly, nothing sleeps
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

from portfolio_mcp.core.analytics_store import AnalyticsStore
from portfolio_mcp.infrastructure.portfolio_dataset import load_dataset

os.environ.pop("PORTFOLIO_DATA_PATH", None)
os.environ.setdefault("LOG_FORMAT", "text")


class ManualClock:
    """Monotonic seconds for the rate limiter; advance() moves time forward."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualUtcClock:
    """Aware UTC datetimes for the analytics store."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now += timedelta(**delta)


@pytest.fixture
def dataset():
    return load_dataset()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def utc_clock():
    return ManualUtcClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def analytics(utc_clock):
    return AnalyticsStore(clock=utc_clock)
