"""Pytest configuration and shared fixtures."""

import random
from datetime import datetime, timedelta, timezone
from typing import Sequence, Union

import pytest

from stock_analytics.data.models import PricePoint

BASE_DATE = datetime(2024, 1, 2, tzinfo=timezone.utc)


def build_prices(
    closes: Sequence[float],
    volume: Union[float, Sequence[float]] = 1_000_000.0,
    spread: float = 0.01,
    start: datetime = BASE_DATE,
) -> list[PricePoint]:
    """
    Daily bars from closing prices.

    Each bar opens at the previous close; high/low extend ``spread`` beyond
    the open/close range.
    """
    points = []
    previous = None
    for i, close in enumerate(closes):
        open_price = close if previous is None else previous
        bar_volume = volume[i] if isinstance(volume, (list, tuple)) else volume
        points.append(PricePoint(
            date=start + timedelta(days=i),
            open=open_price,
            high=max(open_price, close) * (1 + spread),
            low=min(open_price, close) * (1 - spread),
            close=close,
            volume=bar_volume,
        ))
        previous = close
    return points


def random_walk(count: int, seed: int = 7, start: float = 100.0, step: float = 0.03) -> list[float]:
    """Deterministic multiplicative random walk of closing prices."""
    rng = random.Random(seed)
    closes = [start]
    for _ in range(count - 1):
        closes.append(closes[-1] * (1 + rng.uniform(-step, step)))
    return closes


@pytest.fixture
def make_prices():
    """Builder for price series from closing prices."""
    return build_prices


@pytest.fixture
def flat_prices() -> list[PricePoint]:
    """60 identical closes at 100."""
    return build_prices([100.0] * 60)


@pytest.fixture
def rising_prices() -> list[PricePoint]:
    """60 closes rising by 1 per day from 100."""
    return build_prices([100.0 + i for i in range(60)])


@pytest.fixture
def falling_prices() -> list[PricePoint]:
    """60 closes falling by 1 per day from 160."""
    return build_prices([160.0 - i for i in range(60)])


@pytest.fixture
def random_walk_prices() -> list[PricePoint]:
    """120 bars of a seeded random walk with varying volume."""
    rng = random.Random(11)
    closes = random_walk(120)
    volumes = [rng.uniform(500_000, 1_500_000) for _ in closes]
    return build_prices(closes, volume=volumes)


@pytest.fixture
def make_walk():
    """Builder for seeded random-walk closes."""
    return random_walk
