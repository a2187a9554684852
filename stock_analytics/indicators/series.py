"""
Moving window primitives shared by the indicator calculators.

All sums go through ``math.fsum`` so results do not depend on summation order
and flat series stay exactly flat.
"""

import math
from collections.abc import Sequence

from ..errors import DataInsufficientError, InvalidInputError


def require_period(period: int, name: str = "period") -> None:
    """Reject non-positive lookback periods."""
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise InvalidInputError(f"Invalid {name}: {period}", field=name, value=period)


def require_length(values: Sequence, required: int, what: str) -> None:
    """Raise DataInsufficientError if ``values`` is shorter than ``required``."""
    if len(values) < required:
        raise DataInsufficientError(
            f"Insufficient data for {what}: {required} points required, {len(values)} available",
            required_count=required,
            available_count=len(values)
        )


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return math.fsum(values) / len(values)


def population_std(values: Sequence[float], center: float = None) -> float:
    """Population standard deviation (divides by n)."""
    if center is None:
        center = mean(values)
    return math.sqrt(math.fsum((v - center) ** 2 for v in values) / len(values))


def sma_series(values: Sequence[float], period: int) -> list[float]:
    """
    Simple moving average series.

    Element ``i`` of the result covers ``values[i:i + period]``.
    """
    require_period(period)
    require_length(values, period, f"SMA({period})")
    return [mean(values[i:i + period]) for i in range(len(values) - period + 1)]


def ema_series(values: Sequence[float], period: int) -> list[float]:
    """
    Exponential moving average series seeded with the SMA of the first window.

    Element ``i`` of the result corresponds to ``values[i + period - 1]``.
    """
    require_period(period)
    require_length(values, period, f"EMA({period})")

    multiplier = 2.0 / (period + 1)
    result = [mean(values[:period])]
    for value in values[period:]:
        result.append(value * multiplier + result[-1] * (1.0 - multiplier))
    return result


def price_changes(values: Sequence[float]) -> list[float]:
    """First differences of a series."""
    return [values[i] - values[i - 1] for i in range(1, len(values))]


def is_negligible(value: float, scale: float, tolerance: float = 1e-12) -> bool:
    """True if ``value`` is float noise relative to ``scale``."""
    return abs(value) <= abs(scale) * tolerance
