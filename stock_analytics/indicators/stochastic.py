"""Stochastic oscillator (%K / %D)"""

from collections.abc import Sequence

from ..config.defaults import StochasticParams
from ..data.models import PricePoint
from ..models.indicators import StochasticResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .series import is_negligible, mean, require_length, require_period


def percent_k(window: Sequence[PricePoint]) -> float:
    """
    %K = 100 * (close - lowest low) / (highest high - lowest low)

    A window with no high/low range sits at the midpoint 50.
    """
    highest = max(p.high for p in window)
    lowest = min(p.low for p in window)
    price_range = highest - lowest
    if is_negligible(price_range, highest):
        return 50.0
    return 100.0 * (window[-1].close - lowest) / price_range


def calculate_stochastic(
    prices: Sequence[PricePoint],
    k_period: int = 14,
    d_period: int = 3,
    overbought: float = 80.0,
    oversold: float = 20.0,
) -> StochasticResult:
    """
    Calculate the stochastic oscillator at the last bar

    %D is the SMA of the last ``d_period`` %K values, so the series must
    hold ``k_period + d_period - 1`` bars.
    """
    require_period(k_period, "k_period")
    require_period(d_period, "d_period")
    require_length(prices, k_period + d_period - 1, "Stochastic")

    n = len(prices)
    k_values = [
        percent_k(prices[end - k_period:end])
        for end in range(n - d_period + 1, n + 1)
    ]
    k = k_values[-1]

    return StochasticResult(
        k=k,
        d=mean(k_values),
        overbought=k > overbought,
        oversold=k < oversold,
    )


def required_length(params: StochasticParams) -> int:
    return params.k_period + params.d_period - 1


def analyze_stochastic(prices: Sequence[PricePoint], params: StochasticParams) -> StochasticResult:
    """Calculate the stochastic record for the last price point."""
    return calculate_stochastic(
        prices,
        params.k_period,
        params.d_period,
        params.overbought,
        params.oversold,
    )


def stochastic_signal(result: StochasticResult, params: StochasticParams) -> SignalReading:
    """%K > overbought => sell, %K < oversold => buy."""
    k = result.k

    if result.overbought:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(k - params.overbought, 100.0 - params.overbought),
            value=k,
            description=f"Stochastic overbought - %K {k:.2f}, %D {result.d:.2f}",
        )

    if result.oversold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(params.oversold - k, params.oversold),
            value=k,
            description=f"Stochastic oversold - %K {k:.2f}, %D {result.d:.2f}",
        )

    distance = min(params.overbought - k, k - params.oversold)
    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(distance, (params.overbought - params.oversold) / 2.0),
        value=k,
        description=f"Stochastic neutral - %K {k:.2f}, %D {result.d:.2f}",
    )
