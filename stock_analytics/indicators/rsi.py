"""RSI (Relative Strength Index) with Wilder smoothing"""

import math
from collections.abc import Sequence

from ..config.defaults import RSIParams
from ..data.models import PricePoint
from ..models.indicators import RSIResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .divergence import apply_divergence, detect_divergence
from .series import price_changes, require_length, require_period


def rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """
    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    No losses gives 100; no movement at all gives the midpoint 50.
    """
    if avg_loss == 0:
        return 100.0 if avg_gain > 0 else 50.0
    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def calculate_rsi_series(closes: Sequence[float], period: int = 14) -> list[float]:
    """
    Calculate RSI for every close from the end of the seed window on, using Wilder smoothing

    The first average is the mean of the first ``period`` gains/losses; each
    later change is folded in as ``(prev * (period - 1) + x) / period``. When
    fewer than ``period`` changes exist, the seed averages the available ones.

    Args:
        closes: Closing prices in chronological order
        period: RSI period (default 14)

    Returns:
        RSI values in [0, 100]; the last one belongs to the last close
    """
    require_period(period)
    require_length(closes, max(period, 2), f"RSI({period})")

    changes = price_changes(closes)
    gains = [max(change, 0.0) for change in changes]
    losses = [max(-change, 0.0) for change in changes]

    seed = min(period, len(changes))
    avg_gain = math.fsum(gains[:seed]) / seed
    avg_loss = math.fsum(losses[:seed]) / seed

    series = [rsi_from_averages(avg_gain, avg_loss)]
    for gain, loss in zip(gains[seed:], losses[seed:]):
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        series.append(rsi_from_averages(avg_gain, avg_loss))

    return series


def calculate_rsi(closes: Sequence[float], period: int = 14) -> float:
    """RSI at the last close."""
    return calculate_rsi_series(closes, period)[-1]


def required_length(params: RSIParams) -> int:
    """Points needed for a full Wilder seed window."""
    return params.period + 1


def analyze_rsi(prices: Sequence[PricePoint], params: RSIParams) -> RSIResult:
    """Calculate the RSI record for the last price point."""
    closes = [p.close for p in prices]
    series = calculate_rsi_series(closes, params.period)
    value = series[-1]
    return RSIResult(
        value=value,
        period=params.period,
        overbought=value > params.overbought,
        oversold=value < params.oversold,
        divergence=detect_divergence(closes, series, params.divergence_lookback, midpoint=50.0, value_scale=100.0),
    )


def rsi_signal(result: RSIResult, params: RSIParams) -> SignalReading:
    """RSI > overbought => sell, RSI < oversold => buy, else hold; a divergence overrides."""
    return apply_divergence(_level_reading(result, params), result.divergence, "RSI")


def _level_reading(result: RSIResult, params: RSIParams) -> SignalReading:
    value = result.value

    if result.overbought:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(value - params.overbought, 100.0 - params.overbought),
            value=value,
            description=f"RSI overbought at {value:.2f} - potential selling opportunity",
        )

    if result.oversold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(params.oversold - value, params.oversold),
            value=value,
            description=f"RSI oversold at {value:.2f} - potential buying opportunity",
        )

    distance = min(params.overbought - value, value - params.oversold)
    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(distance, (params.overbought - params.oversold) / 2.0),
        value=value,
        description=f"RSI neutral at {value:.2f}",
    )
