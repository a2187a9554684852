"""MACD (Moving Average Convergence Divergence)"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import MACDParams
from ..data.models import PricePoint
from ..errors import InvalidInputError
from ..models.indicators import Crossover, MACDResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, clip_unit, threshold_strength
from .divergence import apply_divergence, detect_divergence
from .series import ema_series, is_negligible, require_length, require_period

CROSSOVER_BONUS = 0.1


def detect_crossover(previous_diff: Optional[float], current_diff: float) -> Crossover:
    """Classify the sign change of a line difference between two points."""
    if previous_diff is None:
        return Crossover.NONE
    if previous_diff <= 0 < current_diff:
        return Crossover.BULLISH
    if previous_diff >= 0 > current_diff:
        return Crossover.BEARISH
    return Crossover.NONE


def calculate_macd(
    closes: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    divergence_lookback: int = 20,
) -> MACDResult:
    """
    Calculate MACD at the last close

    MACD line = EMA(fast) - EMA(slow), signal line = EMA(signal) of the MACD
    line, histogram = MACD - signal.

    Args:
        closes: Closing prices in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal EMA period (default 9)
        divergence_lookback: Bars compared for price/MACD-line divergence

    Returns:
        MACDResult for the last close
    """
    for name, period in (("fast_period", fast_period), ("slow_period", slow_period),
                         ("signal_period", signal_period)):
        require_period(period, name)
    if fast_period >= slow_period:
        raise InvalidInputError(
            "Fast period must be less than slow period",
            field="fast_period", value=fast_period
        )
    require_length(closes, slow_period + signal_period - 1, "MACD")

    fast_ema = ema_series(closes, fast_period)
    slow_ema = ema_series(closes, slow_period)

    # Align: slow_ema[i] and fast_ema[i + offset] both end at close index i + slow - 1
    offset = slow_period - fast_period
    macd_line = [fast_ema[i + offset] - slow_ema[i] for i in range(len(slow_ema))]
    signal_line = ema_series(macd_line, signal_period)

    histogram = macd_line[-1] - signal_line[-1]
    previous_histogram = macd_line[-2] - signal_line[-2] if len(signal_line) > 1 else None

    return MACDResult(
        macd=macd_line[-1],
        signal=signal_line[-1],
        histogram=histogram,
        crossover=detect_crossover(previous_histogram, histogram),
        close=closes[-1],
        divergence=detect_divergence(closes, macd_line, divergence_lookback, midpoint=0.0, value_scale=closes[-1]),
    )


def required_length(params: MACDParams) -> int:
    """Points needed for the first signal-line value."""
    return params.slow_period + params.signal_period - 1


def analyze_macd(prices: Sequence[PricePoint], params: MACDParams) -> MACDResult:
    """Calculate the MACD record for the last price point."""
    return calculate_macd(
        [p.close for p in prices],
        params.fast_period,
        params.slow_period,
        params.signal_period,
        params.divergence_lookback,
    )


def macd_signal(result: MACDResult, params: MACDParams) -> SignalReading:
    """Histogram above zero => buy, below zero => sell; crossovers add strength, a divergence overrides."""
    return apply_divergence(_histogram_reading(result, params), result.divergence, "MACD")


def _histogram_reading(result: MACDResult, params: MACDParams) -> SignalReading:
    histogram = result.histogram
    close = result.close

    if is_negligible(histogram, close):
        return SignalReading(
            direction=SignalDirection.HOLD,
            strength=0.0,
            value=histogram,
            description="MACD flat - line and signal line coincide",
        )

    histogram_pct = abs(histogram) / close * 100.0
    strength = threshold_strength(histogram_pct, params.saturation_pct)

    if histogram > 0:
        direction = SignalDirection.BUY
        if result.crossover is Crossover.BULLISH:
            strength = clip_unit(strength + CROSSOVER_BONUS)
            description = (f"MACD bullish crossover - MACD line ({result.macd:.4f}) "
                           f"crossed above signal line ({result.signal:.4f})")
        else:
            description = f"MACD above signal line - histogram {histogram:.4f}"
    else:
        direction = SignalDirection.SELL
        if result.crossover is Crossover.BEARISH:
            strength = clip_unit(strength + CROSSOVER_BONUS)
            description = (f"MACD bearish crossover - MACD line ({result.macd:.4f}) "
                           f"crossed below signal line ({result.signal:.4f})")
        else:
            description = f"MACD below signal line - histogram {histogram:.4f}"

    return SignalReading(
        direction=direction,
        strength=strength,
        value=histogram,
        description=description,
    )
