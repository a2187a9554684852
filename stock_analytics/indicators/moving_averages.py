"""Simple and exponential moving averages with golden/death cross detection"""

from collections.abc import Sequence

from ..config.defaults import MovingAverageParams
from ..data.models import PricePoint
from ..errors import InvalidInputError
from ..models.indicators import Crossover, MovingAverageResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, clip_unit, threshold_strength
from .macd import CROSSOVER_BONUS, detect_crossover
from .series import ema_series, require_length, sma_series


def calculate_moving_averages(
    closes: Sequence[float],
    short_window: int = 20,
    long_window: int = 50,
) -> MovingAverageResult:
    """
    Calculate short and long SMA/EMA at the last close

    The crossover compares the short-minus-long SMA spread at the previous
    and the last close; it is NONE when only ``long_window`` closes exist.

    Args:
        closes: Closing prices in chronological order
        short_window: Short window (default 20)
        long_window: Long window (default 50)

    Returns:
        MovingAverageResult for the last close
    """
    if short_window >= long_window:
        raise InvalidInputError(
            "Short window must be less than long window",
            field="short_window", value=short_window
        )
    require_length(closes, long_window, f"Moving Averages({short_window}/{long_window})")

    short_sma = sma_series(closes, short_window)
    long_sma = sma_series(closes, long_window)

    spread = short_sma[-1] - long_sma[-1]
    previous_spread = short_sma[-2] - long_sma[-2] if len(long_sma) > 1 else None

    return MovingAverageResult(
        short_window=short_window,
        long_window=long_window,
        short_sma=short_sma[-1],
        long_sma=long_sma[-1],
        short_ema=ema_series(closes, short_window)[-1],
        long_ema=ema_series(closes, long_window)[-1],
        close=closes[-1],
        crossover=detect_crossover(previous_spread, spread),
    )


def required_length(params: MovingAverageParams) -> int:
    return params.long_window


def analyze_moving_averages(prices: Sequence[PricePoint], params: MovingAverageParams) -> MovingAverageResult:
    """Calculate the moving average record for the last price point."""
    return calculate_moving_averages(
        [p.close for p in prices],
        params.short_window,
        params.long_window,
    )


def moving_average_signal(result: MovingAverageResult, params: MovingAverageParams) -> SignalReading:
    """
    Short SMA above long SMA with the close above the short SMA => buy,
    the mirror arrangement => sell, anything mixed => hold.
    """
    short_sma = result.short_sma
    long_sma = result.long_sma
    close = result.close
    spread_pct = (short_sma - long_sma) / long_sma * 100.0

    if short_sma > long_sma and close > short_sma:
        strength = threshold_strength(spread_pct, params.saturation_pct)
        if result.crossover is Crossover.BULLISH:
            strength = clip_unit(strength + CROSSOVER_BONUS)
            description = f"Golden cross - SMA{result.short_window} crossed above SMA{result.long_window}"
        else:
            description = (f"Price above SMA{result.short_window} ({short_sma:.2f}) "
                           f"above SMA{result.long_window} ({long_sma:.2f}) - uptrend")
        return SignalReading(SignalDirection.BUY, strength, spread_pct, description)

    if short_sma < long_sma and close < short_sma:
        strength = threshold_strength(-spread_pct, params.saturation_pct)
        if result.crossover is Crossover.BEARISH:
            strength = clip_unit(strength + CROSSOVER_BONUS)
            description = f"Death cross - SMA{result.short_window} crossed below SMA{result.long_window}"
        else:
            description = (f"Price below SMA{result.short_window} ({short_sma:.2f}) "
                           f"below SMA{result.long_window} ({long_sma:.2f}) - downtrend")
        return SignalReading(SignalDirection.SELL, strength, spread_pct, description)

    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=0.0,
        value=spread_pct,
        description="Moving averages mixed - no clear trend",
    )
