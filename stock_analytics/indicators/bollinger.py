"""Bollinger Bands"""

from collections.abc import Sequence

from ..config.defaults import BollingerParams
from ..data.models import PricePoint
from ..models.indicators import BandWalk, BollingerBandsResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .series import is_negligible, mean, population_std, require_length, require_period


def _bands(window: Sequence[float], std_multiplier: float) -> tuple[float, float, float]:
    middle = mean(window)
    deviation = population_std(window, middle) * std_multiplier
    return middle + deviation, middle, middle - deviation


def detect_band_walk(
    closes: Sequence[float],
    period: int = 20,
    std_multiplier: float = 2.0,
    walk_periods: int = 3,
    tolerance: float = 0.02,
) -> BandWalk:
    """
    Detect closes riding a band over the last ``walk_periods`` bars

    Every close within ``tolerance`` (a fraction of the band) of the upper band
    is an upper walk, of the lower band a lower walk. Collapsed bands and
    series too short for ``walk_periods`` band values never walk.
    """
    if walk_periods <= 0 or len(closes) < period + walk_periods - 1:
        return BandWalk.NONE

    upper_walk = lower_walk = True
    for offset in range(walk_periods):
        end = len(closes) - offset
        upper, middle, lower = _bands(closes[end - period:end], std_multiplier)
        if is_negligible(upper - lower, middle):
            return BandWalk.NONE
        close = closes[end - 1]
        if close < upper * (1.0 - tolerance):
            upper_walk = False
        if close > lower * (1.0 + tolerance):
            lower_walk = False

    if upper_walk:
        return BandWalk.UPPER
    if lower_walk:
        return BandWalk.LOWER
    return BandWalk.NONE


def calculate_bollinger_bands(
    closes: Sequence[float],
    period: int = 20,
    std_multiplier: float = 2.0,
    squeeze_bandwidth: float = 0.1,
    walk_periods: int = 3,
    walk_tolerance: float = 0.02,
) -> BollingerBandsResult:
    """
    Calculate Bollinger Bands at the last close

    Middle = SMA(period), upper/lower = middle +/- multiplier * population
    stddev(period). Zero variance collapses all three bands onto the SMA and
    puts %B at 0.5.

    Args:
        closes: Closing prices in chronological order
        period: SMA window (default 20)
        std_multiplier: Standard deviation multiplier (default 2)
        squeeze_bandwidth: Bandwidth below which the bands count as a squeeze
        walk_periods: Consecutive closes on a band that count as walking it
        walk_tolerance: Fraction of the band price still counted as on the band

    Returns:
        BollingerBandsResult for the last close
    """
    require_period(period)
    require_length(closes, period, f"Bollinger Bands({period})")

    upper, middle, lower = _bands(closes[-period:], std_multiplier)

    close = closes[-1]
    width = upper - lower
    if is_negligible(width, middle):
        percent_b = 0.5
    else:
        percent_b = (close - lower) / width

    # middle > 0 for validated prices
    bandwidth = width / middle

    return BollingerBandsResult(
        upper=upper,
        middle=middle,
        lower=lower,
        bandwidth=bandwidth,
        percent_b=percent_b,
        squeeze=bandwidth < squeeze_bandwidth,
        close=close,
        walking=detect_band_walk(closes, period, std_multiplier, walk_periods, walk_tolerance),
    )


def required_length(params: BollingerParams) -> int:
    return params.period


def analyze_bollinger_bands(prices: Sequence[PricePoint], params: BollingerParams) -> BollingerBandsResult:
    """Calculate the Bollinger Bands record for the last price point."""
    return calculate_bollinger_bands(
        [p.close for p in prices],
        params.period,
        params.std_multiplier,
        params.squeeze_bandwidth,
        params.walk_periods,
        params.walk_tolerance,
    )


def bollinger_signal(result: BollingerBandsResult, params: BollingerParams) -> SignalReading:
    """%B above the overbought level => sell, below the oversold level => buy."""
    percent_b = result.percent_b
    note = " during a squeeze" if result.squeeze else ""
    if result.walking is not BandWalk.NONE:
        note += f", walking the {result.walking.value} band"

    if percent_b > params.overbought_percent_b:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(percent_b - params.overbought_percent_b, params.saturation),
            value=percent_b,
            description=f"%B at {percent_b * 100:.1f}% - price pressing the upper band{note}",
        )

    if percent_b < params.oversold_percent_b:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(params.oversold_percent_b - percent_b, params.saturation),
            value=percent_b,
            description=f"%B at {percent_b * 100:.1f}% - price pressing the lower band{note}",
        )

    distance = min(params.overbought_percent_b - percent_b, percent_b - params.oversold_percent_b)
    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(distance, (params.overbought_percent_b - params.oversold_percent_b) / 2.0),
        value=percent_b,
        description=f"%B at {percent_b * 100:.1f}% - price inside the bands{note}",
    )
