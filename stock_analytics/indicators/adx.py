"""ADX (Average Directional Index) with +DI / -DI, Wilder smoothing"""

import math
from collections.abc import Sequence

from ..config.defaults import ADXParams
from ..data.models import PricePoint
from ..models.indicators import ADXResult, TrendStrength
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .series import mean, require_length, require_period


def true_range(current: PricePoint, previous: PricePoint) -> float:
    """
    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))
    """
    return max(
        current.range,
        abs(current.high - previous.close),
        abs(current.low - previous.close),
    )


def directional_movement(current: PricePoint, previous: PricePoint) -> tuple[float, float]:
    """(+DM, -DM) for one bar; only the larger upward or downward move counts."""
    up_move = current.high - previous.high
    down_move = previous.low - current.low
    plus_dm = up_move if up_move > down_move and up_move > 0 else 0.0
    minus_dm = down_move if down_move > up_move and down_move > 0 else 0.0
    return plus_dm, minus_dm


def _wilder_sums(values: Sequence[float], period: int) -> list[float]:
    """Running Wilder sum: seed = sum of first period, then prev - prev/period + x."""
    smoothed = [math.fsum(values[:period])]
    for value in values[period:]:
        smoothed.append(smoothed[-1] - smoothed[-1] / period + value)
    return smoothed


def classify_trend(adx: float, strong_trend: float = 25.0, weak_trend: float = 20.0) -> TrendStrength:
    if adx >= strong_trend:
        return TrendStrength.STRONG
    if adx >= weak_trend:
        return TrendStrength.WEAK
    return TrendStrength.NO_TREND


def calculate_adx(
    prices: Sequence[PricePoint],
    period: int = 14,
    strong_trend: float = 25.0,
    weak_trend: float = 20.0,
) -> ADXResult:
    """
    Calculate ADX, +DI and -DI at the last bar

    +DI/-DI = 100 * smoothed DM / smoothed TR; DX = 100 * |+DI - -DI| /
    (+DI + -DI); ADX is the Wilder average of DX seeded with the mean of the
    first ``period`` DX values. Bars with no true range give DI = DX = 0.

    Args:
        prices: OHLC bars in chronological order
        period: Smoothing period (default 14)
        strong_trend: ADX level for a strong trend
        weak_trend: ADX level for a weak trend

    Returns:
        ADXResult for the last bar
    """
    require_period(period)
    require_length(prices, 2 * period, f"ADX({period})")

    trs = []
    plus_dms = []
    minus_dms = []
    for previous, current in zip(prices, prices[1:]):
        trs.append(true_range(current, previous))
        plus_dm, minus_dm = directional_movement(current, previous)
        plus_dms.append(plus_dm)
        minus_dms.append(minus_dm)

    smoothed_tr = _wilder_sums(trs, period)
    smoothed_plus = _wilder_sums(plus_dms, period)
    smoothed_minus = _wilder_sums(minus_dms, period)

    plus_dis = []
    minus_dis = []
    dxs = []
    for tr, plus_dm, minus_dm in zip(smoothed_tr, smoothed_plus, smoothed_minus):
        plus_di = 100.0 * plus_dm / tr if tr > 0 else 0.0
        minus_di = 100.0 * minus_dm / tr if tr > 0 else 0.0
        di_sum = plus_di + minus_di
        plus_dis.append(plus_di)
        minus_dis.append(minus_di)
        dxs.append(100.0 * abs(plus_di - minus_di) / di_sum if di_sum > 0 else 0.0)

    adx = mean(dxs[:period])
    for dx in dxs[period:]:
        adx = (adx * (period - 1) + dx) / period

    return ADXResult(
        adx=adx,
        plus_di=plus_dis[-1],
        minus_di=minus_dis[-1],
        trend=classify_trend(adx, strong_trend, weak_trend),
    )


def required_length(params: ADXParams) -> int:
    """Bars needed for ``period`` DX values."""
    return 2 * params.period


def analyze_adx(prices: Sequence[PricePoint], params: ADXParams) -> ADXResult:
    """Calculate the ADX record for the last price point."""
    return calculate_adx(prices, params.period, params.strong_trend, params.weak_trend)


def adx_signal(result: ADXResult, params: ADXParams) -> SignalReading:
    """A strong trend (ADX >= strong_trend) follows the dominant directional indicator."""
    adx = result.adx

    if adx >= params.strong_trend and result.plus_di != result.minus_di:
        strength = threshold_strength(adx - params.strong_trend, params.strong_trend)
        if result.plus_di > result.minus_di:
            return SignalReading(
                direction=SignalDirection.BUY,
                strength=strength,
                value=adx,
                description=f"Strong uptrend - ADX {adx:.2f}, +DI {result.plus_di:.2f} > -DI {result.minus_di:.2f}",
            )
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=strength,
            value=adx,
            description=f"Strong downtrend - ADX {adx:.2f}, -DI {result.minus_di:.2f} > +DI {result.plus_di:.2f}",
        )

    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(params.strong_trend - adx, params.strong_trend),
        value=adx,
        description=f"No strong trend - ADX {adx:.2f} ({result.trend.value})",
    )
