"""Williams %R"""

from collections.abc import Sequence

from ..config.defaults import WilliamsRParams
from ..data.models import PricePoint
from ..models.indicators import WilliamsRResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .series import is_negligible, require_length, require_period


def calculate_williams_r(prices: Sequence[PricePoint], period: int = 14) -> float:
    """
    Calculate Williams %R at the last bar

    %R = -100 * (highest high - close) / (highest high - lowest low), in
    [-100, 0]. A window with no high/low range returns the midpoint -50.
    """
    require_period(period)
    require_length(prices, period, f"Williams %R({period})")

    window = prices[-period:]
    highest = max(p.high for p in window)
    lowest = min(p.low for p in window)
    price_range = highest - lowest
    if is_negligible(price_range, highest):
        return -50.0
    return -100.0 * (highest - window[-1].close) / price_range


def required_length(params: WilliamsRParams) -> int:
    return params.period


def analyze_williams_r(prices: Sequence[PricePoint], params: WilliamsRParams) -> WilliamsRResult:
    """Calculate the Williams %R record for the last price point."""
    value = calculate_williams_r(prices, params.period)
    return WilliamsRResult(
        value=value,
        overbought=value > params.overbought,
        oversold=value < params.oversold,
    )


def williams_r_signal(result: WilliamsRResult, params: WilliamsRParams) -> SignalReading:
    """%R > overbought (-20) => sell, %R < oversold (-80) => buy."""
    value = result.value

    if result.overbought:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(value - params.overbought, -params.overbought),
            value=value,
            description=f"Williams %R overbought at {value:.2f}",
        )

    if result.oversold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(params.oversold - value, 100.0 + params.oversold),
            value=value,
            description=f"Williams %R oversold at {value:.2f}",
        )

    distance = min(params.overbought - value, value - params.oversold)
    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(distance, (params.overbought - params.oversold) / 2.0),
        value=value,
        description=f"Williams %R neutral at {value:.2f}",
    )
