"""Rate-of-change momentum"""

from collections.abc import Sequence

from ..config.defaults import MomentumParams
from ..data.models import PricePoint
from ..models.indicators import MomentumResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .series import require_length, require_period


def calculate_rate_of_change(closes: Sequence[float], period: int = 10) -> float:
    """
    ROC = (close - close[period bars ago]) / close[period bars ago] * 100

    Args:
        closes: Closing prices in chronological order
        period: Lookback in bars (default 10)

    Returns:
        Rate of change in percent
    """
    require_period(period)
    require_length(closes, period + 1, f"Momentum({period})")

    reference = closes[-period - 1]
    return (closes[-1] - reference) / reference * 100.0


def required_length(params: MomentumParams) -> int:
    return params.period + 1


def analyze_momentum(prices: Sequence[PricePoint], params: MomentumParams) -> MomentumResult:
    """Calculate the momentum record for the last price point."""
    return MomentumResult(
        rate_of_change=calculate_rate_of_change([p.close for p in prices], params.period),
        period=params.period,
    )


def momentum_signal(result: MomentumResult, params: MomentumParams) -> SignalReading:
    """ROC above +threshold => buy, below -threshold => sell."""
    roc = result.rate_of_change
    threshold = params.threshold_pct
    saturation = params.saturation_pct - threshold

    if roc > threshold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(roc - threshold, saturation),
            value=roc,
            description=f"Positive momentum - {roc:.2f}% over {result.period} periods",
        )

    if roc < -threshold:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(-threshold - roc, saturation),
            value=roc,
            description=f"Negative momentum - {roc:.2f}% over {result.period} periods",
        )

    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(threshold - abs(roc), threshold),
        value=roc,
        description=f"Flat momentum - {roc:.2f}% over {result.period} periods",
    )
