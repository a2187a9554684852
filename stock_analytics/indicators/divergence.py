"""
Price/indicator divergence

The last point is compared against each of the preceding ``lookback`` points.
A lower close with a higher indicator reading is a bullish divergence; a
higher close with a lower reading is a bearish one. Bullish takes precedence
when both are present in the window.
"""

from collections.abc import Sequence
from typing import Optional

from ..models.indicators import Divergence
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, clip_unit
from .series import is_negligible

DIVERGENCE_BONUS = 0.2


def _below(value: float, other: float, scale: float) -> bool:
    return value < other and not is_negligible(value - other, scale)


def detect_divergence(
    closes: Sequence[float],
    values: Sequence[float],
    lookback: int = 20,
    midpoint: Optional[float] = None,
    value_scale: Optional[float] = None,
) -> Divergence:
    """
    Classify divergence between closes and an indicator series at the last point

    Args:
        closes: Closing prices; ``closes[-1]`` lines up with ``values[-1]``
        values: Indicator readings, possibly shorter than ``closes``
        lookback: Number of preceding points compared
        midpoint: If given, a bullish divergence needs both readings below it
            and a bearish one both readings above it (RSI 50, MACD 0)
        value_scale: Magnitude below which indicator differences are float noise;
            defaults to the largest absolute reading in the window

    Returns:
        Divergence.NONE when there are fewer than ``lookback + 1`` readings
    """
    if lookback <= 0 or len(values) < lookback + 1 or len(closes) < len(values):
        return Divergence.NONE

    close = closes[-1]
    value = values[-1]
    window = range(2, lookback + 2)
    if value_scale is None:
        value_scale = max(abs(values[-k]) for k in range(1, lookback + 2))

    def in_zone(reading: float, bullish: bool) -> bool:
        if midpoint is None:
            return True
        return reading < midpoint if bullish else reading > midpoint

    for k in window:
        past_close, past_value = closes[-k], values[-k]
        if (_below(close, past_close, close) and _below(past_value, value, value_scale)
                and in_zone(value, True) and in_zone(past_value, True)):
            return Divergence.BULLISH

    for k in window:
        past_close, past_value = closes[-k], values[-k]
        if (_below(past_close, close, close) and _below(value, past_value, value_scale)
                and in_zone(value, False) and in_zone(past_value, False)):
            return Divergence.BEARISH

    return Divergence.NONE


def apply_divergence(reading: SignalReading, divergence: Divergence, label: str) -> SignalReading:
    """
    Turn a reading into the divergence's direction with extra strength

    A reading already pointing that way gains DIVERGENCE_BONUS; a hold or an
    opposite reading is replaced by a threshold-strength signal plus the bonus.
    """
    if divergence is Divergence.NONE:
        return reading

    if divergence is Divergence.BULLISH:
        direction = SignalDirection.BUY
        description = f"Bullish {label} divergence detected - price momentum may reverse upward"
    else:
        direction = SignalDirection.SELL
        description = f"Bearish {label} divergence detected - price momentum may reverse downward"

    base = reading.strength if reading.direction is direction else 0.5
    return SignalReading(
        direction=direction,
        strength=clip_unit(base + DIVERGENCE_BONUS),
        value=reading.value,
        description=description,
    )
