"""
Volume-based indicators

OBV, Volume-Price Trend and the Accumulation/Distribution line are cumulative
over the whole series; their signals come from the change over the last
``lookback`` bars, normalized by the volume traded in that window.
"""

import math
from collections.abc import Sequence

from ..config.defaults import VolumeParams
from ..data.models import PricePoint
from ..data.validators import closes
from ..models.indicators import AccumulationDistributionResult, OBVResult, VolumePriceTrendResult
from ..models.signals import SignalDirection
from ..signals.strength import SignalReading, hold_strength, threshold_strength
from .divergence import apply_divergence, detect_divergence
from .series import require_length, require_period


def calculate_obv_series(prices: Sequence[PricePoint]) -> list[float]:
    """
    On-Balance Volume, starting at 0

    Volume is added on an up close, subtracted on a down close, ignored on
    an unchanged close.
    """
    obv = [0.0]
    for previous, current in zip(prices, prices[1:]):
        if current.close > previous.close:
            obv.append(obv[-1] + current.volume)
        elif current.close < previous.close:
            obv.append(obv[-1] - current.volume)
        else:
            obv.append(obv[-1])
    return obv


def calculate_vpt_series(prices: Sequence[PricePoint]) -> list[float]:
    """Volume-Price Trend: cumulative volume * fractional close change, starting at 0."""
    vpt = [0.0]
    for previous, current in zip(prices, prices[1:]):
        vpt.append(vpt[-1] + current.volume * (current.close - previous.close) / previous.close)
    return vpt


def money_flow_multiplier(point: PricePoint) -> float:
    """
    MFM = ((close - low) - (high - close)) / (high - low), in [-1, 1]

    Zero for a bar with no range.
    """
    price_range = point.range
    if price_range <= 0:
        return 0.0
    return ((point.close - point.low) - (point.high - point.close)) / price_range


def calculate_ad_series(prices: Sequence[PricePoint]) -> list[float]:
    """Accumulation/Distribution line: cumulative MFM * volume."""
    ad = []
    total = 0.0
    for point in prices:
        total += money_flow_multiplier(point) * point.volume
        ad.append(total)
    return ad


def _window_volume(prices: Sequence[PricePoint], lookback: int) -> float:
    return math.fsum(p.volume for p in prices[-lookback:])


def _flow(series: Sequence[float], prices: Sequence[PricePoint], lookback: int) -> float:
    """Change over the lookback divided by the volume traded in it; 0 without volume."""
    volume = _window_volume(prices, lookback)
    if volume <= 0:
        return 0.0
    return (series[-1] - series[-1 - lookback]) / volume


def required_length(params: VolumeParams) -> int:
    return params.lookback + 1


def _require_window(prices: Sequence[PricePoint], lookback: int, what: str) -> None:
    require_period(lookback, "lookback")
    require_length(prices, lookback + 1, what)


def analyze_obv(prices: Sequence[PricePoint], params: VolumeParams) -> OBVResult:
    """Calculate the OBV record for the last price point."""
    _require_window(prices, params.lookback, "OBV")
    obv = calculate_obv_series(prices)
    return OBVResult(
        value=obv[-1],
        flow=_flow(obv, prices, params.lookback),
        divergence=detect_divergence(closes(prices), obv, params.divergence_lookback),
    )


def analyze_volume_price_trend(prices: Sequence[PricePoint], params: VolumeParams) -> VolumePriceTrendResult:
    """Calculate the VPT record for the last price point."""
    _require_window(prices, params.lookback, "Volume Price Trend")
    vpt = calculate_vpt_series(prices)

    average_volume = _window_volume(prices, params.lookback) / params.lookback
    if average_volume > 0:
        change_pct = (vpt[-1] - vpt[-1 - params.lookback]) / average_volume * 100.0
    else:
        change_pct = 0.0

    return VolumePriceTrendResult(value=vpt[-1], change_pct=change_pct)


def analyze_accumulation_distribution(
    prices: Sequence[PricePoint], params: VolumeParams
) -> AccumulationDistributionResult:
    """Calculate the A/D record for the last price point."""
    _require_window(prices, params.lookback, "Accumulation/Distribution")
    ad = calculate_ad_series(prices)
    return AccumulationDistributionResult(
        value=ad[-1],
        flow=_flow(ad, prices, params.lookback),
        money_flow_multiplier=money_flow_multiplier(prices[-1]),
        divergence=detect_divergence(closes(prices), ad, params.divergence_lookback),
    )


def _flow_signal(flow: float, threshold: float, label: str, value: float) -> SignalReading:
    saturation = 1.0 - threshold

    if flow > threshold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(flow - threshold, saturation),
            value=value,
            description=f"{label} rising - {flow * 100:.1f}% net buying volume",
        )

    if flow < -threshold:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(-threshold - flow, saturation),
            value=value,
            description=f"{label} falling - {-flow * 100:.1f}% net selling volume",
        )

    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(threshold - abs(flow), threshold),
        value=value,
        description=f"{label} flat - no volume confirmation",
    )


def obv_signal(result: OBVResult, params: VolumeParams) -> SignalReading:
    """OBV flow above +threshold => buy, below -threshold => sell; a divergence overrides."""
    reading = _flow_signal(result.flow, params.flow_threshold, "OBV", result.value)
    return apply_divergence(reading, result.divergence, "OBV")


def accumulation_distribution_signal(
    result: AccumulationDistributionResult, params: VolumeParams
) -> SignalReading:
    """A/D flow above +threshold => accumulation (buy), below -threshold => distribution (sell); a divergence overrides."""
    reading = _flow_signal(result.flow, params.flow_threshold, "Accumulation/Distribution", result.value)
    return apply_divergence(reading, result.divergence, "Accumulation/Distribution")


def volume_price_trend_signal(result: VolumePriceTrendResult, params: VolumeParams) -> SignalReading:
    """VPT change above +threshold% => buy, below -threshold% => sell."""
    change = result.change_pct
    threshold = params.vpt_threshold_pct
    saturation = params.vpt_saturation_pct - threshold

    if change > threshold:
        return SignalReading(
            direction=SignalDirection.BUY,
            strength=threshold_strength(change - threshold, saturation),
            value=result.value,
            description=f"Volume Price Trend rising - {change:.2f}% of average volume",
        )

    if change < -threshold:
        return SignalReading(
            direction=SignalDirection.SELL,
            strength=threshold_strength(-threshold - change, saturation),
            value=result.value,
            description=f"Volume Price Trend falling - {change:.2f}% of average volume",
        )

    return SignalReading(
        direction=SignalDirection.HOLD,
        strength=hold_strength(threshold - abs(change), threshold),
        value=result.value,
        description=f"Volume Price Trend flat - {change:.2f}% of average volume",
    )
