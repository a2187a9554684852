"""Signal generation: one rule per IndicatorKind"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable

from ..config.defaults import AnalyticsConfig
from ..errors import IndicatorCalculationError
from ..indicators import adx, bollinger, macd, momentum, moving_averages, rsi, stochastic, volume, williams_r
from ..indicators.calculator import INDICATORS
from ..models.indicators import IndicatorKind, IndicatorResult
from ..models.signals import TechnicalSignal
from .strength import SignalReading, clip_unit

SignalRule = Callable[[Any, Any], SignalReading]

SIGNAL_RULES: dict[IndicatorKind, SignalRule] = {
    IndicatorKind.RSI: rsi.rsi_signal,
    IndicatorKind.MACD: macd.macd_signal,
    IndicatorKind.BOLLINGER_BANDS: bollinger.bollinger_signal,
    IndicatorKind.MOVING_AVERAGES: moving_averages.moving_average_signal,
    IndicatorKind.STOCHASTIC: stochastic.stochastic_signal,
    IndicatorKind.WILLIAMS_R: williams_r.williams_r_signal,
    IndicatorKind.MOMENTUM: momentum.momentum_signal,
    IndicatorKind.ADX: adx.adx_signal,
    IndicatorKind.OBV: volume.obv_signal,
    IndicatorKind.VOLUME_PRICE_TREND: volume.volume_price_trend_signal,
    IndicatorKind.ACCUMULATION_DISTRIBUTION: volume.accumulation_distribution_signal,
}


def generate_signal(result: IndicatorResult, config: AnalyticsConfig, timestamp: datetime) -> TechnicalSignal:
    """
    Convert one indicator record into a TechnicalSignal

    Args:
        result: Typed indicator record
        config: Configuration holding the record's thresholds
        timestamp: Date of the evaluated price point

    Returns:
        TechnicalSignal named after the record's kind
    """
    kind = result.kind
    rule = SIGNAL_RULES.get(kind)
    if rule is None:
        raise IndicatorCalculationError(
            f"No signal rule registered for {kind.value}",
            indicator=kind.value
        )

    reading = rule(result, getattr(config, INDICATORS[kind].section))
    return TechnicalSignal(
        indicator=kind.value,
        signal=reading.direction,
        strength=clip_unit(reading.strength),
        value=reading.value,
        timestamp=timestamp,
        description=reading.description,
    )


def generate_signals(
    indicators: Mapping[IndicatorKind, IndicatorResult],
    config: AnalyticsConfig,
    timestamp: datetime,
) -> tuple[TechnicalSignal, ...]:
    """One signal per indicator, in the mapping's order."""
    return tuple(generate_signal(result, config, timestamp) for result in indicators.values())
