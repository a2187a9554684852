"""
Aggregation of indicator signals into the market sentiment summary.

Overall bias, strength and confidence come from the signals; trend,
momentum and volatility classifications come from the recent closes.
"""

import math
from collections.abc import Sequence

from ..config.defaults import SummaryParams
from ..indicators.series import mean, population_std
from ..models.signals import (
    AnalysisSummary,
    MarketBias,
    MomentumState,
    SignalDirection,
    TechnicalSignal,
    TrendDirection,
    VolatilityLevel,
)

# Fewer closes than this leave the price-based classifications at their neutral value
MIN_CLASSIFICATION_POINTS = 10


def calculate_bias(
    signals: Sequence[TechnicalSignal],
    confidence_saturation: int = 5,
) -> tuple[MarketBias, float, float]:
    """
    Strength-weighted majority of the directional signals

    strength = |buy - sell| / (buy + sell) over summed strengths.
    confidence = agreement * coverage, where agreement is the share of
    directional signals on the winning side (0.5 on a tie) and coverage is
    min(1, directional count / confidence_saturation).

    Returns:
        (overall bias, strength, confidence); neutral with 0 strength and
        0 confidence when no signal is directional
    """
    directional = [s for s in signals if s.is_directional]
    buys = [s for s in directional if s.signal is SignalDirection.BUY]
    sells = [s for s in directional if s.signal is SignalDirection.SELL]
    directional_count = len(directional)
    if directional_count == 0:
        return MarketBias.NEUTRAL, 0.0, 0.0

    buy_strength = math.fsum(s.strength for s in buys)
    sell_strength = math.fsum(s.strength for s in sells)
    total = buy_strength + sell_strength

    if buy_strength > sell_strength:
        overall = MarketBias.BULLISH
        agreement = len(buys) / directional_count
    elif sell_strength > buy_strength:
        overall = MarketBias.BEARISH
        agreement = len(sells) / directional_count
    else:
        overall = MarketBias.NEUTRAL
        agreement = 0.5

    strength = abs(buy_strength - sell_strength) / total if total > 0 else 0.0
    coverage = min(1.0, directional_count / confidence_saturation)
    return overall, strength, agreement * coverage


def classify_trend(closes: Sequence[float], window: int = 20, threshold: float = 0.02) -> TrendDirection:
    """Second-half mean vs first-half mean of the last ``window`` closes."""
    recent = closes[-window:]
    if len(recent) < MIN_CLASSIFICATION_POINTS:
        return TrendDirection.SIDEWAYS

    half = len(recent) // 2
    first_avg = mean(recent[:half])
    second_avg = mean(recent[half:])
    change = (second_avg - first_avg) / first_avg

    if change > threshold:
        return TrendDirection.UP
    if change < -threshold:
        return TrendDirection.DOWN
    return TrendDirection.SIDEWAYS


def classify_momentum(closes: Sequence[float], window: int = 10, threshold: float = 0.01) -> MomentumState:
    """Cumulative return over the last ``window`` days."""
    if len(closes) < 2:
        return MomentumState.NEUTRAL

    reference = closes[-window - 1] if len(closes) > window else closes[0]
    change = closes[-1] / reference - 1.0

    if change > threshold:
        return MomentumState.POSITIVE
    if change < -threshold:
        return MomentumState.NEGATIVE
    return MomentumState.NEUTRAL


def classify_volatility(
    closes: Sequence[float],
    window: int = 20,
    low: float = 0.15,
    high: float = 0.30,
    trading_days: int = 252,
) -> VolatilityLevel:
    """Annualized population stddev of the daily returns in the last ``window`` closes."""
    recent = closes[-window:]
    if len(recent) < MIN_CLASSIFICATION_POINTS:
        return VolatilityLevel.MEDIUM

    returns = [(recent[i] - recent[i - 1]) / recent[i - 1] for i in range(1, len(recent))]
    annualized = population_std(returns) * math.sqrt(trading_days)

    if annualized < low:
        return VolatilityLevel.LOW
    if annualized > high:
        return VolatilityLevel.HIGH
    return VolatilityLevel.MEDIUM


def summarize(
    signals: Sequence[TechnicalSignal],
    closes: Sequence[float],
    params: SummaryParams,
    trading_days: int = 252,
) -> AnalysisSummary:
    """Build the AnalysisSummary for one analysis run."""
    overall, strength, confidence = calculate_bias(signals, params.confidence_saturation)
    return AnalysisSummary(
        overall=overall,
        strength=strength,
        confidence=confidence,
        trend_direction=classify_trend(closes, params.trend_window, params.trend_threshold),
        momentum=classify_momentum(closes, params.momentum_window, params.momentum_threshold),
        volatility=classify_volatility(
            closes,
            params.volatility_window,
            params.low_volatility,
            params.high_volatility,
            trading_days,
        ),
    )
