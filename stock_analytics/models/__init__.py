"""
Result models for the analytics core.

Immutable records for indicator values, trading signals, the aggregated
market summary and portfolio metrics.
"""

from .indicators import (
    ADXResult,
    AccumulationDistributionResult,
    BandWalk,
    BollingerBandsResult,
    Crossover,
    Divergence,
    IndicatorKind,
    IndicatorResult,
    MACDResult,
    MomentumResult,
    MovingAverageResult,
    OBVResult,
    RSIResult,
    StochasticResult,
    TrendStrength,
    VolumePriceTrendResult,
    WilliamsRResult,
)
from .portfolio import PortfolioMetrics
from .signals import (
    AnalysisResult,
    AnalysisSummary,
    MarketBias,
    MomentumState,
    SignalDirection,
    TechnicalSignal,
    TrendDirection,
    VolatilityLevel,
)

__all__ = [
    "ADXResult",
    "AccumulationDistributionResult",
    "AnalysisResult",
    "AnalysisSummary",
    "BandWalk",
    "BollingerBandsResult",
    "Crossover",
    "Divergence",
    "IndicatorKind",
    "IndicatorResult",
    "MACDResult",
    "MarketBias",
    "MomentumResult",
    "MomentumState",
    "MovingAverageResult",
    "OBVResult",
    "PortfolioMetrics",
    "RSIResult",
    "SignalDirection",
    "StochasticResult",
    "TechnicalSignal",
    "TrendDirection",
    "TrendStrength",
    "VolatilityLevel",
    "VolumePriceTrendResult",
    "WilliamsRResult",
]
