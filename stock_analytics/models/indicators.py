"""
Typed indicator records.

Each indicator family is a member of the closed IndicatorKind enum and
produces exactly one record type holding its values at the last price point.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class IndicatorKind(str, Enum):
    """Indicator families evaluated by the engine, in evaluation order."""
    RSI = "RSI"
    MACD = "MACD"
    BOLLINGER_BANDS = "Bollinger Bands"
    MOVING_AVERAGES = "Moving Averages"
    STOCHASTIC = "Stochastic"
    WILLIAMS_R = "Williams %R"
    MOMENTUM = "Momentum"
    ADX = "ADX"
    OBV = "OBV"
    VOLUME_PRICE_TREND = "Volume Price Trend"
    ACCUMULATION_DISTRIBUTION = "Accumulation/Distribution"


class Crossover(str, Enum):
    """Line crossover observed between the previous and the last point."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NONE = "none"


class TrendStrength(str, Enum):
    """ADX trend strength classification."""
    STRONG = "strong"
    WEAK = "weak"
    NO_TREND = "no_trend"


class Divergence(str, Enum):
    """Price and indicator moving in opposite directions over the lookback."""
    BULLISH = "bullish"     # Lower close, higher indicator
    BEARISH = "bearish"     # Higher close, lower indicator
    NONE = "none"


class BandWalk(str, Enum):
    """Closes riding one Bollinger band for several consecutive bars."""
    UPPER = "upper"
    LOWER = "lower"
    NONE = "none"


@dataclass(frozen=True)
class RSIResult:
    """Relative Strength Index at the last point."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.RSI
    value: float
    period: int
    overbought: bool
    oversold: bool
    divergence: Divergence = Divergence.NONE


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram at the last point."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.MACD
    macd: float
    signal: float
    histogram: float
    crossover: Crossover
    close: float
    divergence: Divergence = Divergence.NONE


@dataclass(frozen=True)
class BollingerBandsResult:
    """Bollinger Bands at the last point."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.BOLLINGER_BANDS
    upper: float
    middle: float
    lower: float
    bandwidth: float    # (upper - lower) / middle
    percent_b: float    # 0 = lower band, 1 = upper band
    squeeze: bool
    close: float
    walking: BandWalk = BandWalk.NONE


@dataclass(frozen=True)
class MovingAverageResult:
    """Short and long simple/exponential moving averages."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.MOVING_AVERAGES
    short_window: int
    long_window: int
    short_sma: float
    long_sma: float
    short_ema: float
    long_ema: float
    close: float
    crossover: Crossover    # Golden (bullish) or death (bearish) cross of the SMAs


@dataclass(frozen=True)
class StochasticResult:
    """Stochastic oscillator %K and %D."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.STOCHASTIC
    k: float
    d: float
    overbought: bool
    oversold: bool


@dataclass(frozen=True)
class WilliamsRResult:
    """Williams %R in [-100, 0]."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.WILLIAMS_R
    value: float
    overbought: bool
    oversold: bool


@dataclass(frozen=True)
class MomentumResult:
    """Rate of change over the momentum period, in percent."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.MOMENTUM
    rate_of_change: float
    period: int


@dataclass(frozen=True)
class ADXResult:
    """Average Directional Index with directional indicators."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.ADX
    adx: float
    plus_di: float
    minus_di: float
    trend: TrendStrength


@dataclass(frozen=True)
class OBVResult:
    """On-Balance Volume and its normalized change over the lookback."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.OBV
    value: float
    flow: float         # OBV change / volume traded over lookback, in [-1, 1]
    divergence: Divergence = Divergence.NONE


@dataclass(frozen=True)
class VolumePriceTrendResult:
    """Volume-Price Trend and its change relative to average volume."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.VOLUME_PRICE_TREND
    value: float
    change_pct: float


@dataclass(frozen=True)
class AccumulationDistributionResult:
    """Accumulation/Distribution line."""
    kind: ClassVar[IndicatorKind] = IndicatorKind.ACCUMULATION_DISTRIBUTION
    value: float
    flow: float                         # A/D change / volume traded over lookback, in [-1, 1]
    money_flow_multiplier: float        # Last bar, in [-1, 1]
    divergence: Divergence = Divergence.NONE


IndicatorResult = Union[
    RSIResult,
    MACDResult,
    BollingerBandsResult,
    MovingAverageResult,
    StochasticResult,
    WilliamsRResult,
    MomentumResult,
    ADXResult,
    OBVResult,
    VolumePriceTrendResult,
    AccumulationDistributionResult,
]
