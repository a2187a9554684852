"""Signal and analysis summary models"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping

from .indicators import IndicatorKind, IndicatorResult


class SignalDirection(str, Enum):
    """Directional trading signal."""
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class MarketBias(str, Enum):
    """Overall market sentiment."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class TrendDirection(str, Enum):
    """Recent price trend."""
    UP = "up"
    DOWN = "down"
    SIDEWAYS = "sideways"


class MomentumState(str, Enum):
    """Recent price momentum."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class VolatilityLevel(str, Enum):
    """Recent annualized volatility bucket."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class TechnicalSignal:
    """One indicator's directional signal at an evaluation point."""
    indicator: str
    signal: SignalDirection
    strength: float         # 0-1 scale
    value: float
    timestamp: datetime     # Date of the evaluated price point
    description: str

    @property
    def is_directional(self) -> bool:
        """True for buy or sell signals."""
        return self.signal is not SignalDirection.HOLD


@dataclass(frozen=True)
class AnalysisSummary:
    """Composite sentiment derived from the full signal set."""
    overall: MarketBias
    strength: float         # 0-1 scale
    confidence: float       # 0-1 scale
    trend_direction: TrendDirection
    momentum: MomentumState
    volatility: VolatilityLevel


@dataclass(frozen=True)
class AnalysisResult:
    """Complete output of one engine invocation."""
    symbol: str
    as_of: datetime
    summary: AnalysisSummary
    indicators: Mapping[IndicatorKind, IndicatorResult]     # Read-only, evaluation order
    signals: tuple[TechnicalSignal, ...]
