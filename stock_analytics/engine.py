"""
Technical analysis engine coordinator.

Orchestrates one analysis run over a price series:
Validation → Indicators → Signals → Summary

Every run is a complete, independent computation. The engine holds only its
configuration, so one instance can serve concurrent callers.
"""

from collections.abc import Sequence
from types import MappingProxyType
from typing import Optional, Union

from .config.loader import ConfigInput, resolve_config
from .data.models import PricePoint
from .data.validators import closes, validate_price_series
from .errors import AnalyticsError, DataInsufficientError, SystemFailureError
from .indicators.calculator import IndicatorCalculator
from .logging.config import get_analysis_logger
from .models.indicators import IndicatorKind
from .models.signals import AnalysisResult, TechnicalSignal
from .signals import filters
from .signals.generator import generate_signals
from .signals.summary import summarize

analysis_logger = get_analysis_logger(__name__)


class TechnicalAnalysisEngine:
    """
    Computes the indicator battery, its signals and the sentiment summary.
    """

    def __init__(self, config: ConfigInput = None) -> None:
        """
        Args:
            config: Full configuration, a partial override dict, or None for defaults
        """
        self.config = resolve_config(config)
        self.calculator = IndicatorCalculator(self.config)

    def required_length(self) -> int:
        """Minimum number of price points ``analyze`` accepts."""
        return self.calculator.required_length()

    def analyze(self, prices: Sequence[PricePoint], symbol: str) -> AnalysisResult:
        """
        Run the full technical analysis for one symbol

        Args:
            prices: Chronologically ascending OHLCV points
            symbol: Instrument symbol, carried into the result

        Returns:
            AnalysisResult evaluated at the last price point

        Raises:
            DataInsufficientError: If the series is shorter than required_length()
            InvalidInputError: On malformed price points
            IndicatorCalculationError: On an unexpected failure inside an indicator
        """
        required = self.required_length()
        log = analysis_logger.bind(symbol=symbol, price_count=len(prices))

        try:
            if len(prices) < required:
                raise DataInsufficientError(
                    f"Insufficient data for technical analysis of {symbol}: "
                    f"{required} points required, {len(prices)} available",
                    required_count=required,
                    available_count=len(prices),
                    context={"symbol": symbol}
                )
            points = validate_price_series(prices, required)

            indicators = self.calculator.calculate_all(points)
            as_of = points[-1].date
            signals = generate_signals(indicators, self.config, as_of)
            summary = summarize(
                signals,
                closes(points),
                self.config.summary,
                self.config.portfolio.trading_days,
            )
        except (AnalyticsError, SystemFailureError) as e:
            log.warning("Technical analysis failed", error=str(e), error_type=type(e).__name__)
            raise

        result = AnalysisResult(
            symbol=symbol,
            as_of=as_of,
            summary=summary,
            indicators=MappingProxyType(indicators),
            signals=signals,
        )

        log.info(
            "Technical analysis completed",
            signal_count=len(signals),
            overall=summary.overall.value,
            strength=summary.strength,
            confidence=summary.confidence,
        )
        return result

    def get_strong_signals(self, result: AnalysisResult, min_strength: float = 0.7) -> list[TechnicalSignal]:
        """Signals with strength >= ``min_strength``, in original order."""
        return filters.get_strong_signals(result, min_strength)

    def get_signals_by_indicator(
        self, result: AnalysisResult, indicator: Union[IndicatorKind, str]
    ) -> list[TechnicalSignal]:
        """Signals produced by one indicator."""
        return filters.get_signals_by_indicator(result, indicator)

    def get_consensus_signals(self, result: AnalysisResult, min_consensus: int = 2) -> list[TechnicalSignal]:
        """Combined signals for directions agreed on by several indicators."""
        return filters.get_consensus_signals(result, min_consensus)


def analyze_technicals(
    prices: Sequence[PricePoint],
    symbol: str,
    config: Optional[ConfigInput] = None,
) -> AnalysisResult:
    """Convenience function for a one-off analysis."""
    return TechnicalAnalysisEngine(config).analyze(prices, symbol)


def get_strong_signals(result: AnalysisResult, min_strength: float = 0.7) -> list[TechnicalSignal]:
    """Signals with strength >= ``min_strength``, in original order."""
    return filters.get_strong_signals(result, min_strength)
