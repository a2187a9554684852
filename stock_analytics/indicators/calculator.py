"""Indicator calculator coordinating the full indicator battery"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config.defaults import AnalyticsConfig, get_default_config
from ..data.models import PricePoint
from ..errors import AnalyticsError, IndicatorCalculationError
from ..logging import get_analysis_logger
from ..models.indicators import IndicatorKind, IndicatorResult
from . import adx, bollinger, macd, momentum, moving_averages, rsi, stochastic, volume, williams_r

logger = get_analysis_logger(__name__)


@dataclass(frozen=True)
class IndicatorSpec:
    """How one indicator kind is computed and which config section drives it."""
    section: str
    analyze: Callable[[Sequence[PricePoint], Any], IndicatorResult]
    required_length: Callable[[Any], int]


# Evaluation order follows IndicatorKind declaration order
INDICATORS: dict[IndicatorKind, IndicatorSpec] = {
    IndicatorKind.RSI: IndicatorSpec("rsi", rsi.analyze_rsi, rsi.required_length),
    IndicatorKind.MACD: IndicatorSpec("macd", macd.analyze_macd, macd.required_length),
    IndicatorKind.BOLLINGER_BANDS: IndicatorSpec(
        "bollinger", bollinger.analyze_bollinger_bands, bollinger.required_length
    ),
    IndicatorKind.MOVING_AVERAGES: IndicatorSpec(
        "moving_averages", moving_averages.analyze_moving_averages, moving_averages.required_length
    ),
    IndicatorKind.STOCHASTIC: IndicatorSpec(
        "stochastic", stochastic.analyze_stochastic, stochastic.required_length
    ),
    IndicatorKind.WILLIAMS_R: IndicatorSpec(
        "williams_r", williams_r.analyze_williams_r, williams_r.required_length
    ),
    IndicatorKind.MOMENTUM: IndicatorSpec("momentum", momentum.analyze_momentum, momentum.required_length),
    IndicatorKind.ADX: IndicatorSpec("adx", adx.analyze_adx, adx.required_length),
    IndicatorKind.OBV: IndicatorSpec("volume", volume.analyze_obv, volume.required_length),
    IndicatorKind.VOLUME_PRICE_TREND: IndicatorSpec(
        "volume", volume.analyze_volume_price_trend, volume.required_length
    ),
    IndicatorKind.ACCUMULATION_DISTRIBUTION: IndicatorSpec(
        "volume", volume.analyze_accumulation_distribution, volume.required_length
    ),
}


class IndicatorCalculator:
    """
    Computes every IndicatorKind for a validated price series

    Stateless apart from its configuration; safe to share between threads.
    """

    def __init__(self, config: Optional[AnalyticsConfig] = None):
        self.config = config or get_default_config()

    def params_for(self, kind: IndicatorKind) -> Any:
        """Config section driving ``kind``."""
        return getattr(self.config, INDICATORS[kind].section)

    def required_length(self) -> int:
        """Minimum series length for which every indicator is defined."""
        return max(spec.required_length(self.params_for(kind)) for kind, spec in INDICATORS.items())

    def calculate(self, kind: IndicatorKind, prices: Sequence[PricePoint]) -> IndicatorResult:
        """
        Calculate a single indicator

        Args:
            kind: Indicator to calculate
            prices: Validated price series

        Returns:
            Typed record for ``kind``

        Raises:
            AnalyticsError: Input problems detected by the indicator
            IndicatorCalculationError: Any other failure inside the indicator
        """
        spec = INDICATORS[kind]
        try:
            result = spec.analyze(prices, self.params_for(kind))
        except AnalyticsError:
            raise
        except Exception as e:
            raise IndicatorCalculationError(
                f"{kind.value} calculation failed: {str(e)}",
                indicator=kind.value,
                calculation_input={"price_count": len(prices)}
            ) from e

        logger.debug("Indicator calculated", indicator=kind.value, result=result)
        return result

    def calculate_all(self, prices: Sequence[PricePoint]) -> dict[IndicatorKind, IndicatorResult]:
        """Calculate every indicator, in IndicatorKind order."""
        return {kind: self.calculate(kind, prices) for kind in IndicatorKind}
