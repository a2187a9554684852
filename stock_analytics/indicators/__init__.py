"""
Technical indicator calculators.

Each module computes one indicator family from a chronologically ordered
price series and maps its record to a signal reading. ``IndicatorCalculator``
coordinates the whole battery.
"""

from .adx import calculate_adx
from .bollinger import calculate_bollinger_bands
from .calculator import INDICATORS, IndicatorCalculator, IndicatorSpec
from .macd import calculate_macd
from .momentum import calculate_rate_of_change
from .moving_averages import calculate_moving_averages
from .rsi import calculate_rsi
from .series import ema_series, sma_series
from .stochastic import calculate_stochastic
from .volume import calculate_ad_series, calculate_obv_series, calculate_vpt_series
from .williams_r import calculate_williams_r

__all__ = [
    "INDICATORS",
    "IndicatorCalculator",
    "IndicatorSpec",
    "calculate_ad_series",
    "calculate_adx",
    "calculate_bollinger_bands",
    "calculate_macd",
    "calculate_moving_averages",
    "calculate_obv_series",
    "calculate_rate_of_change",
    "calculate_rsi",
    "calculate_stochastic",
    "calculate_vpt_series",
    "calculate_williams_r",
    "ema_series",
    "sma_series",
]
