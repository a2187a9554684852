"""
Stock Analytics - Quantitative analytics core for the stock dashboard

Converts OHLCV price series into technical-indicator signals with a composite
market sentiment summary, and computes portfolio risk/return statistics
(volatility, drawdown, Sharpe/Sortino, beta/alpha, VaR/CVaR) from return series.
"""

__version__ = "0.1.0"
__author__ = "Stock Dashboard Team"

from .engine import TechnicalAnalysisEngine, analyze_technicals, get_strong_signals
from .portfolio import PortfolioAnalyzer

__all__ = [
    "TechnicalAnalysisEngine",
    "PortfolioAnalyzer",
    "analyze_technicals",
    "get_strong_signals",
]
