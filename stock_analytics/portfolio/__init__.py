"""
Portfolio risk/return statistics.

Pure statistics functions over return series plus the PortfolioAnalyzer that
assembles them into PortfolioMetrics.
"""

from .analyzer import PortfolioAnalyzer
from .statistics import (
    calculate_alpha,
    calculate_beta,
    calculate_correlation,
    calculate_cvar,
    calculate_expected_return,
    calculate_max_drawdown,
    calculate_returns,
    calculate_sharpe_ratio,
    calculate_sortino_ratio,
    calculate_var,
    calculate_volatility,
)

__all__ = [
    "PortfolioAnalyzer",
    "calculate_alpha",
    "calculate_beta",
    "calculate_correlation",
    "calculate_cvar",
    "calculate_expected_return",
    "calculate_max_drawdown",
    "calculate_returns",
    "calculate_sharpe_ratio",
    "calculate_sortino_ratio",
    "calculate_var",
    "calculate_volatility",
]
