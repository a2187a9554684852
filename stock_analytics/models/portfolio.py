"""Portfolio metrics model"""

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class PortfolioMetrics:
    """
    Risk/return statistics for one symbol over one evaluation window.

    Sentinels: ``sortino_ratio`` is +inf when no negative excess-return day was
    observed; ``sharpe_ratio`` is +/-inf when volatility is zero; ``beta`` is 1.0
    and ``alpha`` 0.0 when no benchmark was supplied.
    """
    symbol: str
    beta: float
    alpha: float
    sharpe_ratio: float
    sortino_ratio: float
    volatility: float                       # Annualized
    expected_return: float                  # Annualized, not compounded
    max_drawdown: float                     # Fraction of peak, 0-1
    correlation: Mapping[str, float]        # benchmark symbol -> Pearson coefficient
    value_at_risk: float                    # Historical daily VaR
    conditional_value_at_risk: float        # Mean of returns at or below VaR
