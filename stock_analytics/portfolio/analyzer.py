"""Portfolio metrics for a single instrument against optional benchmarks"""

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Optional

from ..config.loader import ConfigInput, resolve_config
from ..data.models import PricePoint
from ..data.validators import closes, validate_price_series
from ..errors import AnalyticsError, LengthMismatchError
from ..logging.config import get_portfolio_logger
from ..models.portfolio import PortfolioMetrics
from . import statistics

logger = get_portfolio_logger(__name__)


class PortfolioAnalyzer:
    """
    Computes PortfolioMetrics from price series

    Holds only its configuration; every call is independent.
    """

    def __init__(self, config: ConfigInput = None) -> None:
        self.config = resolve_config(config)

    def calculate_metrics(
        self,
        prices: Sequence[PricePoint],
        symbol: str,
        benchmark_prices: Optional[Sequence[PricePoint]] = None,
        risk_free_rate: Optional[float] = None,
        benchmark_symbol: Optional[str] = None,
        additional_benchmarks: Optional[Mapping[str, Sequence[PricePoint]]] = None,
    ) -> PortfolioMetrics:
        """
        Calculate risk/return metrics for one symbol

        Without a benchmark, beta is 1.0, alpha 0.0 and the correlation map
        is empty.

        Args:
            prices: Chronologically ascending price points of the instrument
            symbol: Instrument symbol
            benchmark_prices: Benchmark series of the same length, for beta/alpha/correlation
            risk_free_rate: Annual risk-free rate (config default 0.02)
            benchmark_symbol: Correlation key of ``benchmark_prices`` (config default "SPY")
            additional_benchmarks: Further series to correlate against, keyed by symbol

        Returns:
            PortfolioMetrics

        Raises:
            DataInsufficientError: Fewer than ``min_data_points`` prices
            LengthMismatchError: A benchmark whose length differs from ``prices``
            InvalidInputError: On malformed price points
        """
        params = self.config.portfolio
        if risk_free_rate is None:
            risk_free_rate = params.risk_free_rate
        if benchmark_symbol is None:
            benchmark_symbol = params.benchmark_symbol
        trading_days = params.trading_days
        log = logger.bind(symbol=symbol, price_count=len(prices))

        try:
            points = validate_price_series(prices, params.min_data_points)
            price_closes = closes(points)
            returns = statistics.calculate_returns(price_closes)

            benchmarks: dict[str, list[float]] = {}
            if benchmark_prices is not None:
                benchmarks[benchmark_symbol] = self._benchmark_returns(benchmark_symbol, benchmark_prices, points)
            for other_symbol, other_prices in (additional_benchmarks or {}).items():
                benchmarks[other_symbol] = self._benchmark_returns(other_symbol, other_prices, points)

            volatility = statistics.calculate_volatility(returns)
            expected_return = statistics.calculate_expected_return(returns, trading_days)
            annualized_volatility = volatility * math.sqrt(trading_days)

            beta = 1.0
            alpha = 0.0
            if benchmark_prices is not None:
                benchmark_returns = benchmarks[benchmark_symbol]
                beta = statistics.calculate_beta(returns, benchmark_returns)
                alpha = statistics.calculate_alpha(returns, benchmark_returns, beta, risk_free_rate, trading_days)

            correlation = {
                name: statistics.calculate_correlation(returns, series)
                for name, series in benchmarks.items()
            }

            metrics = PortfolioMetrics(
                symbol=symbol,
                beta=beta,
                alpha=alpha,
                sharpe_ratio=statistics.calculate_sharpe_ratio(
                    expected_return, annualized_volatility, risk_free_rate
                ),
                sortino_ratio=statistics.calculate_sortino_ratio(returns, risk_free_rate, trading_days),
                volatility=annualized_volatility,
                expected_return=expected_return,
                max_drawdown=statistics.calculate_max_drawdown(price_closes),
                correlation=MappingProxyType(correlation),
                value_at_risk=statistics.calculate_var(returns, params.var_confidence),
                conditional_value_at_risk=statistics.calculate_cvar(returns, params.var_confidence),
            )
        except AnalyticsError as e:
            log.warning("Portfolio metrics failed", error=str(e), error_type=type(e).__name__)
            raise

        log.info(
            "Portfolio metrics calculated",
            benchmarks=list(correlation),
            sharpe_ratio=metrics.sharpe_ratio,
            max_drawdown=metrics.max_drawdown,
        )
        return metrics

    def _benchmark_returns(
        self,
        benchmark_symbol: str,
        benchmark_prices: Sequence[PricePoint],
        points: Sequence[PricePoint],
    ) -> list[float]:
        if len(benchmark_prices) != len(points):
            raise LengthMismatchError(
                f"Benchmark {benchmark_symbol} has {len(benchmark_prices)} points, "
                f"expected {len(points)}",
                left_length=len(points),
                right_length=len(benchmark_prices),
                context={"benchmark": benchmark_symbol}
            )
        benchmark_points = validate_price_series(benchmark_prices)
        return statistics.calculate_returns(closes(benchmark_points))

    def calculate_var(self, returns: Sequence[float], confidence_level: Optional[float] = None) -> float:
        """Historical VaR at the configured confidence level unless given."""
        if confidence_level is None:
            confidence_level = self.config.portfolio.var_confidence
        return statistics.calculate_var(returns, confidence_level)

    def calculate_cvar(self, returns: Sequence[float], confidence_level: Optional[float] = None) -> float:
        """Conditional VaR at the configured confidence level unless given."""
        if confidence_level is None:
            confidence_level = self.config.portfolio.var_confidence
        return statistics.calculate_cvar(returns, confidence_level)
