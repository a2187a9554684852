"""Tests for portfolio statistics functions"""

import math

import pytest

from stock_analytics.errors import DataInsufficientError, InvalidInputError, LengthMismatchError
from stock_analytics.portfolio.statistics import (
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


class TestReturnsAndVolatility:
    """Test basic return statistics"""

    def test_returns(self):
        assert calculate_returns([100.0, 110.0, 99.0]) == [pytest.approx(0.1), pytest.approx(-0.1)]

    def test_returns_length(self):
        assert len(calculate_returns([100.0 + i for i in range(30)])) == 29
        assert calculate_returns([100.0]) == []

    def test_returns_reject_non_positive_prices(self):
        with pytest.raises(InvalidInputError):
            calculate_returns([100.0, 0.0, 101.0])

    def test_population_volatility(self):
        assert calculate_volatility([0.1, -0.1]) == pytest.approx(0.1)
        assert calculate_volatility([0.01] * 10) == pytest.approx(0.0, abs=1e-15)

    def test_volatility_needs_returns(self):
        with pytest.raises(DataInsufficientError):
            calculate_volatility([])

    def test_expected_return_annualized(self):
        assert calculate_expected_return([0.001, 0.003]) == pytest.approx(0.002 * 252)
        assert calculate_expected_return([0.001], trading_days=365) == pytest.approx(0.365)


class TestMaxDrawdown:
    """Test peak-to-trough decline"""

    def test_known_drawdown(self):
        assert calculate_max_drawdown([100.0, 120.0, 90.0, 130.0, 65.0]) == pytest.approx(0.5)

    def test_monotonic_increase(self):
        assert calculate_max_drawdown([100.0 + i for i in range(40)]) == 0.0

    def test_range(self, make_walk):
        for seed in range(5):
            drawdown = calculate_max_drawdown(make_walk(100, seed=seed, step=0.1))
            assert 0.0 <= drawdown <= 1.0


class TestRiskAdjustedRatios:
    """Test Sharpe and Sortino"""

    def test_sharpe(self):
        assert calculate_sharpe_ratio(0.12, 0.2, 0.02) == pytest.approx(0.5)

    def test_sharpe_zero_volatility_sentinels(self):
        assert calculate_sharpe_ratio(0.05, 0.0, 0.02) == math.inf
        assert calculate_sharpe_ratio(0.01, 0.0, 0.02) == -math.inf
        assert calculate_sharpe_ratio(0.02, 0.0, 0.02) == 0.0

    def test_sharpe_volatility_rounding_residue(self):
        assert calculate_sharpe_ratio(0.25, 1e-17, 0.02) == math.inf
        assert calculate_sharpe_ratio(0.0, 1e-17, 0.02) == -math.inf

    def test_sharpe_monotonic_in_return(self):
        ratios = [calculate_sharpe_ratio(r / 100, 0.15, 0.02) for r in range(-20, 40, 5)]
        assert ratios == sorted(ratios)

    def test_sortino_without_downside(self):
        assert calculate_sortino_ratio([0.01, 0.02, 0.005], risk_free_rate=0.0) == math.inf

    def test_sortino_known_value(self):
        # mean excess 0.005, downside RMS 0.01
        ratio = calculate_sortino_ratio([0.02, -0.01], risk_free_rate=0.0)
        assert ratio == pytest.approx(0.5 * math.sqrt(252))

    def test_sortino_counts_risk_free_shortfall(self):
        """Positive days below the daily risk-free rate are downside"""
        ratio = calculate_sortino_ratio([0.00001] * 10, risk_free_rate=0.02)
        assert ratio < 0


class TestBetaAlphaCorrelation:
    """Test benchmark statistics"""

    def test_beta_on_self(self, make_walk):
        returns = calculate_returns(make_walk(60))
        assert calculate_beta(returns, returns) == pytest.approx(1.0)

    def test_beta_of_leveraged_series(self):
        benchmark = [0.01, -0.02, 0.015, 0.0, -0.005]
        assert calculate_beta([2 * r for r in benchmark], benchmark) == pytest.approx(2.0)

    def test_beta_zero_benchmark_variance(self):
        assert calculate_beta([0.01, -0.02, 0.03], [0.001, 0.001, 0.001]) == 1.0

    def test_beta_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            calculate_beta([0.01, 0.02], [0.01])
        assert exc_info.value.left_length == 2
        assert exc_info.value.right_length == 1

    def test_alpha_against_self_is_zero(self):
        returns = [0.01, -0.02, 0.015, 0.0, -0.005]
        assert calculate_alpha(returns, returns, 1.0, 0.02) == pytest.approx(0.0)

    def test_alpha_capm(self):
        returns = [0.002] * 5
        benchmark = [0.001] * 5
        # 0.504 - 0.02 - 0.5 * (0.252 - 0.02)
        assert calculate_alpha(returns, benchmark, 0.5, 0.02) == pytest.approx(0.368)

    def test_alpha_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            calculate_alpha([0.01, 0.02], [0.01], 1.0)

    def test_correlation_extremes(self):
        returns = [0.01, -0.02, 0.015, 0.0, -0.005]
        assert calculate_correlation(returns, returns) == pytest.approx(1.0)
        assert calculate_correlation(returns, [-r for r in returns]) == pytest.approx(-1.0)

    def test_correlation_zero_variance(self):
        assert calculate_correlation([0.01, 0.02, 0.03], [0.01, 0.01, 0.01]) == 0.0

    def test_correlation_bounds(self, make_walk):
        for seed in range(5):
            a = calculate_returns(make_walk(50, seed=seed))
            b = calculate_returns(make_walk(50, seed=seed + 100))
            assert -1.0 <= calculate_correlation(a, b) <= 1.0
            assert -1.0 <= calculate_correlation(a, a) <= 1.0

    def test_correlation_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            calculate_correlation([0.01], [0.01, 0.02])

    def test_geometric_benchmark_has_no_variance(self):
        """Constant growth leaves only rounding residue in the returns"""
        benchmark = calculate_returns([100 * 1.01 ** i for i in range(40)])
        returns = [0.01 * (-1) ** i for i in range(39)]
        assert calculate_volatility(benchmark) == 0.0
        assert calculate_beta(returns, benchmark) == 1.0
        assert calculate_correlation(returns, benchmark) == 0.0
        assert calculate_correlation(benchmark, returns) == 0.0

    def test_small_real_dispersion_still_counts(self):
        benchmark = [0.01 + 1e-6 * (-1) ** i for i in range(40)]
        assert calculate_beta(benchmark, benchmark) == pytest.approx(1.0)
        assert calculate_correlation(benchmark, benchmark) == pytest.approx(1.0)


class TestValueAtRisk:
    """Test historical VaR and CVaR"""

    RETURNS = [i / 100 for i in range(-10, 10)]

    def test_var_quantile(self):
        # floor(20 * 0.05) = 1 -> second worst return
        assert calculate_var(self.RETURNS, 0.05) == pytest.approx(-0.09)

    def test_cvar_tail_mean(self):
        assert calculate_cvar(self.RETURNS, 0.05) == pytest.approx(-0.095)

    def test_var_ignores_input_order(self):
        assert calculate_var(list(reversed(self.RETURNS)), 0.05) == pytest.approx(-0.09)

    def test_single_return(self):
        assert calculate_var([0.01], 0.05) == 0.01
        assert calculate_cvar([0.01], 0.05) == 0.01

    def test_cvar_not_above_var(self, make_walk):
        for seed in range(5):
            returns = calculate_returns(make_walk(100, seed=seed))
            for level in (0.01, 0.05, 0.1, 0.25):
                assert calculate_cvar(returns, level) <= calculate_var(returns, level)

    def test_empty_returns(self):
        with pytest.raises(DataInsufficientError):
            calculate_var([])

    @pytest.mark.parametrize("level", [0.0, 1.0, -0.1, 1.5])
    def test_invalid_confidence_level(self, level):
        with pytest.raises(InvalidInputError):
            calculate_var([0.01, 0.02], level)
