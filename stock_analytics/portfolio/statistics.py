"""
Risk and return statistics over daily return series.

Independently callable pure functions. Degenerate but defined inputs return
documented sentinels instead of raising:

- Sharpe with zero volatility: +inf / -inf by the sign of the excess return,
  0.0 when the excess return is also zero
- Sortino with no negative excess-return days: +inf
- Beta with zero benchmark variance: 1.0
- Correlation with zero variance on either side: 0.0
"""

import math
from collections.abc import Sequence

from ..errors import DataInsufficientError, InvalidInputError, LengthMismatchError
from ..indicators.series import is_negligible, mean

TRADING_DAYS = 252

# Relative size below which a standard deviation is rounding residue
DISPERSION_TOLERANCE = 1e-9


def _require_returns(returns: Sequence[float], what: str) -> None:
    if len(returns) == 0:
        raise DataInsufficientError(
            f"Insufficient data for {what}: at least one return required",
            required_count=1,
            available_count=0
        )


def _no_dispersion(spread: float, values: Sequence[float]) -> bool:
    """A standard deviation that is float noise next to the values themselves."""
    return is_negligible(spread, max(abs(v) for v in values), DISPERSION_TOLERANCE)


def _require_same_length(left: Sequence[float], right: Sequence[float]) -> None:
    if len(left) != len(right):
        raise LengthMismatchError(
            f"Returns arrays must have the same length ({len(left)} != {len(right)})",
            left_length=len(left),
            right_length=len(right)
        )


def calculate_returns(prices: Sequence[float]) -> list[float]:
    """
    Daily simple returns of consecutive closing prices

    Args:
        prices: Closing prices in chronological order

    Returns:
        ``len(prices) - 1`` fractional day-over-day changes
    """
    for index, price in enumerate(prices):
        if not math.isfinite(price) or price <= 0:
            raise InvalidInputError(
                f"Invalid price at index {index}: {price}",
                index=index, field="close", value=price
            )
    return [(prices[i] - prices[i - 1]) / prices[i - 1] for i in range(1, len(prices))]


def calculate_volatility(returns: Sequence[float]) -> float:
    """
    Population standard deviation of daily returns (not annualized)

    Constant returns give exactly 0.0, also when rounding leaves a residue.
    """
    _require_returns(returns, "volatility")
    center = mean(returns)
    spread = math.sqrt(math.fsum((r - center) ** 2 for r in returns) / len(returns))
    if _no_dispersion(spread, returns):
        return 0.0
    return spread


def calculate_expected_return(returns: Sequence[float], trading_days: int = TRADING_DAYS) -> float:
    """Mean daily return annualized by ``trading_days`` (not compounded)."""
    _require_returns(returns, "expected return")
    return mean(returns) * trading_days


def calculate_max_drawdown(prices: Sequence[float]) -> float:
    """
    Largest peak-to-trough decline as a fraction of the peak, in [0, 1]

    One forward pass over the prices tracking the running peak.
    """
    if len(prices) == 0:
        raise DataInsufficientError(
            "Insufficient data for max drawdown: at least one price required",
            required_count=1,
            available_count=0
        )

    max_drawdown = 0.0
    peak = prices[0]
    for price in prices[1:]:
        if price > peak:
            peak = price
        drawdown = (peak - price) / peak
        if drawdown > max_drawdown:
            max_drawdown = drawdown
    return max_drawdown


def calculate_sharpe_ratio(annual_return: float, annual_volatility: float, risk_free_rate: float = 0.02) -> float:
    """
    (annual_return - risk_free_rate) / annual_volatility

    A volatility that is float noise next to the returns counts as zero.
    """
    excess = annual_return - risk_free_rate
    if is_negligible(annual_volatility, max(abs(annual_return), abs(risk_free_rate)), DISPERSION_TOLERANCE):
        if excess == 0:
            return 0.0
        return math.copysign(math.inf, excess)
    return excess / annual_volatility


def calculate_sortino_ratio(
    returns: Sequence[float],
    risk_free_rate: float = 0.02,
    trading_days: int = TRADING_DAYS,
) -> float:
    """
    Annualized mean excess return over annualized downside deviation

    Downside deviation is the root mean square of the negative daily excess
    returns. No negative excess-return day means no observed downside: +inf.
    """
    _require_returns(returns, "Sortino ratio")

    daily_risk_free = risk_free_rate / trading_days
    excess_returns = [r - daily_risk_free for r in returns]
    negative = [r for r in excess_returns if r < 0]
    if not negative:
        return math.inf

    downside_deviation = math.sqrt(math.fsum(r * r for r in negative) / len(negative))
    return (mean(excess_returns) * trading_days) / (downside_deviation * math.sqrt(trading_days))


def calculate_beta(returns: Sequence[float], benchmark_returns: Sequence[float]) -> float:
    """
    cov(returns, benchmark) / var(benchmark), population moments

    A benchmark with zero variance carries no market signal; beta is then
    reported as 1.0 (market-neutral default) rather than raising.
    """
    _require_same_length(returns, benchmark_returns)
    _require_returns(returns, "beta")

    mean_return = mean(returns)
    mean_benchmark = mean(benchmark_returns)
    covariance = math.fsum(
        (r - mean_return) * (b - mean_benchmark) for r, b in zip(returns, benchmark_returns)
    ) / len(returns)
    benchmark_variance = math.fsum((b - mean_benchmark) ** 2 for b in benchmark_returns) / len(benchmark_returns)

    if _no_dispersion(math.sqrt(benchmark_variance), benchmark_returns):
        return 1.0
    return covariance / benchmark_variance


def calculate_alpha(
    returns: Sequence[float],
    benchmark_returns: Sequence[float],
    beta: float,
    risk_free_rate: float = 0.02,
    trading_days: int = TRADING_DAYS,
) -> float:
    """
    CAPM alpha on annualized returns

    alpha = R - rf - beta * (Rb - rf)
    """
    _require_same_length(returns, benchmark_returns)
    annual_return = calculate_expected_return(returns, trading_days)
    annual_benchmark = calculate_expected_return(benchmark_returns, trading_days)
    return annual_return - risk_free_rate - beta * (annual_benchmark - risk_free_rate)


def calculate_correlation(returns1: Sequence[float], returns2: Sequence[float]) -> float:
    """Pearson correlation, clipped to [-1, 1]; 0.0 when either side has no variance."""
    _require_same_length(returns1, returns2)
    _require_returns(returns1, "correlation")

    mean1 = mean(returns1)
    mean2 = mean(returns2)
    numerator = math.fsum((a - mean1) * (b - mean2) for a, b in zip(returns1, returns2))
    sum1_sq = math.fsum((a - mean1) ** 2 for a in returns1)
    sum2_sq = math.fsum((b - mean2) ** 2 for b in returns2)

    if (_no_dispersion(math.sqrt(sum1_sq / len(returns1)), returns1)
            or _no_dispersion(math.sqrt(sum2_sq / len(returns2)), returns2)):
        return 0.0
    denominator = math.sqrt(sum1_sq * sum2_sq)
    return max(-1.0, min(1.0, numerator / denominator))


def _check_confidence_level(confidence_level: float) -> None:
    if not 0 < confidence_level < 1:
        raise InvalidInputError(
            f"Confidence level must be between 0 and 1 (exclusive): {confidence_level}",
            field="confidence_level", value=confidence_level
        )


def calculate_var(returns: Sequence[float], confidence_level: float = 0.05) -> float:
    """
    Historical Value-at-Risk: the return at the ``confidence_level`` quantile

    ``sorted(returns)[floor(n * confidence_level)]``; the fraction
    ``confidence_level`` of days performed at or below it.
    """
    _require_returns(returns, "VaR")
    _check_confidence_level(confidence_level)

    sorted_returns = sorted(returns)
    index = min(int(math.floor(len(sorted_returns) * confidence_level)), len(sorted_returns) - 1)
    return sorted_returns[index]


def calculate_cvar(returns: Sequence[float], confidence_level: float = 0.05) -> float:
    """Conditional VaR: mean of all returns at or below the VaR threshold."""
    var = calculate_var(returns, confidence_level)
    tail = [r for r in returns if r <= var]
    return mean(tail)
