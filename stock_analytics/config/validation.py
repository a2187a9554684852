"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _check_period(section: str, params: dict[str, Any], name: str) -> list[ValidationError]:
    if name not in params:
        return []
    value = params[name]
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return [ValidationError(
            field=f"{section}.{name}",
            message="Must be a positive integer",
            value=value
        )]
    return []


def _check_positive(section: str, params: dict[str, Any], name: str) -> list[ValidationError]:
    if name not in params:
        return []
    value = params[name]
    if not _is_number(value) or value <= 0:
        return [ValidationError(
            field=f"{section}.{name}",
            message="Must be a positive number",
            value=value
        )]
    return []


def _check_non_negative(section: str, params: dict[str, Any], name: str) -> list[ValidationError]:
    if name not in params:
        return []
    value = params[name]
    if not _is_number(value) or value < 0:
        return [ValidationError(
            field=f"{section}.{name}",
            message="Must be a non-negative number",
            value=value
        )]
    return []


def _check_range(section: str, params: dict[str, Any], name: str,
                 low: float, high: float, exclusive: bool = False) -> list[ValidationError]:
    """Numeric and within [low, high], or (low, high) when ``exclusive``."""
    if name not in params:
        return []
    value = params[name]
    if _is_number(value):
        inside = low < value < high if exclusive else low <= value <= high
        if inside:
            return []
    bounds = "(exclusive)" if exclusive else "(inclusive)"
    return [ValidationError(
        field=f"{section}.{name}",
        message=f"Must be a number between {low:g} and {high:g} {bounds}",
        value=value
    )]


def _check_ordered(section: str, params: dict[str, Any], low: str, high: str,
                   message: str) -> list[ValidationError]:
    """Both fields present and numeric: require params[low] < params[high]."""
    low_value = params.get(low)
    high_value = params.get(high)
    if _is_number(low_value) and _is_number(high_value) and low_value >= high_value:
        return [ValidationError(
            field=f"{section}.{low}",
            message=message,
            value=low_value
        )]
    return []


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        errors = _check_period("rsi", params, "period")
        errors.extend(_check_period("rsi", params, "divergence_lookback"))

        for name in ("overbought", "oversold"):
            errors.extend(_check_range("rsi", params, name, 0, 100))

        errors.extend(_check_ordered(
            "rsi", params, "oversold", "overbought",
            "Oversold level must be below overbought level"
        ))
        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD parameters."""
        errors = []
        for name in ("fast_period", "slow_period", "signal_period", "divergence_lookback"):
            errors.extend(_check_period("macd", params, name))
        errors.extend(_check_positive("macd", params, "saturation_pct"))

        errors.extend(_check_ordered(
            "macd", params, "fast_period", "slow_period",
            "Fast period must be less than slow period"
        ))
        return errors

    @staticmethod
    def validate_bollinger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Bollinger Bands parameters."""
        errors = _check_period("bollinger", params, "period")
        errors.extend(_check_period("bollinger", params, "walk_periods"))
        for name in ("std_multiplier", "squeeze_bandwidth", "saturation"):
            errors.extend(_check_positive("bollinger", params, name))
        for name in ("oversold_percent_b", "overbought_percent_b"):
            errors.extend(_check_range("bollinger", params, name, 0, 1))
        if "walk_tolerance" in params:
            value = params["walk_tolerance"]
            if not _is_number(value) or not 0 <= value < 1:
                errors.append(ValidationError(
                    field="bollinger.walk_tolerance",
                    message="Must be a number in [0, 1)",
                    value=value
                ))

        errors.extend(_check_ordered(
            "bollinger", params, "oversold_percent_b", "overbought_percent_b",
            "Oversold %B must be below overbought %B"
        ))
        return errors

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average windows."""
        errors = []
        for name in ("short_window", "long_window"):
            errors.extend(_check_period("moving_averages", params, name))
        errors.extend(_check_positive("moving_averages", params, "saturation_pct"))

        errors.extend(_check_ordered(
            "moving_averages", params, "short_window", "long_window",
            "Short window must be less than long window"
        ))
        return errors

    @staticmethod
    def validate_oscillator_params(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate stochastic (0..100) or Williams %R (-100..0) parameters."""
        errors = []
        for name in ("period", "k_period", "d_period"):
            errors.extend(_check_period(section, params, name))

        low, high = (-100, 0) if section == "williams_r" else (0, 100)
        for name in ("overbought", "oversold"):
            errors.extend(_check_range(section, params, name, low, high))

        errors.extend(_check_ordered(
            section, params, "oversold", "overbought",
            "Oversold level must be below overbought level"
        ))
        return errors

    @staticmethod
    def validate_momentum_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rate-of-change momentum parameters."""
        errors = _check_period("momentum", params, "period")
        errors.extend(_check_non_negative("momentum", params, "threshold_pct"))
        errors.extend(_check_positive("momentum", params, "saturation_pct"))

        errors.extend(_check_ordered(
            "momentum", params, "threshold_pct", "saturation_pct",
            "Threshold must be below saturation"
        ))
        return errors

    @staticmethod
    def validate_adx_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ADX trend strength levels."""
        errors = _check_period("adx", params, "period")
        for name in ("strong_trend", "weak_trend"):
            errors.extend(_check_range("adx", params, name, 0, 100))

        errors.extend(_check_ordered(
            "adx", params, "weak_trend", "strong_trend",
            "Weak trend level must be below strong trend level"
        ))
        return errors

    @staticmethod
    def validate_volume_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volume indicator parameters."""
        errors = []
        for name in ("lookback", "divergence_lookback"):
            errors.extend(_check_period("volume", params, name))
        errors.extend(_check_range("volume", params, "flow_threshold", 0, 1, exclusive=True))
        errors.extend(_check_non_negative("volume", params, "vpt_threshold_pct"))
        errors.extend(_check_positive("volume", params, "vpt_saturation_pct"))

        errors.extend(_check_ordered(
            "volume", params, "vpt_threshold_pct", "vpt_saturation_pct",
            "VPT threshold must be below VPT saturation"
        ))
        return errors

    @staticmethod
    def validate_summary_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate market sentiment summary parameters."""
        errors = []
        for name in ("confidence_saturation", "trend_window", "momentum_window", "volatility_window"):
            errors.extend(_check_period("summary", params, name))
        for name in ("trend_threshold", "momentum_threshold"):
            errors.extend(_check_non_negative("summary", params, name))
        for name in ("low_volatility", "high_volatility"):
            errors.extend(_check_positive("summary", params, name))

        errors.extend(_check_ordered(
            "summary", params, "low_volatility", "high_volatility",
            "Low volatility level must be below high volatility level"
        ))
        return errors

    @staticmethod
    def validate_portfolio_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate portfolio statistics parameters."""
        errors = []
        errors.extend(_check_period("portfolio", params, "min_data_points"))
        errors.extend(_check_period("portfolio", params, "trading_days"))

        if "min_data_points" in params and isinstance(params["min_data_points"], int):
            if params["min_data_points"] < 2:
                errors.append(ValidationError(
                    field="portfolio.min_data_points",
                    message="At least two prices are needed to form a return",
                    value=params["min_data_points"]
                ))

        if "risk_free_rate" in params and not _is_number(params["risk_free_rate"]):
            errors.append(ValidationError(
                field="portfolio.risk_free_rate",
                message="Must be a finite number",
                value=params["risk_free_rate"]
            ))

        errors.extend(_check_range("portfolio", params, "var_confidence", 0, 1, exclusive=True))

        if "benchmark_symbol" in params:
            value = params["benchmark_symbol"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="portfolio.benchmark_symbol",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration. Non-mapping sections are left to the loader."""
        errors = []
        config = {name: section for name, section in config.items() if isinstance(section, dict)}

        if "rsi" in config:
            errors.extend(ConfigValidator.validate_rsi_params(config["rsi"]))

        if "macd" in config:
            errors.extend(ConfigValidator.validate_macd_params(config["macd"]))

        if "bollinger" in config:
            errors.extend(ConfigValidator.validate_bollinger_params(config["bollinger"]))

        if "moving_averages" in config:
            errors.extend(ConfigValidator.validate_moving_average_params(config["moving_averages"]))

        for section in ("stochastic", "williams_r"):
            if section in config:
                errors.extend(ConfigValidator.validate_oscillator_params(section, config[section]))

        if "momentum" in config:
            errors.extend(ConfigValidator.validate_momentum_params(config["momentum"]))

        if "adx" in config:
            errors.extend(ConfigValidator.validate_adx_params(config["adx"]))

        if "volume" in config:
            errors.extend(ConfigValidator.validate_volume_params(config["volume"]))

        if "summary" in config:
            errors.extend(ConfigValidator.validate_summary_params(config["summary"]))

        if "portfolio" in config:
            errors.extend(ConfigValidator.validate_portfolio_params(config["portfolio"]))

        return errors
