"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from stock_analytics.config import AnalyticsConfig, ConfigLoader, build_config, get_default_config, resolve_config
from stock_analytics.config.validation import ConfigValidator, ValidationError
from stock_analytics.errors import InvalidInputError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_documented_defaults(self) -> None:
        config = get_default_config()
        assert config.rsi.period == 14
        assert (config.macd.fast_period, config.macd.slow_period, config.macd.signal_period) == (12, 26, 9)
        assert config.bollinger.period == 20
        assert config.bollinger.std_multiplier == 2.0
        assert (config.moving_averages.short_window, config.moving_averages.long_window) == (20, 50)
        assert config.portfolio.risk_free_rate == 0.02
        assert config.portfolio.min_data_points == 30

    def test_config_is_frozen(self) -> None:
        config = get_default_config()
        with pytest.raises(AttributeError):
            config.rsi.period = 21  # type: ignore[misc]


class TestBuildConfig:
    """Test suite for partial overrides."""

    def test_partial_override_keeps_defaults(self) -> None:
        config = build_config({"rsi": {"period": 21}})
        assert config.rsi.period == 21
        assert config.rsi.overbought == 70.0
        assert config.macd == get_default_config().macd

    def test_override_on_base(self) -> None:
        base = build_config({"rsi": {"period": 21}})
        config = build_config({"rsi": {"overbought": 80.0}}, base=base)
        assert config.rsi.period == 21
        assert config.rsi.overbought == 80.0

    def test_invalid_override_lists_errors(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            build_config({"macd": {"fast_period": 30}, "rsi": {"period": 0}})

        errors = exc_info.value.context["errors"]
        assert {err.field for err in errors} == {"macd.fast_period", "rsi.period"}

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            build_config({"rsi": {"lookback": 14}})
        assert "lookback" in str(exc_info.value)

    def test_unknown_section_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            build_config({"ichimoku": {"period": 9}})

    def test_non_mapping_section_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            build_config({"rsi": 14})

    def test_resolve_config(self) -> None:
        config = get_default_config()
        assert resolve_config(None) == config
        assert resolve_config(config) is config
        assert isinstance(resolve_config({"adx": {"period": 10}}), AnalyticsConfig)

    @pytest.mark.parametrize("config", ["oops", 14, ["rsi"]])
    def test_resolve_config_rejects_non_mapping(self, config) -> None:
        with pytest.raises(InvalidInputError):
            resolve_config(config)

    def test_build_config_rejects_non_mapping(self) -> None:
        with pytest.raises(InvalidInputError):
            build_config("oops")  # type: ignore[arg-type]

    def test_engine_rejects_mistyped_levels(self) -> None:
        from stock_analytics import TechnicalAnalysisEngine

        with pytest.raises(InvalidInputError) as exc_info:
            TechnicalAnalysisEngine({"summary": {"low_volatility": "x"}})
        assert exc_info.value.field == "summary.low_volatility"

        with pytest.raises(InvalidInputError) as exc_info:
            TechnicalAnalysisEngine({"adx": {"strong_trend": "25"}})
        assert exc_info.value.field == "adx.strong_trend"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_bundled_symbol_overrides(self) -> None:
        config = ConfigLoader.create().load("TSLA")
        assert config.rsi.overbought == 75.0
        assert config.rsi.oversold == 25.0
        assert config.rsi.period == 14

    def test_unknown_symbol_uses_defaults(self) -> None:
        assert ConfigLoader.create().load("UNKNOWN") == get_default_config()

    def test_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text(
            "symbols:\n"
            "  AAPL:\n"
            "    rsi:\n"
            "      period: 21\n"
            "      overbought: 75.0\n"
        )
        loader = ConfigLoader.create(tmp_path)

        merged = loader.merge_config("AAPL", {"rsi": {"period": 9}})
        assert merged["rsi"]["period"] == 9
        assert merged["rsi"]["overbought"] == 75.0
        assert merged["rsi"]["oversold"] == 30.0

    def test_missing_symbols_file(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_symbol_config("AAPL") == {}

    def test_empty_symbols_file(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load_symbol_config("AAPL") == {}

    def test_invalid_symbol_override(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text("symbols:\n  AAPL:\n    macd:\n      slow_period: 5\n")
        with pytest.raises(InvalidInputError):
            ConfigLoader.create(tmp_path).load("AAPL")


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        from stock_analytics.config.loader import _dataclass_to_dict
        assert ConfigValidator.validate_config(_dataclass_to_dict(get_default_config())) == []

    def test_rsi_levels(self) -> None:
        errors = ConfigValidator.validate_rsi_params({"overbought": 30.0, "oversold": 70.0})
        assert errors == [ValidationError(
            field="rsi.oversold",
            message="Oversold level must be below overbought level",
            value=70.0,
        )]

    def test_rsi_range(self) -> None:
        errors = ConfigValidator.validate_rsi_params({"overbought": 120.0})
        assert [err.field for err in errors] == ["rsi.overbought"]

    def test_bool_is_not_a_period(self) -> None:
        assert ConfigValidator.validate_rsi_params({"period": True})

    def test_moving_average_order(self) -> None:
        errors = ConfigValidator.validate_moving_average_params({"short_window": 50, "long_window": 20})
        assert [err.field for err in errors] == ["moving_averages.short_window"]

    def test_oscillator_levels(self) -> None:
        errors = ConfigValidator.validate_oscillator_params("williams_r", {"overbought": -80.0, "oversold": -20.0})
        assert [err.field for err in errors] == ["williams_r.oversold"]

    @pytest.mark.parametrize("params,field", [
        ({"min_data_points": 1}, "portfolio.min_data_points"),
        ({"risk_free_rate": float("nan")}, "portfolio.risk_free_rate"),
        ({"risk_free_rate": "2%"}, "portfolio.risk_free_rate"),
        ({"var_confidence": 1.0}, "portfolio.var_confidence"),
        ({"trading_days": 0}, "portfolio.trading_days"),
    ])
    def test_portfolio_params(self, params, field) -> None:
        errors = ConfigValidator.validate_portfolio_params(params)
        assert [err.field for err in errors] == [field]

    @pytest.mark.parametrize("section,params,field", [
        ("stochastic", {"overbought": "80"}, "stochastic.overbought"),
        ("stochastic", {"oversold": -5.0}, "stochastic.oversold"),
        ("williams_r", {"overbought": 20.0}, "williams_r.overbought"),
        ("williams_r", {"oversold": None}, "williams_r.oversold"),
    ])
    def test_oscillator_level_types(self, section, params, field) -> None:
        errors = ConfigValidator.validate_oscillator_params(section, params)
        assert [err.field for err in errors] == [field]

    @pytest.mark.parametrize("section,params,field", [
        ("summary", {"low_volatility": "x"}, "summary.low_volatility"),
        ("summary", {"high_volatility": 0.0}, "summary.high_volatility"),
        ("summary", {"low_volatility": 0.4, "high_volatility": 0.3}, "summary.low_volatility"),
        ("summary", {"trend_threshold": -0.01}, "summary.trend_threshold"),
        ("adx", {"strong_trend": "25"}, "adx.strong_trend"),
        ("adx", {"weak_trend": 150.0}, "adx.weak_trend"),
        ("adx", {"weak_trend": 30.0, "strong_trend": 25.0}, "adx.weak_trend"),
        ("momentum", {"threshold_pct": -1.0}, "momentum.threshold_pct"),
        ("momentum", {"saturation_pct": "10"}, "momentum.saturation_pct"),
        ("momentum", {"threshold_pct": 12.0, "saturation_pct": 10.0}, "momentum.threshold_pct"),
        ("volume", {"flow_threshold": 1.5}, "volume.flow_threshold"),
        ("volume", {"vpt_threshold_pct": "2"}, "volume.vpt_threshold_pct"),
        ("volume", {"vpt_saturation_pct": 0}, "volume.vpt_saturation_pct"),
        ("volume", {"vpt_threshold_pct": 5.0, "vpt_saturation_pct": 5.0}, "volume.vpt_threshold_pct"),
        ("volume", {"divergence_lookback": 0}, "volume.divergence_lookback"),
        ("bollinger", {"overbought_percent_b": "high"}, "bollinger.overbought_percent_b"),
        ("bollinger", {"walk_periods": 0}, "bollinger.walk_periods"),
        ("bollinger", {"walk_tolerance": 1.0}, "bollinger.walk_tolerance"),
        ("rsi", {"divergence_lookback": 2.5}, "rsi.divergence_lookback"),
        ("portfolio", {"benchmark_symbol": ""}, "portfolio.benchmark_symbol"),
        ("portfolio", {"benchmark_symbol": 500}, "portfolio.benchmark_symbol"),
    ])
    def test_section_params(self, section, params, field) -> None:
        errors = ConfigValidator.validate_config({section: params})
        assert [err.field for err in errors] == [field]

    def test_build_config_reports_mistyped_threshold(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            build_config({"volume": {"flow_threshold": "0.2"}})
        assert exc_info.value.field == "volume.flow_threshold"
