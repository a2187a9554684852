"""Unit tests for the technical analysis engine."""

import math
from dataclasses import replace

import pytest

from stock_analytics import TechnicalAnalysisEngine, analyze_technicals, get_strong_signals
from stock_analytics.config import build_config
from stock_analytics.errors import DataInsufficientError, InvalidInputError
from stock_analytics.models.indicators import IndicatorKind
from stock_analytics.models.signals import (
    MarketBias,
    MomentumState,
    SignalDirection,
    TrendDirection,
    VolatilityLevel,
)


class TestEngineInput:
    """Test input handling"""

    def test_required_length_default(self):
        assert TechnicalAnalysisEngine().required_length() == 50

    def test_insufficient_data(self, make_prices):
        prices = make_prices([100.0 + i for i in range(49)])
        with pytest.raises(DataInsufficientError) as exc_info:
            TechnicalAnalysisEngine().analyze(prices, "AAPL")

        assert exc_info.value.required_count == 50
        assert exc_info.value.available_count == 49
        assert exc_info.value.context == {"symbol": "AAPL"}

    def test_minimum_length_accepted(self, make_prices):
        result = TechnicalAnalysisEngine().analyze(make_prices([100.0 + i for i in range(50)]), "AAPL")
        assert len(result.signals) == len(IndicatorKind)

    def test_non_finite_price_rejected(self, rising_prices):
        prices = list(rising_prices)
        prices[10] = replace(prices[10], close=math.nan)
        with pytest.raises(InvalidInputError) as exc_info:
            TechnicalAnalysisEngine().analyze(prices, "AAPL")
        assert exc_info.value.index == 10
        assert exc_info.value.field == "close"

    def test_unordered_dates_rejected(self, rising_prices):
        prices = list(rising_prices)
        prices[5], prices[6] = prices[6], prices[5]
        with pytest.raises(InvalidInputError):
            TechnicalAnalysisEngine().analyze(prices, "AAPL")

    def test_invalid_config_rejected(self):
        with pytest.raises(InvalidInputError):
            TechnicalAnalysisEngine({"macd": {"fast_period": 30}})


class TestEngineResult:
    """Test result structure"""

    def test_one_signal_per_indicator(self, rising_prices):
        result = TechnicalAnalysisEngine().analyze(rising_prices, "AAPL")

        assert result.symbol == "AAPL"
        assert list(result.indicators) == list(IndicatorKind)
        assert [s.indicator for s in result.signals] == [kind.value for kind in IndicatorKind]

    def test_signals_timestamped_with_last_price(self, rising_prices):
        result = TechnicalAnalysisEngine().analyze(rising_prices, "AAPL")
        assert result.as_of == rising_prices[-1].date
        assert all(signal.timestamp == rising_prices[-1].date for signal in result.signals)

    def test_strengths_in_unit_range(self, random_walk_prices):
        result = TechnicalAnalysisEngine().analyze(random_walk_prices, "AAPL")
        for signal in result.signals:
            assert 0.0 <= signal.strength <= 1.0
            if signal.signal is SignalDirection.HOLD:
                assert signal.strength < 0.5

    def test_indicators_are_read_only(self, rising_prices):
        result = TechnicalAnalysisEngine().analyze(rising_prices, "AAPL")
        with pytest.raises(TypeError):
            result.indicators[IndicatorKind.RSI] = None

    def test_deterministic(self, random_walk_prices):
        engine = TechnicalAnalysisEngine()
        assert engine.analyze(random_walk_prices, "AAPL") == engine.analyze(random_walk_prices, "AAPL")

    def test_flat_series_is_neutral(self, flat_prices):
        result = TechnicalAnalysisEngine().analyze(flat_prices, "FLAT")

        assert all(signal.signal is SignalDirection.HOLD for signal in result.signals)
        assert result.summary.overall is MarketBias.NEUTRAL
        assert result.summary.strength == 0.0
        assert result.summary.confidence == 0.0
        assert result.summary.trend_direction is TrendDirection.SIDEWAYS
        assert result.summary.momentum is MomentumState.NEUTRAL
        assert result.summary.volatility is VolatilityLevel.LOW

        rsi = result.indicators[IndicatorKind.RSI]
        bands = result.indicators[IndicatorKind.BOLLINGER_BANDS]
        assert rsi.value == 50.0
        assert bands.upper == bands.middle == bands.lower == 100.0

    def test_rising_series_summary(self, rising_prices):
        summary = TechnicalAnalysisEngine().analyze(rising_prices, "UP").summary
        assert summary.trend_direction is TrendDirection.UP
        assert summary.momentum is MomentumState.POSITIVE
        assert summary.volatility is VolatilityLevel.LOW

    def test_config_overrides(self, rising_prices):
        result = TechnicalAnalysisEngine({"rsi": {"period": 21}}).analyze(rising_prices, "AAPL")
        assert result.indicators[IndicatorKind.RSI].period == 21

    def test_accepts_full_config(self, rising_prices):
        config = build_config({"moving_averages": {"short_window": 10, "long_window": 30}})
        result = TechnicalAnalysisEngine(config).analyze(rising_prices, "AAPL")
        assert result.indicators[IndicatorKind.MOVING_AVERAGES].long_window == 30


class TestConvenienceFunctions:
    """Test module-level helpers"""

    def test_analyze_technicals(self, rising_prices):
        result = analyze_technicals(rising_prices, "AAPL", {"rsi": {"period": 10}})
        assert result.indicators[IndicatorKind.RSI].period == 10

    def test_get_strong_signals(self, random_walk_prices):
        engine = TechnicalAnalysisEngine()
        result = engine.analyze(random_walk_prices, "AAPL")
        strong = get_strong_signals(result, 0.6)

        assert strong == engine.get_strong_signals(result, 0.6)
        assert strong == [s for s in result.signals if s.strength >= 0.6]

    def test_engine_filters(self, rising_prices):
        engine = TechnicalAnalysisEngine()
        result = engine.analyze(rising_prices, "AAPL")

        assert [s.indicator for s in engine.get_signals_by_indicator(result, IndicatorKind.ADX)] == ["ADX"]
        for combined in engine.get_consensus_signals(result):
            assert combined.indicator.startswith("Consensus (")
