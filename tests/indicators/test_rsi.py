"""Tests for RSI calculation and signal thresholds"""

import pytest

from stock_analytics.config.defaults import RSIParams
from stock_analytics.errors import DataInsufficientError, InvalidInputError
from stock_analytics.indicators.rsi import analyze_rsi, calculate_rsi, required_length, rsi_signal
from stock_analytics.models.indicators import RSIResult
from stock_analytics.models.signals import SignalDirection


class TestRSICalculation:
    """Test RSI with Wilder smoothing"""

    def test_equal_closes_give_midpoint(self):
        """Fourteen equal closes with period 14 give exactly 50"""
        assert calculate_rsi([100.0] * 14, period=14) == 50.0

    def test_only_gains_give_100(self):
        closes = [100.0 + i for i in range(20)]
        assert calculate_rsi(closes) == 100.0

    def test_only_losses_give_0(self):
        closes = [100.0 - i for i in range(20)]
        assert calculate_rsi(closes) == 0.0

    def test_wilder_smoothing(self):
        """Seed over the first period, then (prev * (n - 1) + x) / n"""
        # changes +1, -1, +1; seed gain 0.5 / loss 0.5, then gain 0.75 / loss 0.25
        assert calculate_rsi([10.0, 11.0, 10.0, 11.0], period=2) == pytest.approx(75.0)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_rsi_bounds(self, seed, make_walk):
        """RSI stays within [0, 100] for arbitrary series"""
        closes = make_walk(80, seed=seed, step=0.08)
        for end in range(15, len(closes) + 1):
            assert 0.0 <= calculate_rsi(closes[:end]) <= 100.0

    def test_insufficient_data(self):
        with pytest.raises(DataInsufficientError) as exc_info:
            calculate_rsi([100.0], period=14)
        assert exc_info.value.available_count == 1

    def test_invalid_period(self):
        with pytest.raises(InvalidInputError):
            calculate_rsi([100.0] * 20, period=0)

    def test_required_length(self):
        assert required_length(RSIParams()) == 15
        assert required_length(RSIParams(period=21)) == 22

    def test_analyze_flags(self, make_prices):
        prices = make_prices([100.0 + i for i in range(20)])
        result = analyze_rsi(prices, RSIParams())
        assert result.value == 100.0
        assert result.overbought is True
        assert result.oversold is False
        assert result.period == 14


class TestRSISignal:
    """Test RSI signal mapping"""

    def make_result(self, value, params=RSIParams()):
        return RSIResult(
            value=value,
            period=params.period,
            overbought=value > params.overbought,
            oversold=value < params.oversold,
        )

    def test_overbought_sells(self):
        reading = rsi_signal(self.make_result(80.0), RSIParams())
        assert reading.direction is SignalDirection.SELL
        assert reading.strength == pytest.approx(0.5 + 0.5 * 10 / 30)
        assert reading.value == 80.0

    def test_oversold_buys(self):
        reading = rsi_signal(self.make_result(15.0), RSIParams())
        assert reading.direction is SignalDirection.BUY
        assert reading.strength == pytest.approx(0.75)

    def test_extreme_saturates(self):
        assert rsi_signal(self.make_result(100.0), RSIParams()).strength == 1.0
        assert rsi_signal(self.make_result(0.0), RSIParams()).strength == 1.0

    def test_threshold_is_hold(self):
        """Exactly 70 is not overbought; the hold sits just below directional strength"""
        reading = rsi_signal(self.make_result(70.0), RSIParams())
        assert reading.direction is SignalDirection.HOLD
        assert reading.strength == pytest.approx(0.49)

    def test_midpoint_hold_has_no_strength(self):
        reading = rsi_signal(self.make_result(50.0), RSIParams())
        assert reading.direction is SignalDirection.HOLD
        assert reading.strength == 0.0

    def test_strength_grows_with_distance(self):
        strengths = [rsi_signal(self.make_result(v), RSIParams()).strength for v in (71, 80, 90, 99)]
        assert strengths == sorted(strengths)
