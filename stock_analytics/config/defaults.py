"""Default configuration parameters for indicator and portfolio calculations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RSIParams:
    """Relative Strength Index parameters."""
    period: int = 14
    overbought: float = 70.0
    oversold: float = 30.0
    divergence_lookback: int = 20                    # Bars compared for price/RSI divergence


@dataclass(frozen=True)
class MACDParams:
    """MACD parameters."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9
    saturation_pct: float = 0.5                      # Histogram % of price for full strength
    divergence_lookback: int = 20


@dataclass(frozen=True)
class BollingerParams:
    """Bollinger Bands parameters."""
    period: int = 20
    std_multiplier: float = 2.0
    overbought_percent_b: float = 0.95
    oversold_percent_b: float = 0.05
    squeeze_bandwidth: float = 0.1
    saturation: float = 0.25                         # %B distance past threshold for full strength
    walk_periods: int = 3                            # Consecutive closes on a band
    walk_tolerance: float = 0.02                     # Fraction inside the band still counted


@dataclass(frozen=True)
class MovingAverageParams:
    """Moving average windows."""
    short_window: int = 20
    long_window: int = 50
    saturation_pct: float = 5.0                      # Short/long spread % for full strength


@dataclass(frozen=True)
class StochasticParams:
    """Stochastic oscillator parameters."""
    k_period: int = 14
    d_period: int = 3
    overbought: float = 80.0
    oversold: float = 20.0


@dataclass(frozen=True)
class WilliamsRParams:
    """Williams %R parameters."""
    period: int = 14
    overbought: float = -20.0
    oversold: float = -80.0


@dataclass(frozen=True)
class MomentumParams:
    """Rate-of-change momentum parameters."""
    period: int = 10
    threshold_pct: float = 2.0
    saturation_pct: float = 10.0


@dataclass(frozen=True)
class ADXParams:
    """Average Directional Index parameters."""
    period: int = 14
    strong_trend: float = 25.0
    weak_trend: float = 20.0


@dataclass(frozen=True)
class VolumeParams:
    """OBV, volume-price trend and accumulation/distribution parameters."""
    lookback: int = 10
    flow_threshold: float = 0.2                      # OBV and A/D normalized flow
    vpt_threshold_pct: float = 2.0
    vpt_saturation_pct: float = 10.0
    divergence_lookback: int = 20                    # OBV and A/D divergence


@dataclass(frozen=True)
class SummaryParams:
    """Aggregation of signals into the market sentiment summary."""
    confidence_saturation: int = 5                   # Directional signals for full coverage
    trend_window: int = 20
    trend_threshold: float = 0.02
    momentum_window: int = 10
    momentum_threshold: float = 0.01
    volatility_window: int = 20
    low_volatility: float = 0.15
    high_volatility: float = 0.30


@dataclass(frozen=True)
class PortfolioParams:
    """Portfolio statistics parameters."""
    risk_free_rate: float = 0.02
    min_data_points: int = 30
    trading_days: int = 252
    var_confidence: float = 0.05
    benchmark_symbol: str = "SPY"


@dataclass(frozen=True)
class AnalyticsConfig:
    """Complete analytics configuration."""
    rsi: RSIParams
    macd: MACDParams
    bollinger: BollingerParams
    moving_averages: MovingAverageParams
    stochastic: StochasticParams
    williams_r: WilliamsRParams
    momentum: MomentumParams
    adx: ADXParams
    volume: VolumeParams
    summary: SummaryParams
    portfolio: PortfolioParams


def get_default_config() -> AnalyticsConfig:
    """Get the default configuration instance."""
    return AnalyticsConfig(
        rsi=RSIParams(),
        macd=MACDParams(),
        bollinger=BollingerParams(),
        moving_averages=MovingAverageParams(),
        stochastic=StochasticParams(),
        williams_r=WilliamsRParams(),
        momentum=MomentumParams(),
        adx=ADXParams(),
        volume=VolumeParams(),
        summary=SummaryParams(),
        portfolio=PortfolioParams(),
    )
