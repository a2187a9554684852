#!/usr/bin/env python3
"""
Basic Usage Example - Stock Analytics

This script demonstrates the analytics core on a simulated price history.
It shows how to:
- Run the technical analysis engine and read its summary
- Filter strong and consensus signals
- Compute portfolio metrics against a benchmark
- Serialize results for display

Run: python examples/basic_usage.py
"""

import json
import random
from datetime import datetime, timedelta, timezone

from stock_analytics import PortfolioAnalyzer, TechnicalAnalysisEngine
from stock_analytics.data.models import PricePoint
from stock_analytics.logging import configure_logging
from stock_analytics.utils import serialize_analysis_result, serialize_portfolio_metrics


def simulate_prices(count: int, seed: int, drift: float = 0.0005, step: float = 0.02) -> list[PricePoint]:
    """Simulate daily OHLCV bars with a seeded random walk."""
    rng = random.Random(seed)
    start = datetime(2024, 1, 2, tzinfo=timezone.utc)
    points = []
    close = 100.0
    for day in range(count):
        open_price = close
        close = open_price * (1 + drift + rng.uniform(-step, step))
        points.append(PricePoint(
            date=start + timedelta(days=day),
            open=open_price,
            high=max(open_price, close) * (1 + rng.uniform(0, 0.01)),
            low=min(open_price, close) * (1 - rng.uniform(0, 0.01)),
            close=close,
            volume=rng.uniform(800_000, 1_200_000),
        ))
    return points


def main() -> None:
    configure_logging(level="WARNING", analytics_level="INFO")

    prices = simulate_prices(250, seed=1)
    benchmark = simulate_prices(250, seed=2, step=0.01)

    print("📈 Technical analysis")
    engine = TechnicalAnalysisEngine({"rsi": {"period": 14}})
    result = engine.analyze(prices, "AAPL")

    summary = result.summary
    print(f"  Overall: {summary.overall.value} "
          f"(strength {summary.strength:.2f}, confidence {summary.confidence:.2f})")
    print(f"  Trend: {summary.trend_direction.value}, momentum: {summary.momentum.value}, "
          f"volatility: {summary.volatility.value}")

    for signal in result.signals:
        print(f"  {signal.indicator:<26} {signal.signal.value:<5} {signal.strength:.2f}  {signal.description}")

    strong = engine.get_strong_signals(result)
    print(f"  Strong signals: {[s.indicator for s in strong] or 'none'}")
    for consensus in engine.get_consensus_signals(result, min_consensus=3):
        print(f"  {consensus.indicator}: {consensus.signal.value}")

    print("\n💼 Portfolio metrics")
    metrics = PortfolioAnalyzer().calculate_metrics(prices, "AAPL", benchmark_prices=benchmark)
    print(json.dumps(serialize_portfolio_metrics(metrics), indent=2))

    print("\n🧾 Serialized analysis (excerpt)")
    data = serialize_analysis_result(result)
    print(json.dumps({"symbol": data["symbol"], "summary": data["summary"]}, indent=2))


if __name__ == "__main__":
    main()
