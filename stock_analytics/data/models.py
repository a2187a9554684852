"""
Canonical price data model.

Price series arrive from an external data-provider collaborator; the core only
ever reads them.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PricePoint:
    """Single OHLCV bar."""
    date: datetime      # Bar timestamp
    open: float         # Opening price
    high: float         # High price
    low: float          # Low price
    close: float        # Closing price
    volume: float       # Traded volume

    @property
    def range(self) -> float:
        """High-low range of the bar."""
        return self.high - self.low
