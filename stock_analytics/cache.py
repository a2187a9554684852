"""
Memoization wrapper around the analytics engine.

The engine itself keeps no state; callers that re-analyze identical series
(request retries, dashboards refreshing) can wrap it in an AnalysisCache.
Results are immutable, so cached instances are shared between callers.
"""

import hashlib
import json
import threading
from collections import OrderedDict
from collections.abc import Sequence
from dataclasses import asdict
from typing import Optional

from .data.models import PricePoint
from .engine import TechnicalAnalysisEngine
from .errors import InvalidInputError
from .logging.config import get_logger
from .models.signals import AnalysisResult
from .utils.formatting import format_timestamp

logger = get_logger(__name__)


class AnalysisCache:
    """Thread-safe LRU cache of AnalysisResults keyed by symbol, series and config."""

    def __init__(self, engine: Optional[TechnicalAnalysisEngine] = None, max_entries: int = 128):
        if max_entries <= 0:
            raise InvalidInputError(f"max_entries must be positive: {max_entries}", field="max_entries", value=max_entries)
        self.engine = engine or TechnicalAnalysisEngine()
        self.max_entries = max_entries
        self._entries: OrderedDict[str, AnalysisResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self._config_fingerprint = json.dumps(asdict(self.engine.config), sort_keys=True)

    def cache_key(self, prices: Sequence[PricePoint], symbol: str) -> str:
        """SHA-256 over the symbol, every price field and the engine configuration."""
        digest = hashlib.sha256()
        digest.update(symbol.encode())
        digest.update(self._config_fingerprint.encode())
        for point in prices:
            digest.update(
                f"|{format_timestamp(point.date)},{point.open!r},{point.high!r},"
                f"{point.low!r},{point.close!r},{point.volume!r}".encode()
            )
        return digest.hexdigest()

    def analyze(self, prices: Sequence[PricePoint], symbol: str) -> AnalysisResult:
        """Return the cached result for this input, computing it on a miss."""
        key = self.cache_key(prices, symbol)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return cached
            self.misses += 1

        # Computed outside the lock; failures are not cached
        result = self.engine.analyze(prices, symbol)

        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Analysis cache eviction", key=evicted[:16])

        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
