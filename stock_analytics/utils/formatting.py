"""
Presentation boundary for analytics results.

The core computes at full floating-point precision; rounding happens here and
only here, when results are turned into JSON-ready dictionaries for a caller.
"""

import math
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..models.portfolio import PortfolioMetrics
from ..models.signals import AnalysisResult

DISPLAY_PLACES = 2


def round_value(value: float, places: int = DISPLAY_PLACES) -> float:
    """
    Round a number for display.

    Non-finite values (the +/-inf ratio sentinels) pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return round(value, places)


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 timestamp; naive datetimes are taken as UTC."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.isoformat()


def _to_display(value: Any, places: int) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool) or value is None or isinstance(value, (int, str)):
        return value
    if isinstance(value, float):
        return round_value(value, places)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if is_dataclass(value):
        return {f.name: _to_display(getattr(value, f.name), places) for f in fields(value)}
    if isinstance(value, Mapping):
        return {_to_display(k, places): _to_display(v, places) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_display(v, places) for v in value]
    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def serialize_analysis_result(result: AnalysisResult, places: int = DISPLAY_PLACES) -> dict[str, Any]:
    """
    Convert an AnalysisResult to a JSON-ready dictionary.

    Indicators are keyed by their display name; enums become their values.
    """
    return {
        "symbol": result.symbol,
        "as_of": format_timestamp(result.as_of),
        "summary": _to_display(result.summary, places),
        "indicators": {
            kind.value: _to_display(record, places) for kind, record in result.indicators.items()
        },
        "signals": [_to_display(signal, places) for signal in result.signals],
    }


def serialize_portfolio_metrics(metrics: PortfolioMetrics, places: int = DISPLAY_PLACES) -> dict[str, Any]:
    """Convert PortfolioMetrics to a JSON-ready dictionary."""
    return _to_display(metrics, places)  # type: ignore[no-any-return]
