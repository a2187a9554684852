"""Utility modules for the analytics core."""

from .formatting import (
    format_timestamp,
    round_value,
    serialize_analysis_result,
    serialize_portfolio_metrics,
)

__all__ = [
    "format_timestamp",
    "round_value",
    "serialize_analysis_result",
    "serialize_portfolio_metrics",
]
