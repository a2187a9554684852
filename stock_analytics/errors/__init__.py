"""
Error classification for the analytics core.

Every failure is raised synchronously to the immediate caller. Degenerate but
mathematically defined inputs (zero variance, no downside days) are not errors:
they produce documented sentinel values instead.
"""

from .data_quality import (
    AnalyticsError,
    DataInsufficientError,
    InsufficientDataError,
    InvalidInputError,
    LengthMismatchError,
)
from .system_failures import (
    IndicatorCalculationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "AnalyticsError",
    "DataInsufficientError",
    "InsufficientDataError",
    "InvalidInputError",
    "LengthMismatchError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
]
