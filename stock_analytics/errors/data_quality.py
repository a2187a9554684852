"""
Data quality error classifications for price and return series.

These exceptions describe inputs the analytics core refuses to compute on.
Callers decide whether to skip the symbol, retry with more data, or surface
a message to the user.
"""

from typing import Any, Optional


class AnalyticsError(Exception):
    """Base class for input problems detected by the analytics core."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class DataInsufficientError(AnalyticsError):
    """Fewer points than the longest lookback window requires."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


# Name used by the portfolio statistics callers
InsufficientDataError = DataInsufficientError


class LengthMismatchError(AnalyticsError):
    """Paired return/benchmark series of unequal length."""

    def __init__(self, message: str, left_length: Optional[int] = None,
                 right_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.left_length = left_length
        self.right_length = right_length


class InvalidInputError(AnalyticsError):
    """Non-finite, non-positive or out-of-order input values."""

    def __init__(self, message: str, index: Optional[int] = None,
                 field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.field = field
        self.value = value
