"""
System failure error classifications.

These represent defects inside the analytics core rather than bad input,
and are never recoverable by retrying with the same data.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable internal failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IndicatorCalculationError(SystemFailureError):
    """Unexpected error inside a single indicator calculation."""

    def __init__(self, message: str, indicator: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
        self.calculation_input = calculation_input
