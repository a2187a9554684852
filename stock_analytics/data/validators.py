"""
Price series validation.

Runs before every indicator or portfolio calculation so that downstream math
only ever sees finite, positive prices in strictly increasing date order.
"""

import math
from collections.abc import Sequence
from typing import Optional

from ..errors import DataInsufficientError, InvalidInputError
from .models import PricePoint

_PRICE_FIELDS = ("open", "high", "low", "close")


def _check_finite(value: float, index: int, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(
            f"Invalid {field} type at index {index}: {type(value).__name__}",
            index=index, field=field, value=value
        )
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(
            f"Non-finite {field} at index {index}: {value}",
            index=index, field=field, value=value
        )


def validate_price_series(
    prices: Sequence[PricePoint],
    min_length: Optional[int] = None,
) -> list[PricePoint]:
    """
    Validate a price series and return it as a list.

    Args:
        prices: Chronologically ascending price points
        min_length: Minimum number of points required, if any

    Returns:
        The validated points as a new list

    Raises:
        DataInsufficientError: If fewer than ``min_length`` points are supplied
        InvalidInputError: On non-finite or non-positive prices, negative volume,
            high below low, or dates that are not strictly increasing
    """
    points = list(prices)
    required = max(min_length or 0, 1)

    if len(points) < required:
        raise DataInsufficientError(
            f"Insufficient price data: {required} points required, {len(points)} available",
            required_count=required,
            available_count=len(points)
        )

    previous_date = None
    for index, point in enumerate(points):
        for field in _PRICE_FIELDS:
            value = getattr(point, field)
            _check_finite(value, index, field)
            if value <= 0:
                raise InvalidInputError(
                    f"Non-positive {field} at index {index}: {value}",
                    index=index, field=field, value=value
                )

        _check_finite(point.volume, index, "volume")
        if point.volume < 0:
            raise InvalidInputError(
                f"Negative volume at index {index}: {point.volume}",
                index=index, field="volume", value=point.volume
            )

        # OHLC consistency
        if point.high < max(point.open, point.close, point.low):
            raise InvalidInputError(
                f"High price below open/close/low at index {index}",
                index=index, field="high", value=point.high
            )
        if point.low > min(point.open, point.close):
            raise InvalidInputError(
                f"Low price above open/close at index {index}",
                index=index, field="low", value=point.low
            )

        if previous_date is not None:
            try:
                out_of_order = point.date <= previous_date
            except TypeError as e:
                raise InvalidInputError(
                    f"Date at index {index} is not comparable with the previous date "
                    f"(mixed timezone-aware and naive datetimes?)",
                    index=index, field="date", value=point.date
                ) from e
            if out_of_order:
                raise InvalidInputError(
                    f"Dates must be strictly increasing (index {index})",
                    index=index, field="date", value=point.date
                )
        previous_date = point.date

    return points


def closes(prices: Sequence[PricePoint]) -> list[float]:
    """Closing prices of a series."""
    return [point.close for point in prices]
