"""
Price data model and input preprocessing.

Defines the immutable PricePoint record consumed by both analytics components
and the validation applied before any calculation runs.
"""

from .models import PricePoint
from .validators import closes, validate_price_series

__all__ = ["PricePoint", "closes", "validate_price_series"]
