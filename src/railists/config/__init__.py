"""Configuration module for the collection manager."""

from .currencies import (
    DEFAULT_CURRENCY,
    SUPPORTED_CURRENCIES,
    is_supported_currency,
)
from .delivery import (
    MAX_DELIVERY_YEAR,
    MIN_DELIVERY_YEAR,
    is_valid_delivery_year,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "is_supported_currency",
    "MAX_DELIVERY_YEAR",
    "MIN_DELIVERY_YEAR",
    "is_valid_delivery_year",
]
