"""
Delivery date bounds.

Delivery dates are announced by manufacturers as a year (``2024``) or a year
and quarter (``2024/Q3``). Years are accepted only inside the inclusive range
below.
"""

from __future__ import annotations


MIN_DELIVERY_YEAR: int = 1900
MAX_DELIVERY_YEAR: int = 2999

MIN_QUARTER: int = 1
MAX_QUARTER: int = 4


def is_valid_delivery_year(year: int) -> bool:
    """Check a delivery year against the inclusive bounds."""
    return MIN_DELIVERY_YEAR <= year <= MAX_DELIVERY_YEAR
