"""
Currency configuration for prices.

Prices in collection and wish list documents are written as
``"<amount> <suffix>"`` where the suffix is informative only: every parsed
price is recorded in the default currency. This module is the single place
that names the currencies the domain accepts.

Usage:
    from railists.config import DEFAULT_CURRENCY, is_supported_currency

    if not is_supported_currency("USD"):
        ...

To add a currency:
    Extend SUPPORTED_CURRENCIES. Summing prices still yields the default
    currency, so mixed currency collections are not aggregated correctly.
"""

from __future__ import annotations


# =============================================================================
# SUPPORTED CURRENCIES
# =============================================================================

# ISO 4217 code used for every parsed price
DEFAULT_CURRENCY: str = "EUR"

SUPPORTED_CURRENCIES: frozenset[str] = frozenset({DEFAULT_CURRENCY})


def is_supported_currency(code: str) -> bool:
    """Check whether a currency code can be attached to a Price."""
    return code in SUPPORTED_CURRENCIES
