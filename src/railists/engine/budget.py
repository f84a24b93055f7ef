"""
Wish list budget.

Estimates how much money is needed to buy the wish list, by priority. Each
item counts with its highest quoted price; items without quotes count zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from railists.domain.enums import Priority
from railists.domain.wish_lists import WishList

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class WishListBudget:
    """
    Budget of a wish list snapshot, by priority.

    Attributes:
        amounts: Sum of the highest quoted prices, by priority. Priorities
            without items are absent and report zero.
    """

    amounts: dict[Priority, Decimal] = field(default_factory=dict)

    @classmethod
    def from_wish_list(cls, wish_list: WishList) -> WishListBudget:
        """Sum the highest quoted price of every item, grouped by priority."""
        amounts: dict[Priority, Decimal] = {}
        for item in wish_list:
            price_range = item.price_range()
            amount = price_range[1].price.amount if price_range else ZERO
            amounts[item.priority] = amounts.get(item.priority, ZERO) + amount

        logger.debug("Budget computed for %d wish list items", len(wish_list))
        return cls(amounts=amounts)

    def by_priority(self, priority: Priority) -> Decimal:
        """Budget for one priority; zero when no item has that priority."""
        return self.amounts.get(priority, ZERO)

    @property
    def total(self) -> Decimal:
        return sum(self.amounts.values(), ZERO)
