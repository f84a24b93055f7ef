"""
Wish lists.

A wish list holds catalog items that are not owned yet, each with a
priority and the prices quoted by one or more shops.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from functools import total_ordering

from railists.domain.catalog_items import CatalogItem
from railists.domain.enums import Priority
from railists.domain.values import Price


@total_ordering
@dataclass(frozen=True, eq=False)
class PriceInfo:
    """A price quoted by a shop. Ordered by price, then by shop name."""

    shop: str
    price: Price

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriceInfo):
            return NotImplemented
        return self.shop == other.shop and self.price == other.price

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PriceInfo):
            return NotImplemented
        return (self.price, self.shop) < (other.price, other.shop)

    def __hash__(self) -> int:
        return hash((self.shop, self.price))

    def __str__(self) -> str:
        return f"{self.price} at '{self.shop}'"


@total_ordering
@dataclass(frozen=True, eq=False)
class WishListItem:
    """A wished catalog item with priority and shop prices."""

    catalog_item: CatalogItem
    priority: Priority = Priority.NORMAL
    prices: tuple[PriceInfo, ...] = ()

    def price_range(self) -> tuple[PriceInfo, PriceInfo] | None:
        """
        Return the (cheapest, priciest) quotes, or None without prices.

        When several quotes share the lowest or highest price, the first one
        in list order is returned.
        """
        if not self.prices:
            return None
        cheapest = min(self.prices, key=lambda info: info.price)
        priciest = max(self.prices, key=lambda info: info.price)
        return cheapest, priciest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WishListItem):
            return NotImplemented
        return (
            self.catalog_item == other.catalog_item
            and self.priority == other.priority
            and self.prices == other.prices
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WishListItem):
            return NotImplemented
        return self.catalog_item < other.catalog_item

    def __hash__(self) -> int:
        return hash((self.catalog_item, self.priority, self.prices))


@dataclass
class WishList:
    """
    A named list of wished catalog items.

    Attributes:
        name: Wish list name
        version: Document version
        modified_at: Last modification timestamp, when known
        items: The wish list items, in insertion order until sorted
    """

    name: str
    version: int
    modified_at: datetime | None = None
    items: list[WishListItem] = field(default_factory=list)

    def add_item(
        self,
        catalog_item: CatalogItem,
        priority: Priority | None = None,
        prices: Iterable[PriceInfo] = (),
    ) -> None:
        """Append an item; a missing priority defaults to NORMAL."""
        self.items.append(
            WishListItem(
                catalog_item=catalog_item,
                priority=priority if priority is not None else Priority.default(),
                prices=tuple(prices),
            )
        )

    def sort_items(self) -> None:
        """Sort items in place by brand and item number (stable)."""
        self.items.sort()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WishListItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> WishListItem:
        return self.items[index]
