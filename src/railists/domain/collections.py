"""
Collections of purchased catalog items.

A collection stores a description, a version and the purchased items.
Everything else (statistics, depot roster) is derived on demand from a
collection snapshot by the engine.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from functools import total_ordering

from railists.domain.catalog_items import CatalogItem
from railists.domain.rolling_stocks import RollingStock
from railists.domain.values import Price


@dataclass(frozen=True)
class PurchasedInfo:
    """Where, when and for how much a catalog item was bought."""

    shop: str
    purchased_date: date
    price: Price

    def __str__(self) -> str:
        return (
            f"purchased at '{self.shop}' on {self.purchased_date.isoformat()} "
            f"for {self.price}"
        )


@total_ordering
@dataclass(frozen=True, eq=False)
class CollectionItem:
    """A catalog item together with its purchase data. Ordered by catalog item."""

    catalog_item: CatalogItem
    purchased_info: PurchasedInfo

    @property
    def rolling_stocks(self) -> tuple[RollingStock, ...]:
        return self.catalog_item.rolling_stocks

    @property
    def purchase_year(self) -> int:
        return self.purchased_info.purchased_date.year

    def price_info(self) -> tuple[Price, int]:
        """Return the purchase price and the purchase year."""
        return self.purchased_info.price, self.purchase_year

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CollectionItem):
            return NotImplemented
        return (
            self.catalog_item == other.catalog_item
            and self.purchased_info == other.purchased_info
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CollectionItem):
            return NotImplemented
        return self.catalog_item < other.catalog_item

    def __hash__(self) -> int:
        return hash((self.catalog_item, self.purchased_info))

    def __str__(self) -> str:
        return f"{self.catalog_item}, {self.purchased_info}"


@dataclass
class Collection:
    """
    A railway models collection.

    Items keep their insertion order until ``sort_items`` is called; duplicate
    catalog items are allowed and counted independently.

    Attributes:
        description: Collection description
        version: Document version, bumped on every modification
        modified_date: Last modification timestamp
        items: The collection items
    """

    description: str
    version: int
    modified_date: datetime
    items: list[CollectionItem] = field(default_factory=list)

    @classmethod
    def create_empty(cls, description: str) -> Collection:
        """Create an empty collection at version 1, modified now."""
        return cls(description=description, version=1, modified_date=datetime.now())

    def add_item(self, catalog_item: CatalogItem, purchased_info: PurchasedInfo) -> None:
        """Append a purchased catalog item."""
        self.items.append(CollectionItem(catalog_item, purchased_info))

    def set_modified(self, new_version: int, modified_date: datetime) -> None:
        """Update the modification fields (version and modified date)."""
        self.version = new_version
        self.modified_date = modified_date

    def bump_version(self) -> None:
        """Increment the version and set the modified date to now."""
        self.set_modified(self.version + 1, datetime.now())

    def sort_items(self) -> None:
        """Sort items in place by brand and item number (stable)."""
        self.items.sort()

    def get(self, index: int) -> CollectionItem | None:
        """Return the item at ``index``, or None when out of range."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def __getitem__(self, index: int) -> CollectionItem:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CollectionItem]:
        return iter(self.items)

    def __str__(self) -> str:
        lines = [
            "Collection",
            f"- version: {self.version},",
            f"- size: {len(self)} items,",
            f"- last modified: {self.modified_date}",
            "items:",
        ]
        lines.extend(f"  - {item}" for item in self.items)
        return "\n".join(lines)
