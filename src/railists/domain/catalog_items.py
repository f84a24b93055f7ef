"""
Catalog items.

A catalog item is a purchasable product identified by brand and item
number. It bundles one or more rolling stocks; its category is inferred
from them when the item is built.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering

from railists.contracts.errors import (
    ERROR_EMPTY_ROLLING_STOCKS,
    InvariantError,
    ValueOutOfRangeError,
)
from railists.domain.enums import Category, Epoch, MultipleEpoch, PowerMethod
from railists.domain.rolling_stocks import RollingStock
from railists.domain.scales import Scale
from railists.domain.values import Brand, DeliveryDate, ItemNumber

MIN_COUNT = 1
MAX_COUNT = 255


def extract_category(rolling_stocks: Iterable[RollingStock]) -> Category:
    """
    Infer the category of a catalog item from its rolling stocks.

    One distinct category is the item category; anything else is a train set.
    """
    categories = {rolling_stock.category for rolling_stock in rolling_stocks}
    if len(categories) == 1:
        return next(iter(categories))
    return Category.TRAIN


@total_ordering
@dataclass(frozen=True, eq=False)
class CatalogItem:
    """
    A catalog item, containing one or more rolling stocks.

    Equality, hashing and ordering use only (brand, item_number): the
    description, count and every other attribute are not part of the
    identity.

    Attributes:
        brand: The manufacturer
        item_number: Item number in the brand catalog
        description: Free text description
        rolling_stocks: The rolling stocks sold under this item number
        power_method: DC or AC
        scale: The model scale
        count: How many identical units or sets this item represents
        delivery_date: Announced delivery date, if any
        category: Inferred from the rolling stocks at construction time
    """

    brand: Brand
    item_number: ItemNumber
    description: str
    rolling_stocks: tuple[RollingStock, ...]
    power_method: PowerMethod
    scale: Scale
    count: int = 1
    delivery_date: DeliveryDate | None = None
    category: Category = field(init=False)

    def __post_init__(self) -> None:
        rolling_stocks = tuple(self.rolling_stocks)
        if not rolling_stocks:
            raise InvariantError(
                f"Catalog item {self.brand} {self.item_number} has no rolling stocks",
                code=ERROR_EMPTY_ROLLING_STOCKS,
                field_name="rollingStocks",
            )
        if not MIN_COUNT <= self.count <= MAX_COUNT:
            raise ValueOutOfRangeError(
                f"Count must be between {MIN_COUNT} and {MAX_COUNT}",
                field_name="count",
                actual_value=str(self.count),
            )

        object.__setattr__(self, "rolling_stocks", rolling_stocks)
        object.__setattr__(self, "category", extract_category(rolling_stocks))

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.brand.name, self.item_number.value)

    @property
    def is_locomotive(self) -> bool:
        return self.category is Category.LOCOMOTIVE

    @property
    def epoch(self) -> Epoch | MultipleEpoch | None:
        """The epoch shared by every rolling stock, or None when they differ."""
        epochs = {rolling_stock.epoch for rolling_stock in self.rolling_stocks}
        if len(epochs) == 1:
            return next(iter(epochs))
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        return f"{self.brand} {self.item_number} ({self.category.symbol})"
