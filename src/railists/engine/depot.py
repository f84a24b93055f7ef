"""
Locomotive depot roster.

The depot lists every locomotive owned, including locomotives sold inside
sets: a catalog item with two locomotives and a wagon gives two cards.
Cards are sorted by (class name, road number).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import total_ordering

from railists.domain.catalog_items import CatalogItem
from railists.domain.collections import Collection
from railists.domain.enums import DccInterface
from railists.domain.rolling_stocks import Locomotive
from railists.domain.values import ItemNumber

logger = logging.getLogger(__name__)


@total_ordering
@dataclass(frozen=True, eq=False)
class DepotCard:
    """
    The basic info for a model locomotive.

    Equality and ordering use only the class name and the road number.
    """

    class_name: str
    road_number: str
    brand: str
    item_number: ItemNumber
    series: str | None = None
    livery: str | None = None
    with_decoder: bool = False
    dcc_interface: DccInterface | None = None

    @classmethod
    def from_locomotive(cls, locomotive: Locomotive, catalog_item: CatalogItem) -> DepotCard:
        return cls(
            class_name=locomotive.class_name,
            road_number=locomotive.road_number,
            brand=catalog_item.brand.name,
            item_number=catalog_item.item_number,
            series=locomotive.series,
            livery=locomotive.livery,
            with_decoder=locomotive.with_decoder,
            dcc_interface=locomotive.dcc_interface,
        )

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.class_name, self.road_number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DepotCard):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DepotCard):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)


@dataclass(frozen=True)
class Depot:
    """Sorted roster of the locomotives in a collection snapshot."""

    locomotives: list[DepotCard] = field(default_factory=list)

    @classmethod
    def from_collection(cls, collection: Collection) -> Depot:
        """
        Build the roster for a collection.

        Args:
            collection: The collection snapshot (not modified)

        Returns:
            Depot with one card per locomotive rolling stock
        """
        cards = [
            DepotCard.from_locomotive(rolling_stock, item.catalog_item)
            for item in collection
            for rolling_stock in item.rolling_stocks
            if isinstance(rolling_stock, Locomotive)
        ]
        cards.sort()

        logger.debug("Depot built with %d locomotive cards", len(cards))
        return cls(locomotives=cards)

    def __len__(self) -> int:
        return len(self.locomotives)

    def __iter__(self) -> Iterator[DepotCard]:
        return iter(self.locomotives)
