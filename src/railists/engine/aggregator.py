"""
Collection statistics aggregator.

Rolls a collection snapshot up by purchase year and category:

    Collection -> purchases frame (one row per item)
               -> group_by(year, category) -> YearlyCollectionStats
               -> StatisticsTotals (sum over every year)

Each item contributes its catalog item ``count`` (a set counted as 2 adds
2) and its purchase price once. Items are classified by the catalog item
category, so a mixed set is counted under trains.

Classes:
    CategoryStats: (count, value) pair for one category
    YearlyCollectionStats: Per-year statistics
    StatisticsTotals: Statistics across all years
    CollectionStats: The complete report
    CollectionStatsAggregator: Builds CollectionStats with polars

Usage:
    from railists.engine.aggregator import CollectionStats

    stats = CollectionStats.from_collection(collection)
    stats.totals.locomotives.count
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

import polars as pl

from railists.data.schemas import PURCHASES_SCHEMA, YEARLY_CATEGORY_TOTALS_SCHEMA
from railists.domain.collections import Collection
from railists.domain.enums import Category

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


# =============================================================================
# Result Types
# =============================================================================


@dataclass(frozen=True)
class CategoryStats:
    """Number of rolling stocks and money spent for one category."""

    count: int = 0
    value: Decimal = ZERO

    def __add__(self, other: CategoryStats) -> CategoryStats:
        return CategoryStats(self.count + other.count, self.value + other.value)


@dataclass(frozen=True)
class YearlyCollectionStats:
    """Statistics for the items purchased in one year."""

    year: int
    locomotives: CategoryStats = field(default_factory=CategoryStats)
    trains: CategoryStats = field(default_factory=CategoryStats)
    passenger_cars: CategoryStats = field(default_factory=CategoryStats)
    freight_cars: CategoryStats = field(default_factory=CategoryStats)

    @property
    def total(self) -> CategoryStats:
        return self.locomotives + self.trains + self.passenger_cars + self.freight_cars

    @property
    def number_of_rolling_stocks(self) -> int:
        return self.total.count

    @property
    def total_value(self) -> Decimal:
        return self.total.value

    def by_category(self, category: Category) -> CategoryStats:
        return getattr(self, _CATEGORY_FIELDS[category])


@dataclass(frozen=True)
class StatisticsTotals:
    """Statistics summed over every purchase year."""

    locomotives: CategoryStats = field(default_factory=CategoryStats)
    trains: CategoryStats = field(default_factory=CategoryStats)
    passenger_cars: CategoryStats = field(default_factory=CategoryStats)
    freight_cars: CategoryStats = field(default_factory=CategoryStats)

    @classmethod
    def from_years(cls, values_by_year: list[YearlyCollectionStats]) -> StatisticsTotals:
        totals = cls()
        for yearly in values_by_year:
            totals = cls(
                locomotives=totals.locomotives + yearly.locomotives,
                trains=totals.trains + yearly.trains,
                passenger_cars=totals.passenger_cars + yearly.passenger_cars,
                freight_cars=totals.freight_cars + yearly.freight_cars,
            )
        return totals

    @property
    def total(self) -> CategoryStats:
        return self.locomotives + self.trains + self.passenger_cars + self.freight_cars

    @property
    def number_of_rolling_stocks(self) -> int:
        return self.total.count

    @property
    def total_value(self) -> Decimal:
        return self.total.value

    def by_category(self, category: Category) -> CategoryStats:
        return getattr(self, _CATEGORY_FIELDS[category])


_CATEGORY_FIELDS = {
    Category.LOCOMOTIVE: "locomotives",
    Category.TRAIN: "trains",
    Category.PASSENGER_CAR: "passenger_cars",
    Category.FREIGHT_CAR: "freight_cars",
}


@dataclass(frozen=True)
class CollectionStats:
    """
    Statistics for a collection snapshot.

    The report does not keep a reference to the collection: rebuild it
    after the collection changes.

    Attributes:
        size: Number of entries in the collection
        values_by_year: Per-year statistics, ordered by year
        totals: Statistics across all years
    """

    size: int
    values_by_year: list[YearlyCollectionStats]
    totals: StatisticsTotals

    @classmethod
    def from_collection(cls, collection: Collection) -> CollectionStats:
        """Compute statistics for a collection."""
        return CollectionStatsAggregator().aggregate(collection)

    @property
    def total_value(self) -> Decimal:
        return self.totals.total_value

    @property
    def number_of_rolling_stocks(self) -> int:
        return self.totals.number_of_rolling_stocks

    @property
    def number_of_locomotives(self) -> int:
        return self.totals.locomotives.count

    @property
    def locomotives_value(self) -> Decimal:
        return self.totals.locomotives.value

    @property
    def number_of_trains(self) -> int:
        return self.totals.trains.count

    @property
    def trains_value(self) -> Decimal:
        return self.totals.trains.value

    @property
    def number_of_passenger_cars(self) -> int:
        return self.totals.passenger_cars.count

    @property
    def passenger_cars_value(self) -> Decimal:
        return self.totals.passenger_cars.value

    @property
    def number_of_freight_cars(self) -> int:
        return self.totals.freight_cars.count

    @property
    def freight_cars_value(self) -> Decimal:
        return self.totals.freight_cars.value


# =============================================================================
# Aggregator Implementation
# =============================================================================


class CollectionStatsAggregator:
    """
    Build CollectionStats from a collection.

    Implements StatsAggregatorProtocol. Purchases are grouped by polars;
    the prices of each group are carried as Decimal text and summed as
    Decimal, so totals are exact whatever the magnitude or precision.
    """

    def aggregate(self, collection: Collection) -> CollectionStats:
        """
        Compute per-year and total statistics.

        Args:
            collection: The collection snapshot (not modified)

        Returns:
            CollectionStats with years in ascending order
        """
        purchases = self._purchases_frame(collection)

        grouped = (
            purchases.group_by(["year", "category"])
            .agg(
                pl.col("count").sum(),
                pl.col("amount").alias("amounts"),
            )
            .cast(YEARLY_CATEGORY_TOTALS_SCHEMA)
            .sort(["year", "category"])
        )

        values_by_year = self._yearly_stats(grouped)
        logger.debug(
            "Grouped %d collection items into %d purchase years",
            len(collection),
            len(values_by_year),
        )

        return CollectionStats(
            size=len(collection),
            values_by_year=values_by_year,
            totals=StatisticsTotals.from_years(values_by_year),
        )

    @staticmethod
    def _purchases_frame(collection: Collection) -> pl.DataFrame:
        rows = [
            {
                "year": item.purchase_year,
                "category": item.catalog_item.category.value,
                "count": item.catalog_item.count,
                "amount": str(item.purchased_info.price.amount),
            }
            for item in collection
        ]
        return pl.DataFrame(rows, schema=PURCHASES_SCHEMA)

    @staticmethod
    def _yearly_stats(grouped: pl.DataFrame) -> list[YearlyCollectionStats]:
        by_year: dict[int, dict[str, CategoryStats]] = {}
        for row in grouped.iter_rows(named=True):
            category = Category(row["category"])
            by_year.setdefault(row["year"], {})[_CATEGORY_FIELDS[category]] = CategoryStats(
                count=row["count"],
                value=sum((Decimal(amount) for amount in row["amounts"]), ZERO),
            )

        return [
            YearlyCollectionStats(year=year, **categories)
            for year, categories in sorted(by_year.items())
        ]
