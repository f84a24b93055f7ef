"""Unit tests for the collection statistics aggregator.

Tests cover:
- Grouping by purchase year and category
- Counting catalog item counts and summing prices once per item
- Totals across years
- Exact decimal sums for any precision or magnitude
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from railists.contracts.protocols import StatsAggregatorProtocol
from railists.domain.enums import Category
from railists.engine.aggregator import (
    CategoryStats,
    CollectionStats,
    CollectionStatsAggregator,
)
from tests.fixtures.catalog import (
    catalog_item,
    collection_of,
    freight_car,
    locomotive,
    passenger_car,
    purchased,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def two_year_collection():
    """A locomotive bought in 2020 and two coaches bought in 2021."""
    return collection_of(
        (catalog_item(locomotive(), item_number="1"), purchased("100", date(2020, 1, 1))),
        (
            catalog_item(passenger_car(), item_number="2", count=2),
            purchased("50", date(2021, 1, 1)),
        ),
    )


# =============================================================================
# Aggregation
# =============================================================================


class TestCollectionStats:
    """Tests for CollectionStats.from_collection."""

    def test_years_in_order(self, two_year_collection) -> None:
        """Should produce one entry per purchase year, ascending."""
        stats = CollectionStats.from_collection(two_year_collection)

        assert [yearly.year for yearly in stats.values_by_year] == [2020, 2021]

    def test_yearly_values(self, two_year_collection) -> None:
        """Should count and value each category in its year."""
        stats = CollectionStats.from_collection(two_year_collection)
        y2020, y2021 = stats.values_by_year

        assert y2020.locomotives == CategoryStats(1, Decimal("100"))
        assert y2020.passenger_cars == CategoryStats(0, Decimal("0"))
        assert y2021.passenger_cars == CategoryStats(2, Decimal("50"))
        assert y2021.locomotives.count == 0

    def test_totals(self, two_year_collection) -> None:
        """Should sum every year."""
        stats = CollectionStats.from_collection(two_year_collection)

        assert stats.size == 2
        assert stats.number_of_rolling_stocks == 3
        assert stats.total_value == Decimal("150")
        assert stats.number_of_locomotives == 1
        assert stats.locomotives_value == Decimal("100")
        assert stats.number_of_passenger_cars == 2
        assert stats.passenger_cars_value == Decimal("50")
        assert stats.number_of_trains == 0
        assert stats.number_of_freight_cars == 0

    def test_first_item_of_a_year_counted_once(self) -> None:
        """Should not double the first item of each year."""
        collection = collection_of(
            (catalog_item(freight_car(), item_number="1"), purchased("10", date(2019, 3, 1))),
            (catalog_item(freight_car(), item_number="2"), purchased("20", date(2019, 4, 1))),
        )

        stats = CollectionStats.from_collection(collection)

        assert stats.values_by_year[0].freight_cars == CategoryStats(2, Decimal("30"))

    def test_price_counted_once_per_item(self) -> None:
        """Should not multiply the price by the count."""
        collection = collection_of(
            (catalog_item(freight_car(), count=5), purchased("60", date(2019, 3, 1))),
        )

        stats = CollectionStats.from_collection(collection)

        assert stats.totals.freight_cars == CategoryStats(5, Decimal("60"))

    def test_mixed_set_counts_as_train(self) -> None:
        """Should classify items by their catalog item category."""
        collection = collection_of(
            (catalog_item(locomotive(), freight_car()), purchased("215.50")),
        )

        stats = CollectionStats.from_collection(collection)

        assert stats.totals.trains == CategoryStats(1, Decimal("215.50"))
        assert stats.number_of_locomotives == 0

    def test_exact_decimal_sums(self) -> None:
        """Should sum prices with different scales exactly."""
        collection = collection_of(
            (catalog_item(item_number="1"), purchased("0.1")),
            (catalog_item(item_number="2"), purchased("0.25")),
            (catalog_item(item_number="3"), purchased("10")),
        )

        stats = CollectionStats.from_collection(collection)

        assert stats.total_value == Decimal("10.35")

    def test_high_precision_next_to_large_amount(self) -> None:
        """Should sum very precise and very large prices without overflow."""
        collection = collection_of(
            (catalog_item(item_number="1"), purchased("0.000000000000001")),
            (catalog_item(item_number="2"), purchased("10000")),
            (catalog_item(item_number="3"), purchased("1000000000")),
        )

        stats = CollectionStats.from_collection(collection)

        assert stats.total_value == Decimal("1000010000.000000000000001")
        assert stats.values_by_year[0].locomotives.count == 3

    def test_empty_collection(self) -> None:
        """Should produce empty statistics."""
        stats = CollectionStats.from_collection(collection_of())

        assert stats.size == 0
        assert stats.values_by_year == []
        assert stats.total_value == Decimal("0")
        assert stats.number_of_rolling_stocks == 0

    def test_source_is_not_modified(self, two_year_collection) -> None:
        """Should not reorder or change the collection."""
        before = [str(item) for item in two_year_collection]

        CollectionStats.from_collection(two_year_collection)

        assert [str(item) for item in two_year_collection] == before


class TestCategoryAccess:
    """Tests for by_category accessors."""

    def test_by_category(self, two_year_collection) -> None:
        """Should return the stats of a category."""
        stats = CollectionStats.from_collection(two_year_collection)

        assert stats.totals.by_category(Category.PASSENGER_CAR).count == 2
        assert stats.values_by_year[0].by_category(Category.LOCOMOTIVE).value == Decimal("100")

    def test_yearly_total(self, two_year_collection) -> None:
        """Should sum the categories of a year."""
        stats = CollectionStats.from_collection(two_year_collection)

        assert stats.values_by_year[1].total == CategoryStats(2, Decimal("50"))
        assert stats.values_by_year[1].number_of_rolling_stocks == 2
        assert stats.values_by_year[1].total_value == Decimal("50")


class TestCollectionStatsAggregator:
    """Tests for the aggregator component."""

    def test_implements_protocol(self) -> None:
        """Should satisfy StatsAggregatorProtocol."""
        assert isinstance(CollectionStatsAggregator(), StatsAggregatorProtocol)
