"""Unit tests for catalog items.

Tests cover:
- Category inference from rolling stocks
- Construction invariants (rolling stocks, count)
- Identity and ordering by (brand, item number)
"""

from __future__ import annotations

import pytest

from railists.contracts.errors import (
    ERROR_EMPTY_ROLLING_STOCKS,
    InvariantError,
    ValueOutOfRangeError,
)
from railists.domain.catalog_items import CatalogItem, extract_category
from railists.domain.enums import Category, Epoch, MultipleEpoch, PowerMethod
from railists.domain.scales import Scale
from railists.domain.values import Brand, ByQuarter, ItemNumber
from tests.fixtures.catalog import (
    catalog_item,
    freight_car,
    locomotive,
    passenger_car,
    train,
)


class TestCategoryInference:
    """Tests for extract_category and CatalogItem.category."""

    def test_single_locomotive(self) -> None:
        """Should classify a single locomotive as a locomotive."""
        assert catalog_item(locomotive()).category is Category.LOCOMOTIVE

    def test_same_category(self) -> None:
        """Should keep the category shared by every rolling stock."""
        item = catalog_item(passenger_car(), passenger_car(type_name="UIC-X"))

        assert item.category is Category.PASSENGER_CAR

    def test_mixed_categories_are_a_train(self) -> None:
        """Should classify mixed sets as trains."""
        item = catalog_item(locomotive(), passenger_car(), freight_car())

        assert item.category is Category.TRAIN
        assert not item.is_locomotive

    def test_order_does_not_matter(self) -> None:
        """Should not depend on the order of the rolling stocks."""
        stocks = [locomotive(), freight_car()]

        assert extract_category(stocks) == extract_category(reversed(stocks))

    def test_train(self) -> None:
        """Should classify a train as a train."""
        assert catalog_item(train()).category is Category.TRAIN


class TestInvariants:
    """Tests for CatalogItem construction checks."""

    def test_rejects_empty_rolling_stocks(self) -> None:
        """Should need at least one rolling stock."""
        with pytest.raises(InvariantError) as exc_info:
            CatalogItem(
                brand=Brand("ACME"),
                item_number=ItemNumber("60000"),
                description="Empty",
                rolling_stocks=(),
                power_method=PowerMethod.DC,
                scale=Scale.h0(),
            )

        assert exc_info.value.code == ERROR_EMPTY_ROLLING_STOCKS

    @pytest.mark.parametrize("count", [0, 256])
    def test_rejects_count_out_of_range(self, count: int) -> None:
        """Should need a count between 1 and 255."""
        with pytest.raises(ValueOutOfRangeError):
            catalog_item(locomotive(), count=count)

    @pytest.mark.parametrize("count", [1, 255])
    def test_count_bounds(self, count: int) -> None:
        """Should accept the count bounds."""
        assert catalog_item(locomotive(), count=count).count == count

    def test_rolling_stocks_become_a_tuple(self) -> None:
        """Should store rolling stocks as an immutable tuple."""
        item = CatalogItem(
            brand=Brand("ACME"),
            item_number=ItemNumber("60000"),
            description="List input",
            rolling_stocks=[locomotive()],
            power_method=PowerMethod.DC,
            scale=Scale.h0(),
        )

        assert isinstance(item.rolling_stocks, tuple)

    def test_delivery_date(self) -> None:
        """Should keep the delivery date."""
        item = catalog_item(locomotive(), delivery_date=ByQuarter(2024, 3))

        assert str(item.delivery_date) == "2024/Q3"


class TestIdentity:
    """Tests for equality, hashing and ordering."""

    def test_equal_by_brand_and_item_number(self) -> None:
        """Should ignore description and count."""
        first = catalog_item(locomotive(), description="One", count=1)
        second = catalog_item(freight_car(), description="Two", count=3)

        assert first == second
        assert hash(first) == hash(second)

    def test_different_item_numbers(self) -> None:
        """Should differ when item numbers differ."""
        assert catalog_item(item_number="1") != catalog_item(item_number="2")

    def test_ordering(self) -> None:
        """Should sort by brand, then item number."""
        items = [
            catalog_item(brand="Roco", item_number="1"),
            catalog_item(brand="ACME", item_number="2"),
            catalog_item(brand="ACME", item_number="1"),
        ]

        assert [str(item) for item in sorted(items)] == [
            "ACME 1 (L)",
            "ACME 2 (L)",
            "Roco 1 (L)",
        ]


class TestEpoch:
    """Tests for CatalogItem.epoch."""

    def test_shared_epoch(self) -> None:
        """Should return the epoch shared by every rolling stock."""
        item = catalog_item(locomotive(epoch=Epoch.IV), freight_car(epoch=Epoch.IV))

        assert item.epoch is Epoch.IV

    def test_shared_multiple_epoch(self) -> None:
        """Should compare multiple epochs by value."""
        pair = MultipleEpoch(Epoch.IV, Epoch.V)
        item = catalog_item(passenger_car(epoch=pair), passenger_car(epoch=Epoch.parse("V/IV")))

        assert item.epoch == pair

    def test_different_epochs(self) -> None:
        """Should return None when the epochs differ."""
        item = catalog_item(locomotive(epoch=Epoch.III), freight_car(epoch=Epoch.IV))

        assert item.epoch is None
