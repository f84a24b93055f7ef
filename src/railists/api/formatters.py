"""
Report formatting utilities for the collection manager API.

ReportFormatter: Builds the report tables as polars DataFrames of text
render_table: Renders a report table for the terminal

Every table column is a string so that the rendered output matches what
the user reads, independent of the numeric types used to compute it.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import polars as pl

from railists.contracts.config import ReportOptions
from railists.data.schemas import (
    BUDGET_TABLE_COLUMNS,
    COLLECTION_TABLE_COLUMNS,
    DEPOT_TABLE_COLUMNS,
    STATS_TABLE_COLUMNS,
    WISH_LIST_TABLE_COLUMNS,
    text_schema,
)
from railists.domain.enums import Category, Priority

if TYPE_CHECKING:
    from railists.domain.collections import Collection
    from railists.domain.wish_lists import WishList, WishListItem
    from railists.engine.aggregator import CategoryStats, CollectionStats
    from railists.engine.budget import WishListBudget
    from railists.engine.depot import Depot

_STATS_CATEGORIES = (
    Category.LOCOMOTIVE,
    Category.TRAIN,
    Category.PASSENGER_CAR,
    Category.FREIGHT_CAR,
)


# =============================================================================
# Report Formatter
# =============================================================================


class ReportFormatter:
    """
    Formats domain snapshots as report tables and summary lines.

    The formatter never sorts or modifies its input: callers sort the
    collection or wish list before formatting it.

    Usage:
        formatter = ReportFormatter()
        table = formatter.collection_table(collection)
        print(render_table(table))
    """

    def __init__(self, options: ReportOptions | None = None) -> None:
        self.options = options or ReportOptions()

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def collection_table(self, collection: Collection) -> pl.DataFrame:
        """One row per collection item, numbered from 1."""
        rows = []
        for index, item in enumerate(collection, start=1):
            catalog_item = item.catalog_item
            purchased_info = item.purchased_info
            rows.append({
                "#": str(index),
                "Brand": catalog_item.brand.name,
                "Item number": catalog_item.item_number.value,
                "Scale": catalog_item.scale.name,
                "PM": catalog_item.power_method.value,
                "Cat.": catalog_item.category.symbol,
                "Description": self.options.truncate(catalog_item.description),
                "Count": str(catalog_item.count),
                "Added": purchased_info.purchased_date.strftime(self.options.date_format),
                "Price": self._money(purchased_info.price.amount),
                "Shop": purchased_info.shop,
            })
        return pl.DataFrame(rows, schema=text_schema(COLLECTION_TABLE_COLUMNS))

    def collection_summary(self, collection: Collection) -> list[str]:
        modified = collection.modified_date.strftime(self.options.date_format)
        return [
            f"{collection.description} (version {collection.version}, modified {modified})",
            f"{len(collection)} item(s)",
        ]

    def stats_table(self, stats: CollectionStats) -> pl.DataFrame:
        """One row per purchase year followed by a TOTAL row."""
        rows = [
            self._stats_row(str(yearly.year), yearly.by_category, yearly.total)
            for yearly in stats.values_by_year
        ]
        rows.append(self._stats_row("TOTAL", stats.totals.by_category, stats.totals.total))
        return pl.DataFrame(rows, schema=text_schema(STATS_TABLE_COLUMNS))

    def stats_summary(self, stats: CollectionStats) -> list[str]:
        return [
            f"Total value........... {stats.total_value:.2f} {self.options.currency}",
            f"Rolling stocks/sets... {stats.size}",
        ]

    def depot_table(self, depot: Depot) -> pl.DataFrame:
        """One row per locomotive card, in depot order."""
        rows = [
            {
                "#": str(index),
                "Class name": card.class_name,
                "Road number": card.road_number,
                "Series": card.series or "",
                "Livery": card.livery or "",
                "Brand": card.brand,
                "Item Number": card.item_number.value,
                "With decoder": "Y" if card.with_decoder else "N",
                "DCC": card.dcc_interface.value if card.dcc_interface else "",
            }
            for index, card in enumerate(depot, start=1)
        ]
        return pl.DataFrame(rows, schema=text_schema(DEPOT_TABLE_COLUMNS))

    def depot_summary(self, depot: Depot) -> list[str]:
        return [f"{len(depot)} locomotive(s)"]

    # -------------------------------------------------------------------------
    # Wish lists
    # -------------------------------------------------------------------------

    def wish_list_table(self, wish_list: WishList) -> pl.DataFrame:
        """One row per wish list item, with the range of quoted prices."""
        rows = []
        for index, item in enumerate(wish_list, start=1):
            catalog_item = item.catalog_item
            rows.append({
                "#": str(index),
                "Brand": catalog_item.brand.name,
                "Item number": catalog_item.item_number.value,
                "Cat.": catalog_item.category.symbol,
                "Priority": item.priority.label,
                "Scale": catalog_item.scale.name,
                "PM": catalog_item.power_method.value,
                "Description": self.options.truncate(catalog_item.description),
                "Count": str(catalog_item.count),
                "Price range": self._price_range(item),
            })
        return pl.DataFrame(rows, schema=text_schema(WISH_LIST_TABLE_COLUMNS))

    def wish_list_summary(self, wish_list: WishList) -> list[str]:
        return [
            f"{wish_list.name} (version {wish_list.version})",
            f"{len(wish_list)} item(s)",
        ]

    def budget_table(self, budget: WishListBudget) -> pl.DataFrame:
        """One row per priority, from high to low, followed by a TOTAL row."""
        rows = [
            {"Priority": priority.label, "Budget (EUR)": self._money(budget.by_priority(priority))}
            for priority in Priority
        ]
        rows.append({"Priority": "TOTAL", "Budget (EUR)": self._money(budget.total)})
        return pl.DataFrame(rows, schema=text_schema(BUDGET_TABLE_COLUMNS))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _stats_row(self, label: str, by_category, total: CategoryStats) -> dict[str, str]:
        row = {"Year": label}
        for category in _STATS_CATEGORIES:
            category_stats = by_category(category)
            row[f"{category.label} (no.)"] = str(category_stats.count)
            row[f"{category.label} (EUR)"] = self._money(category_stats.value)
        row["Total (no.)"] = str(total.count)
        row["Total (EUR)"] = self._money(total.value)
        return row

    def _price_range(self, item: WishListItem) -> str:
        price_range = item.price_range()
        if price_range is None:
            return "-"
        lowest, highest = price_range
        return f"from {lowest.price} to {highest.price}"

    @staticmethod
    def _money(amount: Decimal) -> str:
        return f"{amount:.2f}"


# =============================================================================
# Rendering
# =============================================================================


def render_table(frame: pl.DataFrame, max_width: int = 250) -> str:
    """
    Render a report table as text, without truncating rows or columns.

    Args:
        frame: Report table built by ReportFormatter
        max_width: Maximum table width in characters

    Returns:
        The table as printed by polars
    """
    with pl.Config(
        tbl_rows=-1,
        tbl_cols=-1,
        tbl_hide_column_data_types=True,
        tbl_hide_dataframe_shape=True,
        fmt_str_lengths=max_width,
        tbl_width_chars=max_width,
    ):
        return str(frame)
