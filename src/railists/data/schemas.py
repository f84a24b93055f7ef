"""
This module contains the schemas for every frame built by railists.

Aggregation Frames:
- Purchases                 # One row per collection item: year, category, count, amount
- Yearly_category_totals    # Purchases grouped by (year, category)

Export Frames:
- Collection_csv            # CSV export of a collection (fixed header order)

Report Tables (every column rendered as text):
- Collection_table          # Collection listing
- Wish_list_table           # Wish list listing with price ranges
- Depot_table               # Locomotive roster
- Stats_table               # Yearly statistics with a TOTAL row
- Budget_table              # Wish list budget by priority

Amounts are carried through polars as Decimal text and summed as Decimal
when the aggregation results are read, so sums are exact for any price.
"""

import polars as pl

PURCHASES_SCHEMA = {
    "year": pl.Int32,
    "category": pl.String,
    "count": pl.Int64,
    "amount": pl.String,
}

YEARLY_CATEGORY_TOTALS_SCHEMA = {
    "year": pl.Int32,
    "category": pl.String,
    "count": pl.Int64,
    "amounts": pl.List(pl.String),
}

COLLECTION_CSV_SCHEMA = {
    "Brand": pl.String,
    "ItemNumber": pl.String,
    "Category": pl.String,
    "Description": pl.String,
    "Epoch": pl.String,
    "Shop": pl.String,
    "Date": pl.String,
    "Count": pl.Int64,
    "Price": pl.String,
}

COLLECTION_TABLE_COLUMNS = [
    "#",
    "Brand",
    "Item number",
    "Scale",
    "PM",
    "Cat.",
    "Description",
    "Count",
    "Added",
    "Price",
    "Shop",
]

WISH_LIST_TABLE_COLUMNS = [
    "#",
    "Brand",
    "Item number",
    "Cat.",
    "Priority",
    "Scale",
    "PM",
    "Description",
    "Count",
    "Price range",
]

DEPOT_TABLE_COLUMNS = [
    "#",
    "Class name",
    "Road number",
    "Series",
    "Livery",
    "Brand",
    "Item Number",
    "With decoder",
    "DCC",
]

STATS_TABLE_COLUMNS = [
    "Year",
    "Locomotives (no.)",
    "Locomotives (EUR)",
    "Trains (no.)",
    "Trains (EUR)",
    "Passenger Cars (no.)",
    "Passenger Cars (EUR)",
    "Freight Cars (no.)",
    "Freight Cars (EUR)",
    "Total (no.)",
    "Total (EUR)",
]

BUDGET_TABLE_COLUMNS = [
    "Priority",
    "Budget (EUR)",
]


def text_schema(columns: list[str]) -> dict[str, pl.DataType]:
    """Schema for a report table whose columns are all rendered text."""
    return {column: pl.String for column in columns}
