"""
CSV export of a collection.

Writes one row per collection item, in collection order, with the fixed
header ``Brand, ItemNumber, Category, Description, Epoch, Shop, Date,
Count, Price``. The Epoch column holds the epoch shared by every rolling
stock of the item and is empty when they differ.

Classes:
    CollectionCsvExporter: Build the export frame and write it with polars

Usage:
    from railists.engine.exporter import CollectionCsvExporter

    rows = CollectionCsvExporter().export(collection, Path("collection.csv"))
"""

from __future__ import annotations

import logging
from pathlib import Path

import polars as pl

from railists.contracts.config import RailistsConfig
from railists.contracts.errors import ExportError
from railists.data.schemas import COLLECTION_CSV_SCHEMA
from railists.domain.collections import Collection

logger = logging.getLogger(__name__)


class CollectionCsvExporter:
    """
    Export a collection as a CSV file.

    Implements ExporterProtocol.

    Attributes:
        config: Report options (date format)
    """

    def __init__(self, config: RailistsConfig | None = None) -> None:
        self.config = config or RailistsConfig.default()

    def to_frame(self, collection: Collection) -> pl.DataFrame:
        """
        Build the export frame.

        Returns:
            DataFrame with the COLLECTION_CSV_SCHEMA columns, in header order
        """
        date_format = self.config.reports.date_format
        rows = []
        for item in collection:
            catalog_item = item.catalog_item
            purchase = item.purchased_info
            epoch = catalog_item.epoch
            rows.append(
                {
                    "Brand": catalog_item.brand.name,
                    "ItemNumber": catalog_item.item_number.value,
                    "Category": catalog_item.category.label,
                    "Description": catalog_item.description,
                    "Epoch": str(epoch) if epoch is not None else "",
                    "Shop": purchase.shop,
                    "Date": purchase.purchased_date.strftime(date_format),
                    "Count": catalog_item.count,
                    "Price": str(purchase.price),
                }
            )

        return pl.DataFrame(rows, schema=COLLECTION_CSV_SCHEMA)

    def export(self, collection: Collection, output: str | Path) -> int:
        """
        Write the collection to ``output``.

        Returns:
            Number of rows written (header excluded)

        Raises:
            ExportError: If the file cannot be written
        """
        frame = self.to_frame(collection)
        output = Path(output)

        try:
            with output.open("wb") as stream:
                frame.write_csv(stream)
        except OSError as e:
            raise ExportError(f"Failed to write csv: {e}", target=str(output)) from e

        logger.info("Exported %d rows to %s", frame.height, output)
        return frame.height
