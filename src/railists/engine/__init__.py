"""
Collection manager engine components.

This package contains the production implementations of the pipeline:

    YamlLoader -> DocumentAdapter -> (Collection | WishList)
        -> CollectionStatsAggregator / Depot / WishListBudget
        -> CollectionCsvExporter

Components implement the protocols in railists.contracts.protocols.

Modules:
    loader: YAML file reading
    adapter: Document to domain model conversion
    aggregator: Collection statistics by year and category
    depot: Locomotive roster
    budget: Wish list budget by priority
    exporter: CSV export
"""

from railists.engine.adapter import DocumentAdapter
from railists.engine.aggregator import (
    CategoryStats,
    CollectionStats,
    CollectionStatsAggregator,
    StatisticsTotals,
    YearlyCollectionStats,
)
from railists.engine.budget import WishListBudget
from railists.engine.depot import Depot, DepotCard
from railists.engine.exporter import CollectionCsvExporter
from railists.engine.loader import YamlLoader

__all__ = [
    "CategoryStats",
    "CollectionCsvExporter",
    "CollectionStats",
    "CollectionStatsAggregator",
    "Depot",
    "DepotCard",
    "DocumentAdapter",
    "StatisticsTotals",
    "WishListBudget",
    "YamlLoader",
    "YearlyCollectionStats",
]
