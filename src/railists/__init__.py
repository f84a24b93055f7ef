"""
Model railway collection manager.

Loads a YAML-described collection or wish list, rebuilds the typed domain
model of catalog items and rolling stocks, and derives listings, yearly
statistics, the locomotive depot roster, CSV exports and wish list budgets.

Basic usage:
    >>> from railists.engine.loader import YamlLoader
    >>> from railists.engine.aggregator import CollectionStats
    >>>
    >>> collection = YamlLoader().load_collection("collection.yaml")
    >>> stats = CollectionStats.from_collection(collection)
    >>> stats.total_value
"""

__version__ = "0.1.0"
__author__ = "railists contributors"
__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    "__author__",
    "__license__",
]
