"""
Protocol definitions for collection manager components.

Defines interfaces using Python's Protocol (PEP 544) for structural
typing, so that data sources and exporters can be swapped or mocked:

    DataSourceProtocol -> (domain model) -> StatsAggregatorProtocol
                                         -> ExporterProtocol
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from railists.domain.collections import Collection
    from railists.domain.wish_lists import WishList
    from railists.engine.aggregator import CollectionStats


@runtime_checkable
class DataSourceProtocol(Protocol):
    """
    Protocol for document loading components.

    Responsible for reading a collection or wish list document and turning
    it into domain objects. Loading either succeeds completely or raises.
    """

    def load_collection(self, path: Path) -> Collection:
        """
        Load a collection document.

        Raises:
            DataLoadError: If the file cannot be read or any field is invalid
        """
        ...

    def load_wish_list(self, path: Path) -> WishList:
        """
        Load a wish list document.

        Raises:
            DataLoadError: If the file cannot be read or any field is invalid
        """
        ...


@runtime_checkable
class StatsAggregatorProtocol(Protocol):
    """Protocol for components computing collection statistics."""

    def aggregate(self, collection: Collection) -> CollectionStats:
        """Compute per-year and total statistics for a collection snapshot."""
        ...


@runtime_checkable
class ExporterProtocol(Protocol):
    """Protocol for components writing a collection to a file."""

    def export(self, collection: Collection, output: Path) -> int:
        """
        Write the collection and return the number of rows written.

        Raises:
            ExportError: If the output cannot be written
        """
        ...
