"""
Collection manager API service.

RailistsService provides a clean facade for every report:
- list_collection: Sorted collection listing
- export_collection: Collection CSV export
- collection_stats: Yearly statistics by category
- collection_depot: Locomotive roster
- list_wish_list: Sorted wish list with price ranges
- wish_list_budget: Wish list budget by priority

This is the main entry point for CLI integration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from railists.api.errors import convert_to_api_error, create_validation_error
from railists.api.formatters import ReportFormatter
from railists.api.models import APIError, ReportRequest, ReportResponse, ValidationRequest
from railists.api.validation import DocumentPathValidator
from railists.contracts.config import RailistsConfig
from railists.contracts.errors import RailistsError
from railists.contracts.protocols import (
    DataSourceProtocol,
    ExporterProtocol,
    StatsAggregatorProtocol,
)
from railists.domain.collections import Collection
from railists.domain.wish_lists import WishList
from railists.engine.aggregator import CollectionStatsAggregator
from railists.engine.budget import WishListBudget
from railists.engine.depot import Depot
from railists.engine.exporter import CollectionCsvExporter
from railists.engine.loader import YamlLoader

logger = logging.getLogger(__name__)


# =============================================================================
# Railists Service
# =============================================================================


class RailistsService:
    """
    High-level service for collection and wish list reports.

    Each report validates the request paths, loads the document, computes
    the report and formats it. Failures are returned as APIErrors in the
    response instead of being raised.

    Usage:
        from railists.api import RailistsService, ReportRequest

        service = RailistsService()
        response = service.collection_stats(ReportRequest("collection.yaml"))

        if response.success:
            print("\\n".join(response.summary))
        else:
            for error in response.errors:
                print(error)
    """

    def __init__(
        self,
        config: RailistsConfig | None = None,
        loader: DataSourceProtocol | None = None,
        aggregator: StatsAggregatorProtocol | None = None,
        exporter: ExporterProtocol | None = None,
    ) -> None:
        """Initialize RailistsService with default components."""
        self.config = config or RailistsConfig.default()
        self._loader = loader or YamlLoader(self.config)
        self._aggregator = aggregator or CollectionStatsAggregator()
        self._exporter = exporter or CollectionCsvExporter(self.config)
        self._validator = DocumentPathValidator()
        self._formatter = ReportFormatter(self.config.reports)

    # -------------------------------------------------------------------------
    # Collection reports
    # -------------------------------------------------------------------------

    def list_collection(self, request: ReportRequest) -> ReportResponse:
        """List the collection items sorted by brand, item number and scale."""

        def build(collection: Collection) -> ReportResponse:
            collection.sort_items()
            return ReportResponse(
                success=True,
                report="collection list",
                table=self._formatter.collection_table(collection),
                summary=self._formatter.collection_summary(collection),
            )

        return self._run_collection(request, "collection list", build)

    def export_collection(self, request: ReportRequest) -> ReportResponse:
        """
        Export the collection to the CSV file named by ``request.output_path``.

        Returns:
            ReportResponse whose summary reports the number of rows written
        """
        if request.output is None:
            return self._error_response(
                "collection csv",
                create_validation_error("An output file is required for the CSV export"),
            )

        output = request.output

        def build(collection: Collection) -> ReportResponse:
            written = self._exporter.export(collection, output)
            return ReportResponse(
                success=True,
                report="collection csv",
                summary=[f"{written} item(s) exported to {output}"],
                output_path=str(output),
            )

        return self._run_collection(request, "collection csv", build)

    def collection_stats(self, request: ReportRequest) -> ReportResponse:
        """Statistics by purchase year and category."""

        def build(collection: Collection) -> ReportResponse:
            stats = self._aggregator.aggregate(collection)
            return ReportResponse(
                success=True,
                report="collection stats",
                table=self._formatter.stats_table(stats),
                summary=self._formatter.stats_summary(stats),
            )

        return self._run_collection(request, "collection stats", build)

    def collection_depot(self, request: ReportRequest) -> ReportResponse:
        """Roster of every locomotive in the collection."""

        def build(collection: Collection) -> ReportResponse:
            depot = Depot.from_collection(collection)
            return ReportResponse(
                success=True,
                report="collection depot",
                table=self._formatter.depot_table(depot),
                summary=self._formatter.depot_summary(depot),
            )

        return self._run_collection(request, "collection depot", build)

    # -------------------------------------------------------------------------
    # Wish list reports
    # -------------------------------------------------------------------------

    def list_wish_list(self, request: ReportRequest) -> ReportResponse:
        """List the wish list items sorted by brand, item number and scale."""

        def build(wish_list: WishList) -> ReportResponse:
            wish_list.sort_items()
            return ReportResponse(
                success=True,
                report="wish list",
                table=self._formatter.wish_list_table(wish_list),
                summary=self._formatter.wish_list_summary(wish_list),
            )

        return self._run_wish_list(request, "wish list", build)

    def wish_list_budget(self, request: ReportRequest) -> ReportResponse:
        """Budget needed to buy the wish list, by priority."""

        def build(wish_list: WishList) -> ReportResponse:
            budget = WishListBudget.from_wish_list(wish_list)
            return ReportResponse(
                success=True,
                report="wish list budget",
                table=self._formatter.budget_table(budget),
                summary=self._formatter.wish_list_summary(wish_list),
            )

        return self._run_wish_list(request, "wish list budget", build)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _run_collection(
        self,
        request: ReportRequest,
        report: str,
        build: Callable[[Collection], ReportResponse],
    ) -> ReportResponse:
        return self._run(request, report, lambda path: build(self._loader.load_collection(path)))

    def _run_wish_list(
        self,
        request: ReportRequest,
        report: str,
        build: Callable[[WishList], ReportResponse],
    ) -> ReportResponse:
        return self._run(request, report, lambda path: build(self._loader.load_wish_list(path)))

    def _run(
        self,
        request: ReportRequest,
        report: str,
        produce: Callable[[Path], ReportResponse],
    ) -> ReportResponse:
        """Validate the request paths, then produce the report."""
        validation = self._validator.validate(
            ValidationRequest(
                file_path=request.file_path,
                output_path=request.output_path,
            )
        )
        if not validation.valid:
            return ReportResponse(success=False, report=report, errors=validation.errors)

        try:
            return produce(request.path)
        except RailistsError as e:
            logger.warning("%s failed: %s", report, e)
            return self._error_response(report, convert_to_api_error(e))

    @staticmethod
    def _error_response(report: str, error: APIError) -> ReportResponse:
        return ReportResponse(success=False, report=report, errors=[error])


def create_service(config: RailistsConfig | None = None) -> RailistsService:
    """
    Factory function to create a RailistsService.

    Args:
        config: Optional configuration (defaults to RailistsConfig.default())

    Returns:
        Configured RailistsService instance
    """
    return RailistsService(config=config)
