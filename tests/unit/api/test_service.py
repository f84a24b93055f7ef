"""Unit tests for the API service module.

Tests cover:
- RailistsService collection and wish list reports
- Path validation and error responses
- Injected components
- create_service factory function
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from railists.api.models import ReportRequest, ReportResponse
from railists.api.service import RailistsService, create_service
from railists.contracts.config import RailistsConfig, ReportOptions
from railists.contracts.errors import ExportError
from railists.engine.aggregator import CollectionStatsAggregator


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def service() -> RailistsService:
    return RailistsService()


INVALID_EPOCH_DOCUMENT = """\
description: Broken
version: 1
modifiedAt: "2022-01-01 10:00:00"
elements:
  - brand: ACME
    itemNumber: "60392"
    description: FS E.656
    powerMethod: DC
    scale: H0
    count: 1
    rollingStocks:
      - category: LOCOMOTIVE
        typeName: E656
        roadNumber: E656 077
        railway: FS
        epoch: VII
    purchaseInfo:
      shop: Tecnomodel
      date: 2020-01-15
      price: 100.00 EUR
"""


# =============================================================================
# Collection reports
# =============================================================================


class TestListCollection:
    """Tests for RailistsService.list_collection."""

    def test_success(self, service: RailistsService, collection_file: Path) -> None:
        """Should list every item."""
        response = service.list_collection(ReportRequest(file_path=collection_file))

        assert isinstance(response, ReportResponse)
        assert response.success
        assert response.report == "collection list"
        assert response.row_count == 4
        assert response.errors == []

    def test_sorted(self, service: RailistsService, collection_file: Path) -> None:
        """Should sort by brand and item number."""
        response = service.list_collection(ReportRequest(file_path=collection_file))

        table = response.table
        assert list(zip(table["Brand"], table["Item number"])) == [
            ("ACME", "60392"),
            ("ACME", "70110"),
            ("Rivarossi", "HR4300"),
            ("Roco", "72003"),
        ]

    def test_summary(self, service: RailistsService, collection_file: Path) -> None:
        """Should describe the collection."""
        response = service.list_collection(ReportRequest(file_path=collection_file))

        assert response.summary == [
            "My collection (version 3, modified 2022-01-05)",
            "4 item(s)",
        ]


class TestCollectionStats:
    """Tests for RailistsService.collection_stats."""

    def test_summary(self, service: RailistsService, collection_file: Path) -> None:
        """Should report the total value and number of entries."""
        response = service.collection_stats(ReportRequest(file_path=collection_file))

        assert response.success
        assert response.summary == [
            "Total value........... 390.50 EUR",
            "Rolling stocks/sets... 4",
        ]

    def test_years(self, service: RailistsService, collection_file: Path) -> None:
        """Should render a row per purchase year and a total."""
        response = service.collection_stats(ReportRequest(file_path=collection_file))

        assert response.table["Year"].to_list() == ["2019", "2020", "2021", "TOTAL"]
        assert response.table["Total (no.)"].to_list() == ["1", "1", "3", "5"]

    def test_injected_aggregator(self, collection_file: Path) -> None:
        """Should use the aggregator it was given."""
        aggregator = MagicMock(wraps=CollectionStatsAggregator())
        service = RailistsService(aggregator=aggregator)

        service.collection_stats(ReportRequest(file_path=collection_file))

        aggregator.aggregate.assert_called_once()


class TestCollectionDepot:
    """Tests for RailistsService.collection_depot."""

    def test_roster(self, service: RailistsService, collection_file: Path) -> None:
        """Should list locomotives ordered by class name and road number."""
        response = service.collection_depot(ReportRequest(file_path=collection_file))

        assert response.success
        assert response.table["Road number"].to_list() == ["E444 005", "E656 077"]
        assert response.summary == ["2 locomotive(s)"]


class TestExportCollection:
    """Tests for RailistsService.export_collection."""

    def test_writes_csv(
        self, service: RailistsService, collection_file: Path, tmp_path: Path
    ) -> None:
        """Should write the collection and report the rows written."""
        output = tmp_path / "collection.csv"

        response = service.export_collection(
            ReportRequest(file_path=collection_file, output_path=output)
        )

        assert response.success
        assert response.output_path == str(output)
        assert response.summary == [f"4 item(s) exported to {output}"]
        assert response.table is None
        assert output.read_text(encoding="utf-8").splitlines()[0] == (
            "Brand,ItemNumber,Category,Description,Epoch,Shop,Date,Count,Price"
        )

    def test_requires_output(self, service: RailistsService, collection_file: Path) -> None:
        """Should fail without an output file."""
        response = service.export_collection(ReportRequest(file_path=collection_file))

        assert not response.success
        assert response.errors[0].code == "VAL001"

    def test_missing_output_directory(
        self, service: RailistsService, collection_file: Path, tmp_path: Path
    ) -> None:
        """Should fail before loading when the output directory is missing."""
        response = service.export_collection(
            ReportRequest(file_path=collection_file, output_path=tmp_path / "no" / "out.csv")
        )

        assert not response.success
        assert "Output directory does not exist" in response.errors[0].message

    def test_export_failure(self, collection_file: Path, tmp_path: Path) -> None:
        """Should convert exporter failures into an error response."""
        exporter = MagicMock()
        exporter.export.side_effect = ExportError("Disk full", target="out.csv")
        service = RailistsService(exporter=exporter)

        response = service.export_collection(
            ReportRequest(file_path=collection_file, output_path=tmp_path / "out.csv")
        )

        assert not response.success
        assert response.errors[0].code == "EXP001"
        assert response.errors[0].severity == "critical"


# =============================================================================
# Wish list reports
# =============================================================================


class TestListWishList:
    """Tests for RailistsService.list_wish_list."""

    def test_sorted(self, service: RailistsService, wish_list_file: Path) -> None:
        """Should sort the wish list and show price ranges."""
        response = service.list_wish_list(ReportRequest(file_path=wish_list_file))

        assert response.success
        assert response.report == "wish list"
        assert response.table["Brand"].to_list() == ["ACME", "Piko", "Roco"]
        assert response.table["Price range"].to_list() == [
            "from 110.00 EUR to 120.00 EUR",
            "-",
            "from 80 EUR to 80 EUR",
        ]
        assert response.summary == ["My wish list (version 1)", "3 item(s)"]


class TestWishListBudget:
    """Tests for RailistsService.wish_list_budget."""

    def test_budget(self, service: RailistsService, wish_list_file: Path) -> None:
        """Should sum the highest quoted prices by priority."""
        response = service.wish_list_budget(ReportRequest(file_path=wish_list_file))

        assert response.success
        assert response.table.rows() == [
            ("High", "120.00"),
            ("Normal", "80.00"),
            ("Low", "0.00"),
            ("TOTAL", "200.00"),
        ]


# =============================================================================
# Error handling
# =============================================================================


class TestErrorResponses:
    """Tests for failures returned in the response."""

    def test_missing_file(self, service: RailistsService, tmp_path: Path) -> None:
        """Should report a missing document."""
        response = service.collection_stats(ReportRequest(file_path=tmp_path / "missing.yaml"))

        assert not response.success
        assert response.table is None
        assert response.errors[0].code == "VAL002"

    def test_wrong_suffix(self, service: RailistsService, write_document) -> None:
        """Should reject documents that are not YAML files."""
        path = write_document("description: x\n", name="collection.txt")

        response = service.list_collection(ReportRequest(file_path=path))

        assert response.errors[0].code == "VAL001"

    def test_invalid_epoch(self, service: RailistsService, write_document) -> None:
        """Should name the offending document path."""
        path = write_document(INVALID_EPOCH_DOCUMENT)

        response = service.list_collection(ReportRequest(file_path=path))

        assert not response.success
        error = response.errors[0]
        assert error.code == "LOAD004"
        assert error.details["source"] == "elements[0].rollingStocks[0].epoch"
        assert error.details["cause_code"] == "PRS002"
        assert "Source: elements[0].rollingStocks[0].epoch" in error.message

    def test_invalid_yaml(self, service: RailistsService, write_document) -> None:
        """Should report unreadable documents."""
        path = write_document("elements: [unclosed\n")

        response = service.collection_depot(ReportRequest(file_path=path))

        assert not response.success
        assert response.errors[0].code == "LOAD001"

    def test_undecodable_file(self, service: RailistsService, tmp_path: Path) -> None:
        """Should report a file that is not UTF-8 text."""
        path = tmp_path / "collection.yaml"
        path.write_bytes(b"description: x\n\xff\xfe\n")

        response = service.collection_stats(ReportRequest(file_path=path))

        assert not response.success
        assert response.errors[0].code == "LOAD001"
        assert "not valid UTF-8" in response.errors[0].message

    def test_wish_list_as_collection(
        self, service: RailistsService, wish_list_file: Path
    ) -> None:
        """Should fail when a wish list is read as a collection."""
        response = service.list_collection(ReportRequest(file_path=wish_list_file))

        assert not response.success
        assert response.errors[0].code == "LOAD002"

    def test_logs_failure(
        self,
        service: RailistsService,
        write_document,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Should log the failure at warning level."""
        path = write_document(INVALID_EPOCH_DOCUMENT)

        with caplog.at_level(logging.WARNING, logger="railists.api.service"):
            service.collection_stats(ReportRequest(file_path=path))

        assert "collection stats failed" in caplog.text


# =============================================================================
# Factory
# =============================================================================


class TestCreateService:
    """Tests for create_service."""

    def test_default_config(self) -> None:
        """Should use the default configuration."""
        assert create_service().config == RailistsConfig.default()

    def test_custom_config(self, collection_file: Path) -> None:
        """Should pass report options to the formatter."""
        config = RailistsConfig(reports=ReportOptions(date_format="%d/%m/%Y"))

        response = create_service(config).list_collection(
            ReportRequest(file_path=collection_file)
        )

        assert response.table["Added"][0] == "15/01/2020"
