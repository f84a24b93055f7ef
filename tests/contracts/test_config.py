"""Tests for configuration contracts."""

import dataclasses

import pytest

from railists.config import (
    DEFAULT_CURRENCY,
    MAX_DELIVERY_YEAR,
    MIN_DELIVERY_YEAR,
    is_supported_currency,
    is_valid_delivery_year,
)
from railists.contracts.config import DocumentFormats, RailistsConfig, ReportOptions


class TestRailistsConfig:
    """Tests for RailistsConfig."""

    def test_default(self):
        """Should use the document formats written by the application."""
        config = RailistsConfig.default()

        assert config.documents.modified_at_format == "%Y-%m-%d %H:%M:%S"
        assert config.documents.purchase_date_format == "%Y-%m-%d"
        assert config.reports.date_format == "%Y-%m-%d"
        assert config.reports.currency == "EUR"

    def test_frozen(self):
        """Should be immutable."""
        config = RailistsConfig.default()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.reports = ReportOptions()

    def test_custom_formats(self):
        """Should accept custom document formats."""
        config = RailistsConfig(documents=DocumentFormats(purchase_date_format="%d/%m/%Y"))

        assert config.documents.purchase_date_format == "%d/%m/%Y"
        assert config.reports == ReportOptions()


class TestReportOptions:
    """Tests for description truncation."""

    def test_short_text_unchanged(self):
        """Should keep descriptions shorter than the width."""
        assert ReportOptions().truncate("Short") == "Short"

    def test_long_text_truncated(self):
        """Should cut long descriptions and add an ellipsis."""
        text = "x" * 60

        truncated = ReportOptions().truncate(text)

        assert truncated == "x" * 47 + "..."
        assert len(truncated) == 50

    def test_width_boundary(self):
        """Should truncate descriptions as long as the width."""
        assert ReportOptions().truncate("y" * 49) == "y" * 49
        assert ReportOptions().truncate("y" * 50) == "y" * 47 + "..."


class TestConstants:
    """Tests for fixed configuration constants."""

    def test_currency(self):
        """Should support the default currency only."""
        assert DEFAULT_CURRENCY == "EUR"
        assert is_supported_currency("EUR")
        assert not is_supported_currency("USD")

    def test_delivery_years(self):
        """Should use inclusive delivery year bounds."""
        assert is_valid_delivery_year(MIN_DELIVERY_YEAR)
        assert is_valid_delivery_year(MAX_DELIVERY_YEAR)
        assert not is_valid_delivery_year(MIN_DELIVERY_YEAR - 1)
        assert not is_valid_delivery_year(MAX_DELIVERY_YEAR + 1)
