"""
Configuration contracts for the collection manager.

Provides immutable configuration dataclasses:
- DocumentFormats: textual formats used by collection and wish list documents
- ReportOptions: how reports render dates, descriptions and amounts
- RailistsConfig: the complete configuration

Usage:
    config = RailistsConfig.default()
    config.documents.modified_at_format  # "%Y-%m-%d %H:%M:%S"
"""

from __future__ import annotations

from dataclasses import dataclass, field

from railists.config.currencies import DEFAULT_CURRENCY


@dataclass(frozen=True)
class DocumentFormats:
    """
    Date and time formats used in the YAML documents.

    YAML loaders may already produce native date and datetime values for
    these fields; the formats apply only when the value is a string.
    """

    modified_at_format: str = "%Y-%m-%d %H:%M:%S"
    purchase_date_format: str = "%Y-%m-%d"


@dataclass(frozen=True)
class ReportOptions:
    """
    Rendering options for tables and exports.

    Descriptions with ``description_width`` characters or more are cut to
    ``description_width - 3`` characters followed by "...".
    """

    date_format: str = "%Y-%m-%d"
    description_width: int = 50
    currency: str = DEFAULT_CURRENCY
    ellipsis: str = "..."

    def truncate(self, text: str) -> str:
        """Shorten a description for tabular output."""
        if len(text) < self.description_width:
            return text
        return text[: self.description_width - len(self.ellipsis)] + self.ellipsis


@dataclass(frozen=True)
class RailistsConfig:
    """
    Complete configuration for loading documents and rendering reports.

    Attributes:
        documents: Formats of the input documents
        reports: Rendering options for the output
    """

    documents: DocumentFormats = field(default_factory=DocumentFormats)
    reports: ReportOptions = field(default_factory=ReportOptions)

    @classmethod
    def default(cls) -> RailistsConfig:
        """Configuration matching the document format written by the application."""
        return cls(
            documents=DocumentFormats(),
            reports=ReportOptions(),
        )
