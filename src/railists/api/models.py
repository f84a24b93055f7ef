"""
API request and response models for the collection manager.

RailistsService uses these models for clean interface contracts:
- ReportRequest: Input file (and optional output file) for a report
- ValidationRequest: Input for file path validation
- ReportResponse: Rendered table, summary lines and errors
- ValidationResponse: File path validation results

All models are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    import polars as pl


# =============================================================================
# Request Models
# =============================================================================


@dataclass(frozen=True)
class ReportRequest:
    """
    Request model for a collection or wish list report.

    Attributes:
        file_path: Path to the YAML document
        output_path: Path of the file to write (CSV export only)
    """

    file_path: str | Path
    output_path: str | Path | None = None

    @property
    def path(self) -> Path:
        """Get file_path as Path object."""
        return Path(self.file_path)

    @property
    def output(self) -> Path | None:
        """Get output_path as Path object."""
        return Path(self.output_path) if self.output_path is not None else None


@dataclass(frozen=True)
class ValidationRequest:
    """
    Request model for document path validation.

    Attributes:
        file_path: Path to the document to validate
        output_path: Optional output file whose directory must exist
    """

    file_path: str | Path
    output_path: str | Path | None = None

    @property
    def path(self) -> Path:
        """Get file_path as Path object."""
        return Path(self.file_path)


# =============================================================================
# Response Models - Errors
# =============================================================================


@dataclass(frozen=True)
class APIError:
    """
    User-friendly error representation for API responses.

    Converts internal RailistsError to a format suitable for display.

    Attributes:
        code: Error code (e.g., "LOAD004")
        message: User-friendly error message
        severity: Error severity ("error", "critical")
        category: Error category for grouping
        details: Additional context (source, field_name, actual_value)
    """

    code: str
    message: str
    severity: Literal["error", "critical"]
    category: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"[{self.code}] {self.severity.upper()}: {self.message}"


# =============================================================================
# Response Models - Main Responses
# =============================================================================


@dataclass(frozen=True)
class ReportResponse:
    """
    Response model for every report.

    Attributes:
        success: Whether the report was produced
        report: Report name (e.g., "collection stats")
        table: Report table, every column rendered as text
        summary: Lines printed before the table
        errors: Errors that prevented the report
        output_path: File written by the report, if any
    """

    success: bool
    report: str
    table: pl.DataFrame | None = None
    summary: list[str] = field(default_factory=list)
    errors: list[APIError] = field(default_factory=list)
    output_path: str | None = None

    @property
    def row_count(self) -> int:
        """Number of table rows."""
        return self.table.height if self.table is not None else 0


@dataclass(frozen=True)
class ValidationResponse:
    """
    Response model for document path validation.

    Attributes:
        valid: Whether the paths can be used for a report
        file_path: The validated path
        errors: List of validation errors
    """

    valid: bool
    file_path: str
    errors: list[APIError] = field(default_factory=list)
