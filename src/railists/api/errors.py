"""
Error conversion utilities for the collection manager API.

convert_to_api_error: Converts internal RailistsError to user-friendly APIError
create_validation_error, create_file_not_found_error: Path validation errors

Provides user-friendly error messages and categorization for display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from railists.api.models import APIError
from railists.contracts.errors import DataLoadError, ExportError

if TYPE_CHECKING:
    from railists.contracts.errors import RailistsError


# =============================================================================
# User-Friendly Error Messages
# =============================================================================


ERROR_MESSAGE_OVERRIDES: dict[str, str] = {
    "PRS001": "A required value is blank",
    "PRS002": "A value is not one of the allowed values",
    "PRS003": "A combined value has the wrong number of parts",
    "PRS004": "A value is not a valid number",
    "PRS005": "A number is outside the allowed range",
    "DOM001": "Length over buffer must be a positive number",
    "DOM002": "A catalog item needs at least one rolling stock",
    "LOAD001": "The document could not be loaded",
    "LOAD002": "A required field is missing from the document",
    "LOAD003": "A field in the document has the wrong type",
    "LOAD004": "A field in the document contains an invalid value",
    "EXP001": "The report could not be written",
}


CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "blank_value": "Blank Value",
    "invalid_value": "Invalid Value",
    "malformed_composite": "Malformed Value",
    "numeric_format": "Numeric Format",
    "structural_invariant": "Structural Invariant",
    "data_loading": "Data Loading",
    "data_export": "Data Export",
}


# =============================================================================
# Conversion Functions
# =============================================================================


def convert_to_api_error(error: RailistsError) -> APIError:
    """
    Convert internal RailistsError to user-friendly APIError.

    Args:
        error: Internal error raised while loading or reporting

    Returns:
        APIError with user-friendly message and details
    """
    category = error.category.value

    return APIError(
        code=error.code,
        message=_get_user_friendly_message(error),
        severity=error.severity.value,
        category=CATEGORY_DISPLAY_NAMES.get(category, category),
        details=_build_error_details(error),
    )


# =============================================================================
# Helper Functions
# =============================================================================


def _get_user_friendly_message(error: RailistsError) -> str:
    """
    Get user-friendly message for an error.

    Uses override if available, followed by the underlying reason and the
    document location. File level load and export failures keep their own
    message, which already names the file.
    """
    if isinstance(error, ExportError) or (
        isinstance(error, DataLoadError) and error.cause is None
    ):
        return error.message

    base_message = ERROR_MESSAGE_OVERRIDES.get(error.code, error.message)
    reason = error.cause.message if isinstance(error, DataLoadError) else error.message

    context_parts = [f"Reason: {reason}"]
    if isinstance(error, DataLoadError) and error.source:
        context_parts.append(f"Source: {error.source}")

    return f"{base_message} ({', '.join(context_parts)})"


def _build_error_details(error: RailistsError) -> dict:
    """
    Build details dictionary from error attributes.

    Only includes non-None values to keep details clean.
    """
    details = {}

    source = getattr(error, "source", None)
    if source:
        details["source"] = source
    if error.field_name:
        details["field_name"] = error.field_name
    if error.actual_value is not None:
        details["actual_value"] = error.actual_value
    cause = getattr(error, "cause", None)
    if cause is not None:
        details["cause_code"] = cause.code

    return details


def create_validation_error(message: str, path: str | None = None) -> APIError:
    """
    Create an error for path validation failures.

    Args:
        message: Error message
        path: Optional file path

    Returns:
        APIError for validation failure
    """
    details = {"path": path} if path else {}
    return APIError(
        code="VAL001",
        message=message,
        severity="error",
        category="Validation",
        details=details,
    )


def create_file_not_found_error(file_path: str) -> APIError:
    """
    Create an error for a missing input document.

    Args:
        file_path: Path to missing file

    Returns:
        APIError for missing file
    """
    return APIError(
        code="VAL002",
        message=f"File not found: {file_path}",
        severity="error",
        category="Validation",
        details={"path": file_path},
    )
