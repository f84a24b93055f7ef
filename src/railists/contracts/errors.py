"""
Error handling contracts for the collection manager.

Every failure in the load-and-report pipeline is raised as a subclass of
RailistsError. Errors carry a stable code, a category from the error
taxonomy, a human readable message and optional field context:

- BlankValueError: required textual value is empty
- InvalidValueError: value outside a closed vocabulary
- InvalidNumberOfValuesError: malformed "/"-delimited composite value
- NumericFormatError / ValueOutOfRangeError: bad numbers
- InvariantError: structural invariant violated at construction time
- DataLoadError: the document could not be turned into domain objects
- ExportError: a report could not be written

Parsers raise the ParseError family; the document adapter wraps the first
failure into a DataLoadError that names the offending document path and
keeps the original error as ``cause``.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Error categories used to group failures for reporting."""

    # Required value absent or empty
    BLANK_VALUE = "blank_value"

    # Value outside a closed vocabulary
    INVALID_VALUE = "invalid_value"

    # Wrong token count or pairing in a composite value
    MALFORMED_COMPOSITE = "malformed_composite"

    # Non numeric or out of range numbers
    NUMERIC_FORMAT = "numeric_format"

    # Construction time invariants
    STRUCTURAL_INVARIANT = "structural_invariant"

    # File reading and document structure
    DATA_LOADING = "data_loading"

    # Writing report files
    DATA_EXPORT = "data_export"


class ErrorSeverity(Enum):
    """Severity levels for errors surfaced to the user."""

    ERROR = "error"
    CRITICAL = "critical"


# =============================================================================
# ERROR CODE CONSTANTS
# =============================================================================

# Parsing error codes
ERROR_BLANK_VALUE = "PRS001"
ERROR_INVALID_VALUE = "PRS002"
ERROR_INVALID_NUMBER_OF_VALUES = "PRS003"
ERROR_NUMERIC_FORMAT = "PRS004"
ERROR_VALUE_OUT_OF_RANGE = "PRS005"

# Domain invariant error codes
ERROR_NON_POSITIVE_LENGTH = "DOM001"
ERROR_EMPTY_ROLLING_STOCKS = "DOM002"

# Loading error codes
ERROR_LOAD_FAILED = "LOAD001"
ERROR_MISSING_FIELD = "LOAD002"
ERROR_TYPE_MISMATCH = "LOAD003"
ERROR_INVALID_FIELD = "LOAD004"

# Export error codes
ERROR_EXPORT_FAILED = "EXP001"


# =============================================================================
# EXCEPTION HIERARCHY
# =============================================================================


class RailistsError(Exception):
    """
    Base class for every error raised by the collection manager.

    Attributes:
        message: Human-readable description of the issue
        code: Unique error code (e.g., "PRS002")
        category: Error category for filtering and display
        severity: Error severity level
        field_name: Optional name of the problematic field
        actual_value: Optional actual value that caused the error
    """

    code: str = ERROR_LOAD_FAILED
    category: ErrorCategory = ErrorCategory.DATA_LOADING
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        actual_value: str | None = None,
    ) -> None:
        self.message = message
        self.field_name = field_name
        self.actual_value = actual_value
        super().__init__(message)

    def __str__(self) -> str:
        """Human-readable error representation."""
        parts = [f"[{self.code}] {self.message}"]

        if self.field_name:
            parts.append(f"Field: {self.field_name}")
        if self.actual_value is not None:
            parts.append(f"Value: {self.actual_value!r}")

        return " | ".join(parts)


class ParseError(RailistsError):
    """Base class for textual value parsing failures."""

    code = ERROR_INVALID_VALUE
    category = ErrorCategory.INVALID_VALUE


class BlankValueError(ParseError):
    """A required textual value is empty."""

    code = ERROR_BLANK_VALUE
    category = ErrorCategory.BLANK_VALUE


class InvalidValueError(ParseError):
    """A value is outside its closed vocabulary."""

    code = ERROR_INVALID_VALUE
    category = ErrorCategory.INVALID_VALUE


class InvalidNumberOfValuesError(ParseError):
    """A composite value has the wrong number of tokens or an invalid pairing."""

    code = ERROR_INVALID_NUMBER_OF_VALUES
    category = ErrorCategory.MALFORMED_COMPOSITE


class NumericFormatError(ParseError):
    """A value that must be numeric is not."""

    code = ERROR_NUMERIC_FORMAT
    category = ErrorCategory.NUMERIC_FORMAT


class ValueOutOfRangeError(ParseError):
    """A numeric value is outside its allowed inclusive range."""

    code = ERROR_VALUE_OUT_OF_RANGE
    category = ErrorCategory.NUMERIC_FORMAT


class InvariantError(RailistsError):
    """A domain object cannot be built because an invariant does not hold."""

    code = ERROR_NON_POSITIVE_LENGTH
    category = ErrorCategory.STRUCTURAL_INVARIANT

    def __init__(
        self,
        message: str,
        code: str = ERROR_NON_POSITIVE_LENGTH,
        field_name: str | None = None,
        actual_value: str | None = None,
    ) -> None:
        self.code = code
        super().__init__(message, field_name=field_name, actual_value=actual_value)


class DataLoadError(RailistsError):
    """
    Exception raised when a document cannot be loaded.

    Attributes:
        source: File or document path that caused the error
                (e.g., "elements[2].rollingStocks[0].epoch")
        cause: The underlying RailistsError, when a field failed to parse
    """

    category = ErrorCategory.DATA_LOADING
    severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        source: str | None = None,
        code: str = ERROR_LOAD_FAILED,
        cause: RailistsError | None = None,
    ) -> None:
        self.code = code
        self.source = source
        self.cause = cause
        super().__init__(
            f"{message}" + (f" (source: {source})" if source else ""),
            field_name=cause.field_name if cause else None,
            actual_value=cause.actual_value if cause else None,
        )


class ExportError(RailistsError):
    """A report could not be written to its output file."""

    code = ERROR_EXPORT_FAILED
    category = ErrorCategory.DATA_EXPORT
    severity = ErrorSeverity.CRITICAL

    def __init__(self, message: str, target: str | None = None) -> None:
        self.target = target
        super().__init__(f"{message}" + (f" (target: {target})" if target else ""))


# =============================================================================
# ERROR FACTORY FUNCTIONS
# =============================================================================


def missing_field_error(field_name: str, source: str | None = None) -> DataLoadError:
    """Create a missing field error."""
    return DataLoadError(
        f"Required field '{field_name}' is missing or null",
        source=source,
        code=ERROR_MISSING_FIELD,
    )


def type_mismatch_error(
    field_name: str,
    expected: str,
    actual: object,
    source: str | None = None,
) -> DataLoadError:
    """Create an error for a document node of the wrong type."""
    return DataLoadError(
        f"Field '{field_name}' must be {expected}, got {type(actual).__name__}",
        source=source,
        code=ERROR_TYPE_MISMATCH,
    )


def invalid_field_error(source: str, cause: RailistsError) -> DataLoadError:
    """Wrap a parsing or invariant failure with its document location."""
    return DataLoadError(
        f"[{cause.code}] {cause.message}",
        source=source,
        code=ERROR_INVALID_FIELD,
        cause=cause,
    )
