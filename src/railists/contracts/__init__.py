"""
Contracts module for the collection manager.

Provides the error taxonomy, configuration and component interfaces
shared by the engine and the API layer.

Submodules:
- config: RailistsConfig and related configuration classes
- errors: RailistsError hierarchy, error codes and factories
- protocols: Protocol definitions for component interfaces
"""

from railists.contracts.config import DocumentFormats, RailistsConfig, ReportOptions
from railists.contracts.errors import (
    ERROR_BLANK_VALUE,
    ERROR_EMPTY_ROLLING_STOCKS,
    ERROR_EXPORT_FAILED,
    ERROR_INVALID_FIELD,
    ERROR_INVALID_NUMBER_OF_VALUES,
    ERROR_INVALID_VALUE,
    ERROR_LOAD_FAILED,
    ERROR_MISSING_FIELD,
    ERROR_NON_POSITIVE_LENGTH,
    ERROR_NUMERIC_FORMAT,
    ERROR_TYPE_MISMATCH,
    ERROR_VALUE_OUT_OF_RANGE,
    BlankValueError,
    DataLoadError,
    ErrorCategory,
    ErrorSeverity,
    ExportError,
    InvalidNumberOfValuesError,
    InvalidValueError,
    InvariantError,
    NumericFormatError,
    ParseError,
    RailistsError,
    ValueOutOfRangeError,
    invalid_field_error,
    missing_field_error,
    type_mismatch_error,
)
from railists.contracts.protocols import (
    DataSourceProtocol,
    ExporterProtocol,
    StatsAggregatorProtocol,
)

__all__ = [
    # Configuration
    "DocumentFormats",
    "RailistsConfig",
    "ReportOptions",
    # Error codes
    "ERROR_BLANK_VALUE",
    "ERROR_EMPTY_ROLLING_STOCKS",
    "ERROR_EXPORT_FAILED",
    "ERROR_INVALID_FIELD",
    "ERROR_INVALID_NUMBER_OF_VALUES",
    "ERROR_INVALID_VALUE",
    "ERROR_LOAD_FAILED",
    "ERROR_MISSING_FIELD",
    "ERROR_NON_POSITIVE_LENGTH",
    "ERROR_NUMERIC_FORMAT",
    "ERROR_TYPE_MISMATCH",
    "ERROR_VALUE_OUT_OF_RANGE",
    # Errors
    "BlankValueError",
    "DataLoadError",
    "ErrorCategory",
    "ErrorSeverity",
    "ExportError",
    "InvalidNumberOfValuesError",
    "InvalidValueError",
    "InvariantError",
    "NumericFormatError",
    "ParseError",
    "RailistsError",
    "ValueOutOfRangeError",
    "invalid_field_error",
    "missing_field_error",
    "type_mismatch_error",
    # Protocols
    "DataSourceProtocol",
    "ExporterProtocol",
    "StatsAggregatorProtocol",
]
