"""
Collection manager API Module.

Public API for collection and wish list reports providing:
- RailistsService: Main service facade for reports
- Request/Response models: Clean interface contracts
- Validation utilities: Document path validation
- Formatting utilities: Report tables and terminal rendering

Usage:
    from railists.api import RailistsService, ReportRequest, render_table

    service = RailistsService()
    response = service.list_collection(ReportRequest("collection.yaml"))

    if response.success:
        print(render_table(response.table))
    else:
        for error in response.errors:
            print(f"{error.code}: {error.message}")
"""

from railists.api.formatters import ReportFormatter, render_table
from railists.api.models import (
    APIError,
    ReportRequest,
    ReportResponse,
    ValidationRequest,
    ValidationResponse,
)
from railists.api.service import RailistsService, create_service
from railists.api.validation import DocumentPathValidator

__all__ = [
    # Service
    "RailistsService",
    "create_service",
    # Request models
    "ReportRequest",
    "ValidationRequest",
    # Response models
    "ReportResponse",
    "ValidationResponse",
    "APIError",
    # Validation
    "DocumentPathValidator",
    # Formatting
    "ReportFormatter",
    "render_table",
]
