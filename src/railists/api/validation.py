"""
Document path validation utilities for the collection manager API.

DocumentPathValidator: Validates input and output paths before a report

Checks that the document exists and is a YAML file, and that the
directory of an output file exists.
"""

from __future__ import annotations

from pathlib import Path

from railists.api.errors import create_file_not_found_error, create_validation_error
from railists.api.models import APIError, ValidationRequest, ValidationResponse

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class DocumentPathValidator:
    """
    Validates paths for a collection or wish list report.

    Usage:
        validator = DocumentPathValidator()
        response = validator.validate(ValidationRequest(file_path="collection.yaml"))
        if not response.valid:
            for error in response.errors:
                print(error)
    """

    def validate(self, request: ValidationRequest) -> ValidationResponse:
        """
        Validate the paths of a report request.

        Args:
            request: ValidationRequest with document and optional output path

        Returns:
            ValidationResponse with validation results
        """
        path = request.path
        errors: list[APIError] = []

        if not path.exists():
            errors.append(create_file_not_found_error(str(path)))
        elif not path.is_file():
            errors.append(create_validation_error(
                f"Document path is not a file: {path}",
                path=str(path),
            ))
        elif path.suffix.lower() not in YAML_SUFFIXES:
            errors.append(create_validation_error(
                f"Document must be a YAML file (.yaml or .yml): {path}",
                path=str(path),
            ))

        if request.output_path is not None:
            errors.extend(self._validate_output(Path(request.output_path)))

        return ValidationResponse(
            valid=not errors,
            file_path=str(path),
            errors=errors,
        )

    @staticmethod
    def _validate_output(output: Path) -> list[APIError]:
        parent = output.parent
        if not parent.is_dir():
            return [create_validation_error(
                f"Output directory does not exist: {parent}",
                path=str(output),
            )]
        if output.is_dir():
            return [create_validation_error(
                f"Output path is a directory: {output}",
                path=str(output),
            )]
        return []
