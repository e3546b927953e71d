# SPDX-License-Identifier: MIT
"""Schema validation for web app manifests.

This module validates manifest.json content against the schema with
structured error reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .schema import MANIFEST_SCHEMA


class ManifestError(Exception):
    """Base exception for manifest-related errors."""

    pass


class ManifestValidationError(ManifestError):
    """Raised when manifest validation fails.

    Attributes:
        errors: List of validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"Manifest validation failed with {len(errors)} error(s)"
        if errors:
            message += f": [{errors[0].field}] {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single schema violation.

    Attributes:
        field: JSON path to the invalid field (e.g., "start_url" or "icons[0].sizes")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


@dataclass
class SchemaCheckResult:
    """Result of checking a manifest against the schema."""

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "required":
        missing = [name for name in error.validator_value if name not in error.instance]
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"

    if error.validator == "type":
        expected = error.validator_value
        actual = type(error.instance).__name__
        return f"Expected {expected}, got {actual}"

    if error.validator == "minLength":
        return f"String must be at least {error.validator_value} character(s)"

    return error.message


def check_manifest(content: Any) -> SchemaCheckResult:
    """Check manifest content against the schema.

    Args:
        content: Parsed manifest.json content

    Returns:
        SchemaCheckResult with validation status and errors
    """
    if not isinstance(content, dict):
        return SchemaCheckResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field="<root>",
                    message=f"Manifest must be a dictionary, got {type(content).__name__}",
                    value=content,
                )
            ],
        )

    validator = Draft202012Validator(MANIFEST_SCHEMA)
    errors = [
        ValidationErrorDetail(
            field=_json_path_from_error(error),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        for error in validator.iter_errors(content)
    ]
    return SchemaCheckResult(valid=not errors, errors=errors)


def check_manifest_strict(content: Any) -> dict:
    """Check manifest content and raise if it does not match the schema.

    Raises:
        ManifestValidationError: If the manifest is invalid
    """
    result = check_manifest(content)
    if not result.valid:
        raise ManifestValidationError(result.errors)
    return content
