# SPDX-License-Identifier: MIT
"""Web app manifest model, schema, and persistence.

This package provides utilities for working with W3C web app manifests:
- JSON Schema definition for manifest.json
- A typed Manifest model built from validated content
- Persistence of manifests into generated projects

Example:
    >>> from webapp_manifest import Manifest
    >>>
    >>> manifest = Manifest.from_dict({"start_url": "https://example.com/", "short_name": "Ex"})
    >>> manifest.short_name
    'Ex'
"""

__version__ = "0.1.0"

from .manifest import (
    IconDescriptor,
    Manifest,
    consume_updated_manifest,
    load_manifest,
    write_manifest,
)
from .schema import (
    MANIFEST_FILENAME,
    MANIFEST_SCHEMA,
    UPDATED_MANIFEST_FILENAME,
    get_manifest_schema,
)
from .validator import (
    ManifestError,
    ManifestValidationError,
    SchemaCheckResult,
    ValidationErrorDetail,
    check_manifest,
    check_manifest_strict,
)

__all__ = [
    # Schema
    "MANIFEST_SCHEMA",
    "MANIFEST_FILENAME",
    "UPDATED_MANIFEST_FILENAME",
    "get_manifest_schema",
    # Model
    "IconDescriptor",
    "Manifest",
    "load_manifest",
    "write_manifest",
    "consume_updated_manifest",
    # Validation
    "check_manifest",
    "check_manifest_strict",
    "ManifestError",
    "ManifestValidationError",
    "SchemaCheckResult",
    "ValidationErrorDetail",
]
