# SPDX-License-Identifier: MIT
"""JSON Schema definition for W3C web app manifests (manifest.json).

Only the members the packaging tools depend on are constrained. Every other
member is accepted unchanged so that the manifest can be persisted into the
generated project without losing information.
"""

from __future__ import annotations

# File written into the generated project
MANIFEST_FILENAME = "manifest.json"

# File the hosted web app plugin may leave behind after processing the manifest
UPDATED_MANIFEST_FILENAME = "manifest.updated.json"

# JSON Schema for manifest.json
MANIFEST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://www.w3.org/TR/appmanifest/manifest.schema.json",
    "title": "Web App Manifest",
    "description": "W3C web app manifest as consumed by the hosted web app packaging tools",
    "type": "object",
    "required": ["start_url"],
    "properties": {
        "start_url": {
            "type": "string",
            "description": "Absolute URL the app navigates to when launched",
            "minLength": 1,
        },
        "name": {
            "type": "string",
            "description": "Full display name of the app",
        },
        "short_name": {
            "type": "string",
            "description": "Short display name used for the generated app",
        },
        "icons": {
            "type": "array",
            "description": "Icon images available to the app",
            "items": {
                "type": "object",
                "properties": {
                    "src": {"type": "string"},
                    "sizes": {
                        "type": "string",
                        "description": "Space-separated list of WxH size tokens",
                    },
                    "type": {"type": "string"},
                },
            },
        },
    },
    "additionalProperties": True,
}


def get_manifest_schema() -> dict:
    """Get a copy of the manifest JSON schema."""
    import copy

    return copy.deepcopy(MANIFEST_SCHEMA)
