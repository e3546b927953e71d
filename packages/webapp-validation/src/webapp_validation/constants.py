# SPDX-License-Identifier: MIT
"""Validation levels, manifest members, and result codes."""

from __future__ import annotations


class Levels:
    """Severity of a validation finding."""

    SUGGESTION = "suggestion"
    WARNING = "warning"


class ManifestMembers:
    """Manifest members a finding can refer to."""

    ICONS = "icons"


class Codes:
    """Machine-readable finding codes."""

    MISSING_IMAGE = "missingImage"
    MISSING_IMAGE_GROUP = "missingImageGroup"


LEVELS = frozenset({Levels.SUGGESTION, Levels.WARNING})

# Platform identifiers used by the shipped rules
ANDROID = "android"
IOS = "ios"
WINDOWS = "windows"
