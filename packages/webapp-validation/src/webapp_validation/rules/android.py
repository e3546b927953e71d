# SPDX-License-Identifier: MIT
"""Icon rules for the Android platform."""

from __future__ import annotations

from ..constants import ANDROID, Levels
from .base import RequiredImageRule

required_launch_image = RequiredImageRule(
    id="requiredLaunchImage",
    platform=ANDROID,
    description=(
        "A launch image of the following sizes is required: "
        "48x48, 72x72, 96x96, 144x144, 192x192 and 512x512"
    ),
    sizes=("48x48", "72x72", "96x96", "144x144", "192x192", "512x512"),
    level=Levels.SUGGESTION,
)

RULES = (required_launch_image,)
