# SPDX-License-Identifier: MIT
"""Icon rules for the iOS platform."""

from __future__ import annotations

from ..constants import IOS, Levels
from .base import RequiredImageRule

required_app_icon = RequiredImageRule(
    id="requiredAppIcon",
    platform=IOS,
    description="An app icon of the following sizes is required: 76x76, 120x120, 152x152 and 180x180",
    sizes=("76x76", "120x120", "152x152", "180x180"),
    level=Levels.SUGGESTION,
)

required_app_store_icon = RequiredImageRule(
    id="requiredAppStoreIcon",
    platform=IOS,
    description="An 1024x1024 app icon for the App Store is required",
    sizes=("1024x1024",),
    level=Levels.SUGGESTION,
)

# Portrait and landscape pairs for each supported device class
required_launch_image = RequiredImageRule(
    id="requiredLaunchImage",
    platform=IOS,
    description=(
        "A launch image of the following sizes is required: 750x1334, 1334x750, "
        "1242x2208, 2208x1242, 640x1136, 640x960, 1536x2048, 2048x1536, 768x1024 and 1024x768"
    ),
    sizes=(
        "750x1334",
        "1334x750",
        "1242x2208",
        "2208x1242",
        "640x1136",
        "640x960",
        "1536x2048",
        "2048x1536",
        "768x1024",
        "1024x768",
    ),
    level=Levels.SUGGESTION,
)

RULES = (required_app_icon, required_app_store_icon, required_launch_image)
