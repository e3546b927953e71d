# SPDX-License-Identifier: MIT
"""Icon rules for the Windows platform.

Windows scales its tile logos, so any one of the listed sizes is enough.
"""

from __future__ import annotations

from ..constants import WINDOWS, Levels
from .base import RequiredImageGroupRule

required_square_logo = RequiredImageGroupRule(
    id="requiredSquareLogo",
    platform=WINDOWS,
    description=(
        "A square logo of any of the following sizes is required for Windows: "
        "120x120, 150x150, 210x210, 270x270"
    ),
    sizes=("120x120", "150x150", "210x210", "270x270"),
    level=Levels.WARNING,
)

required_small_square_logo = RequiredImageGroupRule(
    id="requiredSmallSquareLogo",
    platform=WINDOWS,
    description=(
        "A small square logo of any of the following sizes is required for Windows: "
        "24x24, 30x30, 42x42, 54x54"
    ),
    sizes=("24x24", "30x30", "42x42", "54x54"),
    level=Levels.WARNING,
)

RULES = (required_square_logo, required_small_square_logo)
