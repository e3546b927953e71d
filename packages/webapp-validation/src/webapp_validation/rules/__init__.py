# SPDX-License-Identifier: MIT
"""Icon size rules and the per-platform rule tables."""

from ..constants import ANDROID, IOS, WINDOWS
from . import android, ios, windows
from .base import (
    RequiredImageGroupRule,
    RequiredImageRule,
    ValidationResult,
    collect_sizes,
)

PLATFORM_RULES = {
    ANDROID: android.RULES,
    IOS: ios.RULES,
    WINDOWS: windows.RULES,
}

__all__ = [
    "PLATFORM_RULES",
    "RequiredImageGroupRule",
    "RequiredImageRule",
    "ValidationResult",
    "collect_sizes",
]
