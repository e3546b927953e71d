# SPDX-License-Identifier: MIT
"""Per-platform manifest validation for hosted web apps.

Example:
    >>> from webapp_validation import run_all
    >>>
    >>> run = run_all({"icons": [{"sizes": "1024x1024"}]}, "ios")
    >>> [result.code for result in run.findings()]
    ['missingImage', 'missingImage']
"""

__version__ = "0.1.0"

from .constants import ANDROID, IOS, WINDOWS, Codes, Levels, ManifestMembers
from .engine import (
    RuleFailure,
    RuleSet,
    UnknownPlatformError,
    ValidationRuleError,
    ValidationRun,
    default_rule_set,
    run_all,
    validate_platforms,
)
from .rules import (
    PLATFORM_RULES,
    RequiredImageGroupRule,
    RequiredImageRule,
    ValidationResult,
    collect_sizes,
)

__all__ = [
    # Constants
    "ANDROID",
    "IOS",
    "WINDOWS",
    "Codes",
    "Levels",
    "ManifestMembers",
    # Rules
    "PLATFORM_RULES",
    "RequiredImageRule",
    "RequiredImageGroupRule",
    "ValidationResult",
    "collect_sizes",
    # Engine
    "RuleFailure",
    "RuleSet",
    "ValidationRun",
    "ValidationRuleError",
    "UnknownPlatformError",
    "default_rule_set",
    "run_all",
    "validate_platforms",
]
