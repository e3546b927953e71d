# SPDX-License-Identifier: MIT
"""Validation engine.

Runs the rules registered for a platform against a manifest. A rule that
raises is reported as a RuleFailure entry and does not stop the other rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .rules import PLATFORM_RULES, ValidationResult

logger = logging.getLogger(__name__)

Rule = Callable[[Any], Optional[ValidationResult]]


class ValidationRuleError(Exception):
    """Raised when a rule fails while checking a manifest."""

    def __init__(self, platform: str, rule: str, cause: BaseException) -> None:
        self.platform = platform
        self.rule = rule
        self.cause = cause
        super().__init__(f"Validation rule '{rule}' for platform '{platform}' failed: {cause}")


class UnknownPlatformError(KeyError):
    """Raised when no rules are registered for a platform."""

    def __init__(self, platform: str, available: Iterable[str]) -> None:
        self.platform = platform
        names = ", ".join(sorted(available)) or "none"
        super().__init__(f"Unknown platform: '{platform}'. Available platforms: {names}")

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True)
class RuleFailure:
    """Engine-level entry for a rule that raised instead of returning."""

    platform: str
    rule: str
    error: ValidationRuleError


Entry = Union[ValidationResult, RuleFailure]


def _rule_name(rule: Rule) -> str:
    return getattr(rule, "id", None) or getattr(rule, "__name__", None) or repr(rule)


class RuleSet:
    """Mapping from platform identifier to its ordered rules."""

    def __init__(self) -> None:
        self._rules: dict[str, list[Rule]] = {}

    def register(self, platform: str, rule: Rule) -> None:
        """Append a rule to a platform's rule list."""
        self._rules.setdefault(platform, []).append(rule)

    def rules_for(self, platform: str) -> tuple[Rule, ...]:
        """Get the rules for a platform.

        Raises:
            UnknownPlatformError: If nothing is registered for the platform
        """
        if platform not in self._rules:
            raise UnknownPlatformError(platform, self._rules)
        return tuple(self._rules[platform])

    @property
    def platforms(self) -> list[str]:
        return list(self._rules)

    @classmethod
    def default(cls) -> "RuleSet":
        """Create a rule set with the shipped icon rules."""
        rule_set = cls()
        for platform, rules in PLATFORM_RULES.items():
            for rule in rules:
                rule_set.register(platform, rule)
        return rule_set


class ValidationRun:
    """Lazy, restartable sequence of validation entries.

    Each iteration runs every rule again, so iterating twice over the same
    manifest yields equal sequences.
    """

    def __init__(self, manifest: Any, platform: str, rules: tuple[Rule, ...]) -> None:
        self.manifest = manifest
        self.platform = platform
        self.rules = rules

    def __iter__(self) -> Iterator[Entry]:
        for rule in self.rules:
            try:
                result = rule(self.manifest)
            except Exception as e:
                name = _rule_name(rule)
                logger.debug("Rule %s for %s raised %r", name, self.platform, e)
                yield RuleFailure(
                    platform=self.platform,
                    rule=name,
                    error=ValidationRuleError(self.platform, name, e),
                )
                continue
            if result is not None:
                yield result

    def findings(self) -> list[ValidationResult]:
        return [entry for entry in self if isinstance(entry, ValidationResult)]

    def failures(self) -> list[RuleFailure]:
        return [entry for entry in self if isinstance(entry, RuleFailure)]


_default_rule_set: RuleSet | None = None


def default_rule_set() -> RuleSet:
    global _default_rule_set
    if _default_rule_set is None:
        _default_rule_set = RuleSet.default()
    return _default_rule_set


def run_all(manifest: Any, platform: str, rule_set: RuleSet | None = None) -> ValidationRun:
    """Run every rule registered for a platform against a manifest.

    Args:
        manifest: A Manifest or mapping of manifest content
        platform: Platform identifier (e.g., "android")
        rule_set: Rules to use (defaults to the shipped icon rules)

    Returns:
        ValidationRun yielding ValidationResult and RuleFailure entries

    Raises:
        UnknownPlatformError: If no rules are registered for the platform
    """
    rules = (rule_set or default_rule_set()).rules_for(platform)
    return ValidationRun(manifest, platform, rules)


def validate_platforms(
    manifest: Any,
    platforms: Iterable[str],
    rule_set: RuleSet | None = None,
) -> dict[str, ValidationRun]:
    """Run validation for several platforms, keyed by platform identifier."""
    return {platform: run_all(manifest, platform, rule_set) for platform in platforms}
