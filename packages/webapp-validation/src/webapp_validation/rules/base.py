# SPDX-License-Identifier: MIT
"""Icon size rules.

Two rule families are provided:

- RequiredImageRule: every listed size must be present in the manifest icons
- RequiredImageGroupRule: at least one of the listed sizes must be present

Rules are pure. They never perform I/O and never raise on malformed icon
entries; anything that is not a WxH token simply fails to match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from webapp_manifest import IconDescriptor

from ..constants import LEVELS, Codes, Levels, ManifestMembers


@dataclass(frozen=True)
class ValidationResult:
    """A finding about the manifest for one platform.

    Attributes:
        platform: Platform identifier (e.g., "ios")
        level: "suggestion" or "warning"
        member: Manifest member the finding refers to
        code: Finding code (e.g., "missingImage")
        data: Size tokens the manifest is missing
        description: Human-readable explanation (not part of to_dict())
    """

    platform: str
    level: str
    member: str
    code: str
    data: list[str] = field(default_factory=list)
    description: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the result in its serialized shape."""
        return {
            "platform": self.platform,
            "level": self.level,
            "member": self.member,
            "code": self.code,
            "data": list(self.data),
        }


def _iter_icons(manifest: Any) -> list[Any]:
    if manifest is None:
        return []
    if isinstance(manifest, Mapping):
        icons = manifest.get("icons")
    else:
        icons = getattr(manifest, "icons", None)
    if not icons or isinstance(icons, (str, bytes)):
        return []
    try:
        return list(icons)
    except TypeError:
        return []


def _icon_sizes(icon: Any) -> list[str]:
    if isinstance(icon, Mapping):
        icon = IconDescriptor.from_dict(icon)
    if not isinstance(icon, IconDescriptor):
        return []
    return icon.size_tokens()


def collect_sizes(manifest: Any) -> set[str]:
    """Collect every size token declared across all manifest icons.

    Args:
        manifest: A Manifest, a mapping of manifest content, or None

    Returns:
        Set of WxH tokens
    """
    sizes: set[str] = set()
    for icon in _iter_icons(manifest):
        sizes.update(_icon_sizes(icon))
    return sizes


@dataclass(frozen=True)
class _IconRule:
    id: str
    platform: str
    description: str
    sizes: tuple[str, ...]
    level: str = Levels.SUGGESTION

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"Invalid validation level: {self.level!r}")
        if not self.sizes:
            raise ValueError(f"Rule {self.id!r} must list at least one size")

    def _result(self, code: str, data: list[str]) -> ValidationResult:
        return ValidationResult(
            platform=self.platform,
            level=self.level,
            member=ManifestMembers.ICONS,
            code=code,
            data=data,
            description=self.description,
        )


@dataclass(frozen=True)
class RequiredImageRule(_IconRule):
    """Requires every listed size to appear somewhere in the manifest icons.

    The result's data lists the missing sizes in the rule's own order.
    """

    def __call__(self, manifest: Any) -> ValidationResult | None:
        present = collect_sizes(manifest)
        missing = [size for size in self.sizes if size not in present]
        if not missing:
            return None
        return self._result(Codes.MISSING_IMAGE, missing)


@dataclass(frozen=True)
class RequiredImageGroupRule(_IconRule):
    """Requires at least one of the listed sizes in the manifest icons.

    The result's data is the full list of accepted sizes.
    """

    def __call__(self, manifest: Any) -> ValidationResult | None:
        present = collect_sizes(manifest)
        if any(size in present for size in self.sizes):
            return None
        return self._result(Codes.MISSING_IMAGE_GROUP, list(self.sizes))
