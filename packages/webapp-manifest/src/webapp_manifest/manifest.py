# SPDX-License-Identifier: MIT
"""Web app manifest model and persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .schema import MANIFEST_FILENAME, UPDATED_MANIFEST_FILENAME
from .validator import ManifestError, check_manifest_strict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconDescriptor:
    """A single entry of the manifest's icons member.

    Attributes:
        src: Image URL
        sizes: Space-separated WxH tokens (e.g., "48x48 96x96")
        type: Optional MIME type
    """

    src: str = ""
    sizes: str = ""
    type: str | None = None

    def size_tokens(self) -> list[str]:
        """Split the sizes member into individual WxH tokens."""
        if not isinstance(self.sizes, str):
            return []
        return self.sizes.split()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IconDescriptor":
        return cls(
            src=data.get("src", ""),
            sizes=data.get("sizes", ""),
            type=data.get("type"),
        )


@dataclass(frozen=True)
class Manifest:
    """A parsed web app manifest.

    The complete manifest content is kept in ``content`` so that members the
    packaging tools do not interpret survive persistence unchanged.

    Attributes:
        start_url: Absolute URL the app launches
        short_name: Short display name
        name: Full display name
        icons: Icon descriptors in manifest order
        content: Raw manifest content
        generated_from: Free-form description of where the manifest came from
    """

    start_url: str
    short_name: str = ""
    name: str = ""
    icons: tuple[IconDescriptor, ...] = ()
    content: dict[str, Any] = field(default_factory=dict, compare=False)
    generated_from: str | None = None

    @classmethod
    def from_dict(
        cls,
        content: Mapping[str, Any],
        generated_from: str | None = None,
    ) -> "Manifest":
        """Create a Manifest from parsed manifest.json content.

        Raises:
            ManifestValidationError: If the content does not match the schema
        """
        data = check_manifest_strict(dict(content))
        name = data.get("name", "")
        return cls(
            start_url=data["start_url"],
            short_name=data.get("short_name") or name,
            name=name,
            icons=tuple(IconDescriptor.from_dict(icon) for icon in data.get("icons", [])),
            content=data,
            generated_from=generated_from,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest content for serialization."""
        return dict(self.content)


def load_manifest(path: str | Path) -> Manifest:
    """Load and validate a manifest.json file.

    Raises:
        ManifestError: If the file cannot be read or is not valid JSON
        ManifestValidationError: If the content does not match the schema
    """
    manifest_path = Path(path)
    try:
        content = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest file not found: {manifest_path}") from None
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {e}") from e

    return Manifest.from_dict(content, generated_from=str(manifest_path))


def write_manifest(manifest: Manifest, path: str | Path) -> Path:
    """Serialize a manifest to a JSON file, creating parent directories."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(manifest.to_dict(), indent=2), encoding="utf-8")
    logger.debug("Wrote manifest to %s", output)
    return output


def consume_updated_manifest(directory: str | Path) -> bool:
    """Replace manifest.json with manifest.updated.json if one exists.

    The updated file is removed once it has been moved into place. Calling
    this again is a no-op.

    Returns:
        True if an updated manifest was consumed
    """
    directory = Path(directory)
    updated = directory / UPDATED_MANIFEST_FILENAME
    if not updated.is_file():
        return False

    updated.replace(directory / MANIFEST_FILENAME)
    logger.info("Replaced %s with the plugin-updated manifest", MANIFEST_FILENAME)
    return True
