# SPDX-License-Identifier: MIT
"""File helpers shared by the platform operations.

These write documentation, shortcuts and generation metadata into the
generated project tree.
"""

from __future__ import annotations

import json
import os
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from . import __version__
from .constants import GENERATION_INFO_FILENAME

if TYPE_CHECKING:
    from webapp_manifest import Manifest

DOCS_DIR = Path(__file__).parent / "docs"


def copy_documentation(target_dir: Path, platform: str) -> list[Path]:
    """Copy the bundled documentation for a sub-platform.

    Args:
        target_dir: Generated sub-platform folder
        platform: Sub-platform identifier

    Returns:
        Paths of the copied files

    Raises:
        FileNotFoundError: If no documentation is bundled for the platform
    """
    source = DOCS_DIR / platform
    if not source.is_dir():
        raise FileNotFoundError(f"No documentation bundled for platform '{platform}'")

    target_dir.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for doc in sorted(source.iterdir()):
        if doc.is_file():
            destination = target_dir / doc.name
            shutil.copy2(doc, destination)
            copied.append(destination)
    return copied


def create_shortcut(source: Path, destination: Path) -> Path:
    """Create a directory symlink at destination pointing at source.

    An existing symlink at destination is replaced.

    Raises:
        FileExistsError: If destination exists and is not a symlink
    """
    if destination.is_symlink():
        destination.unlink()
    elif destination.exists():
        raise FileExistsError(f"Cannot create shortcut, path already exists: {destination}")

    os.symlink(source, destination, target_is_directory=True)
    return destination


def generation_info(manifest: "Manifest") -> dict:
    """Build the generation metadata recorded in the project."""
    return {
        "generatedUsing": f"cordova-platform v{__version__}",
        "generatedFrom": manifest.generated_from or "CLI",
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }


def write_generation_info(manifest: "Manifest", directory: Path) -> Path:
    """Write generationInfo.json into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / GENERATION_INFO_FILENAME
    path.write_text(json.dumps(generation_info(manifest), indent=2), encoding="utf-8")
    return path
