# SPDX-License-Identifier: MIT
"""Locating the Cordova command.

A CommandLocator caches each resolved command for its own lifetime. Create a
new locator (or call reset()) to search again.
"""

from __future__ import annotations

import os
import shutil
import sys
import threading
from pathlib import Path
from typing import Sequence

from .errors import ToolNotFoundError


def executable_name(tool: str, os_name: str | None = None) -> str:
    """Get the platform-specific executable name for an npm-installed tool.

    npm installs batch files on Windows, and the extension is needed for the
    command to be spawned directly.

    Args:
        tool: Base command name (e.g., "cordova")
        os_name: sys.platform value (defaults to the current host)
    """
    os_name = os_name or sys.platform
    if os_name == "win32":
        return f"{tool}.cmd"
    return tool


class CommandLocator:
    """Resolves and caches paths to external commands.

    Search order:
    1. node_modules/.bin in base_dir and each of its parents
    2. search_paths (defaults to the PATH environment variable)

    Attributes:
        search_paths: Directories to search after node_modules/.bin
        base_dir: Directory where the node_modules search starts
    """

    def __init__(
        self,
        search_paths: Sequence[str | Path] | None = None,
        base_dir: str | Path | None = None,
        os_name: str | None = None,
    ) -> None:
        self.search_paths = list(search_paths) if search_paths is not None else None
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.os_name = os_name or sys.platform
        self._cache: dict[str, Path] = {}
        self._lock = threading.Lock()

    def search_locations(self) -> list[Path]:
        """List the directories searched, in order."""
        locations: list[Path] = []

        if self.base_dir is not None:
            current = self.base_dir.absolute()
            while True:
                locations.append(current / "node_modules" / ".bin")
                if current == current.parent:
                    break
                current = current.parent

        if self.search_paths is not None:
            locations.extend(Path(p) for p in self.search_paths)
        else:
            path_env = os.environ.get("PATH", "")
            locations.extend(Path(p) for p in path_env.split(os.pathsep) if p)

        return locations

    def resolve(self, tool: str) -> Path:
        """Get the absolute path of a command, searching only on first use.

        Raises:
            ToolNotFoundError: If the command is not in any search location
        """
        with self._lock:
            cached = self._cache.get(tool)
            if cached is not None:
                return cached

            name = executable_name(tool, self.os_name)
            locations = self.search_locations()
            for location in locations:
                found = shutil.which(name, path=str(location))
                if found:
                    path = Path(found).absolute()
                    self._cache[tool] = path
                    return path

        raise ToolNotFoundError(name, locations)

    def is_cached(self, tool: str) -> bool:
        return tool in self._cache

    def reset(self) -> None:
        """Forget every cached path."""
        with self._lock:
            self._cache.clear()
