# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from cordova_platform import SUB_PLATFORMS

DEFAULT_PLATFORMS = ("android", "ios", "windows")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the [tool.hwa] table of pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        platforms: Default sub-platforms to target
        crosswalk: Add the Crosswalk plugin by default
        web_app_toolkit: Add the Web App Toolkit plugin by default
        output_dir: Directory the Cordova project is generated into
        search_paths: Directories searched for the cordova command
            (None searches PATH)
    """

    project_dir: Path
    platforms: list[str] = field(default_factory=lambda: list(DEFAULT_PLATFORMS))
    crosswalk: bool = False
    web_app_toolkit: bool = False
    output_dir: Optional[Path] = None
    search_paths: Optional[list[Path]] = None

    def __post_init__(self) -> None:
        if self.output_dir is None:
            self.output_dir = self.project_dir

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        A missing pyproject.toml yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or [tool.hwa] is invalid
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Relative paths in [tool.hwa] are resolved against project_dir.

        Raises:
            ConfigError: If a [tool.hwa] value has the wrong type or names an
                unknown platform
        """
        tool_hwa = pyproject.get("tool", {}).get("hwa", {})
        if not isinstance(tool_hwa, dict):
            raise ConfigError("[tool.hwa] must be a table")

        platforms = tool_hwa.get("platforms", list(DEFAULT_PLATFORMS))
        if not isinstance(platforms, list) or not all(isinstance(p, str) for p in platforms):
            raise ConfigError("[tool.hwa].platforms must be a list of strings")
        platforms = [p.lower() for p in platforms]
        unknown = [p for p in platforms if p not in SUB_PLATFORMS]
        if unknown:
            raise ConfigError(
                f"Unknown platform(s) in [tool.hwa].platforms: {', '.join(unknown)}. "
                f"Available platforms: {', '.join(SUB_PLATFORMS)}"
            )

        for flag in ("crosswalk", "web_app_toolkit"):
            if not isinstance(tool_hwa.get(flag, False), bool):
                raise ConfigError(f"[tool.hwa].{flag} must be true or false")

        output_dir = None
        if "output_dir" in tool_hwa:
            if not isinstance(tool_hwa["output_dir"], str):
                raise ConfigError("[tool.hwa].output_dir must be a string")
            output_dir = project_dir / tool_hwa["output_dir"]

        search_paths = None
        if "search_paths" in tool_hwa:
            raw_paths = tool_hwa["search_paths"]
            if not isinstance(raw_paths, list) or not all(isinstance(p, str) for p in raw_paths):
                raise ConfigError("[tool.hwa].search_paths must be a list of strings")
            search_paths = [project_dir / p for p in raw_paths]

        return cls(
            project_dir=project_dir,
            platforms=platforms,
            crosswalk=tool_hwa.get("crosswalk", False),
            web_app_toolkit=tool_hwa.get("web_app_toolkit", False),
            output_dir=output_dir,
            search_paths=search_paths,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the nearest directory holding a pyproject.toml.

    Falls back to start_dir (or the current directory) when there is none.
    """
    start = (Path(start_dir) if start_dir else Path.cwd()).resolve()

    current = start
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return start


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()

    return CLIConfig.from_pyproject(Path(project_dir))
