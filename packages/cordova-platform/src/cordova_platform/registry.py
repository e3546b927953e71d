# SPDX-License-Identifier: MIT
"""Platform registry.

Maps a platform identifier to a factory that builds the orchestrator for a
set of sub-platforms. Every orchestrator provides the same four operations:
create, package, run and open.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Protocol, Sequence

from .constants import PLATFORM_ID
from .errors import UnknownPlatformError
from .platform import CordovaPlatform

if TYPE_CHECKING:
    from webapp_manifest import Manifest

    from .platform import GenerationOptions, GenerationOutcome


class PlatformOrchestrator(Protocol):
    """Operations every registered platform provides."""

    id: str
    name: str

    async def create(
        self,
        manifest: "Manifest",
        root_dir: str | Path,
        options: "GenerationOptions | None" = None,
    ) -> "GenerationOutcome": ...

    async def package(self, root_dir: str | Path) -> list[str]: ...

    async def run(self, root_dir: str | Path) -> None: ...

    async def open(self, root_dir: str | Path) -> Path: ...


PlatformFactory = Callable[..., PlatformOrchestrator]


class PlatformRegistry:
    """Central registry of platform factories."""

    _factories: dict[str, PlatformFactory] = {}

    @classmethod
    def register_factory(cls, platform_id: str, factory: PlatformFactory) -> None:
        """Register a factory for a platform identifier.

        Example:
            >>> PlatformRegistry.register_factory("cordova", CordovaPlatform)
        """
        cls._factories[platform_id] = factory

    @classmethod
    def create(
        cls,
        platform_id: str,
        platforms: Sequence[str],
        **kwargs: Any,
    ) -> PlatformOrchestrator:
        """Build the orchestrator registered for a platform identifier.

        Args:
            platform_id: Registered platform identifier (e.g., "cordova")
            platforms: Sub-platforms to target
            **kwargs: Passed to the factory (locator, runner, host)

        Raises:
            UnknownPlatformError: If platform_id is not registered
        """
        if platform_id not in cls._factories:
            available = ", ".join(cls._factories) or "none"
            raise UnknownPlatformError(
                f"Unknown platform: '{platform_id}'. Available platforms: {available}"
            )
        return cls._factories[platform_id](platforms, **kwargs)

    @classmethod
    def available(cls) -> list[str]:
        return list(cls._factories)


PlatformRegistry.register_factory(PLATFORM_ID, CordovaPlatform)


def get_platform(platform_id: str, platforms: Sequence[str], **kwargs: Any) -> PlatformOrchestrator:
    """Shorthand for PlatformRegistry.create."""
    return PlatformRegistry.create(platform_id, platforms, **kwargs)
