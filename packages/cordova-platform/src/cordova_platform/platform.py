# SPDX-License-Identifier: MIT
"""Cordova platform: generates, packages, runs, and opens hybrid apps.

App generation drives the Cordova CLI through these stages:

1. Resolve the cordova command
2. Create the base Cordova project
3. Persist the manifest into the project
4. Add the plugins
5. Add the sub-platforms
6. Post-process every sub-platform concurrently (documentation, shortcut,
   generation metadata)
7. Write the project generation metadata

A failure in stages 1-5 or 7 aborts the run. Stage 6 failures are collected per
sub-platform in the GenerationOutcome without affecting the other
sub-platforms.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from webapp_manifest import MANIFEST_FILENAME, Manifest, consume_updated_manifest, write_manifest

from .constants import (
    CORDOVA_TOOL,
    CROSSWALK_PLUGIN,
    PLATFORM_ID,
    PLATFORM_NAME,
    SUB_PLATFORMS,
    WEB_APP_TOOLKIT_PLUGIN,
    WEB_APP_TOOLKIT_URL,
    WHITELIST_PLUGIN,
    SubPlatform,
    hosted_webapp_plugin,
)
from .errors import (
    OrchestrationError,
    PostProcessingError,
    PreconditionError,
    Stage,
    SubprocessError,
    UnknownPlatformError,
)
from .locator import CommandLocator
from .package_name import derive_app_name, derive_package_name
from .process import ProcessResult, ProcessRunner
from .support import copy_documentation, create_shortcut, write_generation_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOptions:
    """Feature flags for app generation.

    Attributes:
        crosswalk: Add the Crosswalk web view plugin
        web_app_toolkit: Add the Web App Toolkit plugin (requires manual steps)
    """

    crosswalk: bool = False
    web_app_toolkit: bool = False


@dataclass(frozen=True)
class PlatformOutcome:
    """Post-processing outcome for one sub-platform."""

    platform: str
    error: PostProcessingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GenerationOutcome:
    """Outcome of app generation, one entry per selected sub-platform."""

    platform_dir: Path
    package_name: str
    app_name: str
    outcomes: tuple[PlatformOutcome, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> list[str]:
        return [o.platform for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[PlatformOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def _select_sub_platforms(platforms: Iterable[str]) -> list[str]:
    selected: list[str] = []
    for platform in platforms:
        platform_id = platform.lower()
        if platform_id not in SUB_PLATFORMS:
            available = ", ".join(SUB_PLATFORMS)
            raise UnknownPlatformError(
                f"Unknown Cordova platform: '{platform}'. Available platforms: {available}"
            )
        if platform_id not in selected:
            selected.append(platform_id)
    if not selected:
        raise UnknownPlatformError("At least one Cordova platform must be selected")
    return selected


def plugin_list(options: GenerationOptions) -> list[str]:
    """List the plugins to add for the given options, in install order."""
    plugins = [hosted_webapp_plugin()]
    if options.crosswalk:
        plugins.append(CROSSWALK_PLUGIN)
    if options.web_app_toolkit:
        plugins.append(WEB_APP_TOOLKIT_PLUGIN)
    plugins.append(WHITELIST_PLUGIN)
    return plugins


class CordovaPlatform:
    """Generates and manages Cordova apps for a set of sub-platforms.

    Attributes:
        platforms: Selected sub-platform identifiers, in selection order
        locator: Resolves the cordova command
        runner: Runs external commands
        host: sys.platform value of the machine running the tools
    """

    id = PLATFORM_ID
    name = PLATFORM_NAME

    def __init__(
        self,
        platforms: Sequence[str],
        locator: CommandLocator | None = None,
        runner: ProcessRunner | None = None,
        host: str | None = None,
    ) -> None:
        self.platforms = _select_sub_platforms(platforms)
        self.locator = locator or CommandLocator()
        self.runner = runner or ProcessRunner()
        self.host = host or sys.platform

    @property
    def sub_platforms(self) -> list[SubPlatform]:
        return [SUB_PLATFORMS[platform] for platform in self.platforms]

    def _platform_names(self) -> str:
        return ", ".join(p.name for p in self.sub_platforms)

    async def _cordova(self, args: Sequence[str], cwd: Path) -> ProcessResult:
        return await self.runner.run(self.locator.resolve(CORDOVA_TOOL), args, cwd)

    # -- create ---------------------------------------------------------------

    async def create(
        self,
        manifest: Manifest,
        root_dir: str | Path,
        options: GenerationOptions | None = None,
    ) -> GenerationOutcome:
        """Generate the Cordova project for every selected sub-platform.

        Args:
            manifest: Web app manifest driving the generation
            root_dir: Output directory; the project goes into <root_dir>/cordova
            options: Plugin feature flags

        Returns:
            GenerationOutcome listing the post-processing result per sub-platform

        Raises:
            ToolNotFoundError: If the cordova command cannot be located
            PackageNameError: If no package name can be derived from start_url
            OrchestrationError: If a generation stage fails
        """
        options = options or GenerationOptions()
        root = Path(root_dir)
        platform_dir = root / PLATFORM_ID

        logger.info("Generating the %s app(s)...", self._platform_names())

        package_name = derive_package_name(manifest.start_url)
        app_name = derive_app_name(manifest.short_name)

        self.locator.resolve(CORDOVA_TOOL)

        await self._create_project(root, package_name, app_name)
        self._persist_manifest(manifest, platform_dir)
        await self._add_plugins(platform_dir, options)
        await self._add_platforms(platform_dir)
        self._update_manifest(platform_dir)

        outcomes = await self._process_platforms(manifest, root, platform_dir)
        self._write_metadata(manifest, platform_dir)

        outcome = GenerationOutcome(
            platform_dir=platform_dir,
            package_name=package_name,
            app_name=app_name,
            outcomes=tuple(outcomes),
        )
        if outcome.ok:
            logger.info("The %s apps were created successfully!", PLATFORM_NAME)
        else:
            failed = ", ".join(o.platform for o in outcome.failed)
            logger.error(
                "The %s apps were created, but these platforms failed: %s", PLATFORM_NAME, failed
            )
        return outcome

    async def _create_project(self, root: Path, package_name: str, app_name: str) -> None:
        logger.info("Creating the %s project...", PLATFORM_NAME)
        try:
            root.mkdir(parents=True, exist_ok=True)
            await self._cordova(["create", PLATFORM_ID, package_name, app_name], root)
        except (OSError, SubprocessError) as e:
            raise OrchestrationError(
                Stage.CREATE_PROJECT, "Failed to create the base Cordova application.", e
            ) from e

    def _persist_manifest(self, manifest: Manifest, platform_dir: Path) -> None:
        logger.info("Copying the %s manifest to the app folder...", PLATFORM_NAME)
        try:
            write_manifest(manifest, platform_dir / MANIFEST_FILENAME)
        except OSError as e:
            raise OrchestrationError(
                Stage.PERSIST_MANIFEST, "Failed to copy the manifest to the app folder.", e
            ) from e

    async def _add_plugins(self, platform_dir: Path, options: GenerationOptions) -> None:
        plugins = plugin_list(options)

        if options.web_app_toolkit:
            logger.warning("*" * 79)
            logger.warning("The WAT plugin requires you to perform manual steps before running the app")
            logger.warning("Follow the steps described here: %s", WEB_APP_TOOLKIT_URL)
            logger.warning("*" * 79)

        all_plugins = " ".join(plugins)
        logger.info("Adding the following plugins to the Cordova project: %s...", all_plugins)
        try:
            await self._cordova(["plugin", "add", *plugins], platform_dir)
        except SubprocessError as e:
            raise OrchestrationError(
                Stage.ADD_PLUGINS, f"Failed to add one or more plugins: {all_plugins}.", e
            ) from e

    async def _add_platforms(self, platform_dir: Path) -> None:
        all_platforms = " ".join(self.platforms)
        logger.info("Adding the following Cordova platforms: %s...", all_platforms)
        try:
            await self._cordova(["platform", "add", *self.platforms], platform_dir)
        except SubprocessError as e:
            raise OrchestrationError(
                Stage.ADD_PLATFORMS, f"Failed to add the Cordova platforms: {all_platforms}.", e
            ) from e

    def _update_manifest(self, platform_dir: Path) -> None:
        try:
            consume_updated_manifest(platform_dir)
        except OSError as e:
            raise OrchestrationError(
                Stage.UPDATE_MANIFEST, "Failed to apply the manifest updated by the plugins.", e
            ) from e

    def _write_metadata(self, manifest: Manifest, platform_dir: Path) -> None:
        try:
            write_generation_info(manifest, platform_dir)
        except OSError as e:
            raise OrchestrationError(
                Stage.WRITE_METADATA, "Failed to write the generation metadata.", e
            ) from e

    async def _process_platforms(
        self,
        manifest: Manifest,
        root: Path,
        platform_dir: Path,
    ) -> list[PlatformOutcome]:
        results = await asyncio.gather(
            *(self._process_platform(manifest, root, platform_dir, p) for p in self.platforms),
            return_exceptions=True,
        )

        outcomes: list[PlatformOutcome] = []
        for platform, result in zip(self.platforms, results):
            if isinstance(result, PostProcessingError):
                logger.error(str(result))
                outcomes.append(PlatformOutcome(platform, result))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(PlatformOutcome(platform))
        return outcomes

    async def _process_platform(
        self,
        manifest: Manifest,
        root: Path,
        platform_dir: Path,
        platform: str,
    ) -> None:
        logger.info("Processing the '%s' Cordova platform...", platform)
        sub_platform = SUB_PLATFORMS[platform]
        platform_path = platform_dir / "platforms" / platform

        try:
            await asyncio.to_thread(copy_documentation, platform_path, platform)

            if sub_platform.shortcut:
                logger.info("Creating a shortcut for the '%s' Cordova platform...", platform)
                await asyncio.to_thread(
                    create_shortcut, platform_path.absolute(), (root / platform).absolute()
                )

            await asyncio.to_thread(write_generation_info, manifest, platform_path)
        except Exception as e:
            raise PostProcessingError(platform, e) from e

    # -- package --------------------------------------------------------------

    def buildable_platforms(self) -> list[str]:
        """Select the sub-platforms that can be packaged on this host."""
        buildable: list[str] = []
        for sub_platform in self.sub_platforms:
            if sub_platform.build_host and sub_platform.build_host != self.host:
                logger.warning(
                    "Packaging apps for the '%s' is not supported in this environment.",
                    sub_platform.name,
                )
                continue
            buildable.append(sub_platform.id)
        return buildable

    async def package(self, root_dir: str | Path) -> list[str]:
        """Build app packages for the sub-platforms supported on this host.

        Returns:
            Identifiers of the sub-platforms that were built

        Raises:
            ToolNotFoundError: If the cordova command cannot be located
            OrchestrationError: If the build fails
        """
        logger.info(
            "Creating app packages for the following Cordova platforms: %s...",
            self._platform_names(),
        )

        platforms = self.buildable_platforms()
        if not platforms:
            logger.warning("None of the selected platforms can be packaged in this environment.")
            return []

        platform_dir = Path(root_dir) / PLATFORM_ID
        try:
            await self._cordova(["build", *platforms], platform_dir)
        except SubprocessError as e:
            raise OrchestrationError(
                Stage.PACKAGE,
                f"There was an error packaging one or more {PLATFORM_NAME} apps.",
                e,
            ) from e

        logger.info("The %s app was packaged successfully!", PLATFORM_NAME)
        return platforms

    # -- run / open -----------------------------------------------------------

    async def run(self, root_dir: str | Path) -> None:
        """Run the app for the first selected sub-platform.

        Raises:
            PreconditionError: If the sub-platform cannot run on this host
            OrchestrationError: If cordova run fails
        """
        sub_platform = self.sub_platforms[0]
        if sub_platform.run_host and sub_platform.run_host != self.host:
            raise PreconditionError(
                f"{sub_platform.name} projects can only be executed in "
                f"{_host_name(sub_platform.run_host)} environments."
            )

        logger.info("Running app for the %s platform...", sub_platform.id)
        platform_dir = Path(root_dir) / PLATFORM_ID
        try:
            await self._cordova(["run", sub_platform.id], platform_dir)
        except SubprocessError as e:
            raise OrchestrationError(
                Stage.RUN, f"Failed to run the Cordova platform: {sub_platform.id}.", e
            ) from e

    async def open(self, root_dir: str | Path) -> Path:
        """Open the IDE project of the first selected sub-platform.

        Only Windows has an IDE project, and it can only be opened on Windows.

        Returns:
            Path of the opened project file

        Raises:
            PreconditionError: If the sub-platform, host, or project is unsuitable
        """
        sub_platform = self.sub_platforms[0]
        if sub_platform.ide_project is None:
            raise PreconditionError(
                f"The 'open' command is not implemented for the '{sub_platform.id}' platform."
            )
        if sub_platform.open_host and sub_platform.open_host != self.host:
            raise PreconditionError(
                f"Visual Studio projects can only be opened in "
                f"{_host_name(sub_platform.open_host)} environments."
            )

        platform_dir = Path(root_dir) / PLATFORM_ID
        project = platform_dir / "platforms" / sub_platform.id / sub_platform.ide_project
        if not project.is_file():
            raise PreconditionError(f"Project file not found: {project}")

        logger.info("Opening %s...", project)
        try:
            await self.runner.run("cmd", ["/c", "start", "", str(project)], platform_dir)
        except SubprocessError as e:
            raise OrchestrationError(Stage.OPEN, f"Failed to open {project}.", e) from e
        return project


def _host_name(host: str) -> str:
    return {"win32": "Windows", "darwin": "macOS"}.get(host, host)
