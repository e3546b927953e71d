# SPDX-License-Identifier: MIT
"""Cordova platform for hosted web apps.

This package drives the Cordova CLI to scaffold, configure, and package
hybrid apps for Android, iOS, and Windows from a web app manifest.

Example:
    >>> import asyncio
    >>> from webapp_manifest import load_manifest
    >>> from cordova_platform import CordovaPlatform, GenerationOptions
    >>>
    >>> platform = CordovaPlatform(["android", "windows"])
    >>> outcome = asyncio.run(
    ...     platform.create(load_manifest("manifest.json"), "out", GenerationOptions())
    ... )
    >>> outcome.failed
    []
"""

__version__ = "0.1.0"

from .constants import (
    HOSTED_WEBAPP_PLUGIN,
    HOSTED_WEBAPP_PLUGIN_ENV,
    PLATFORM_ID,
    PLATFORM_NAME,
    SUB_PLATFORMS,
    SubPlatform,
)
from .errors import (
    CordovaPlatformError,
    OrchestrationError,
    PackageNameError,
    PostProcessingError,
    PreconditionError,
    Stage,
    SubprocessError,
    ToolNotFoundError,
    UnknownPlatformError,
)
from .locator import CommandLocator, executable_name
from .package_name import derive_app_name, derive_package_name, sanitize_name
from .platform import (
    CordovaPlatform,
    GenerationOptions,
    GenerationOutcome,
    PlatformOutcome,
    plugin_list,
)
from .process import ProcessResult, ProcessRunner
from .registry import PlatformOrchestrator, PlatformRegistry, get_platform

__all__ = [
    # Constants
    "PLATFORM_ID",
    "PLATFORM_NAME",
    "SUB_PLATFORMS",
    "SubPlatform",
    "HOSTED_WEBAPP_PLUGIN",
    "HOSTED_WEBAPP_PLUGIN_ENV",
    # Errors
    "CordovaPlatformError",
    "OrchestrationError",
    "PackageNameError",
    "PostProcessingError",
    "PreconditionError",
    "Stage",
    "SubprocessError",
    "ToolNotFoundError",
    "UnknownPlatformError",
    # Locator
    "CommandLocator",
    "executable_name",
    # Package names
    "derive_app_name",
    "derive_package_name",
    "sanitize_name",
    # Orchestration
    "CordovaPlatform",
    "GenerationOptions",
    "GenerationOutcome",
    "PlatformOutcome",
    "plugin_list",
    "ProcessResult",
    "ProcessRunner",
    # Registry
    "PlatformOrchestrator",
    "PlatformRegistry",
    "get_platform",
]
