# SPDX-License-Identifier: MIT
"""Exceptions raised by the Cordova platform."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence


class Stage(str, Enum):
    """Stages of app generation, in execution order."""

    CREATE_PROJECT = "create-project"
    PERSIST_MANIFEST = "persist-manifest"
    ADD_PLUGINS = "add-plugins"
    ADD_PLATFORMS = "add-platforms"
    UPDATE_MANIFEST = "update-manifest"
    WRITE_METADATA = "write-metadata"
    PACKAGE = "package"
    RUN = "run"
    OPEN = "open"


class CordovaPlatformError(Exception):
    """Base exception for Cordova platform errors."""

    pass


class ToolNotFoundError(CordovaPlatformError):
    """Raised when the Cordova command cannot be located."""

    def __init__(self, tool: str, searched: Iterable[Path] = ()) -> None:
        self.tool = tool
        self.searched = list(searched)
        super().__init__(f"Failed to locate the Cordova shell command: '{tool}'.")


class SubprocessError(CordovaPlatformError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        command: Executable that was run
        args: Arguments passed to the executable
        returncode: Exit status, or None if the process never started or timed out
        output: Combined stdout and stderr
    """

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        returncode: int | None,
        output: str = "",
        reason: str | None = None,
    ) -> None:
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        cmdline = " ".join([Path(command).name, *self.args_list])
        if reason is None:
            reason = f"exited with status {returncode}"
        message = f"'{cmdline}' {reason}"
        if output.strip():
            message += f"\n{output.strip()}"
        super().__init__(message)


class PreconditionError(CordovaPlatformError):
    """Raised when an operation is not possible in the current environment."""

    pass


class PackageNameError(CordovaPlatformError):
    """Raised when a package name cannot be derived from a start URL."""

    pass


class UnknownPlatformError(CordovaPlatformError):
    """Raised for platform identifiers that are not supported."""

    pass


class OrchestrationError(CordovaPlatformError):
    """Raised when a generation stage fails and the run is aborted.

    Attributes:
        stage: The stage that failed
    """

    def __init__(self, stage: Stage, message: str, cause: BaseException | None = None) -> None:
        self.stage = stage
        self.cause = cause
        if cause is not None:
            message = f"{message}\n{cause}"
        super().__init__(message)


class PostProcessingError(CordovaPlatformError):
    """Raised when post-processing a single sub-platform fails.

    Attributes:
        platform: Sub-platform identifier
        cause: The underlying error
    """

    def __init__(self, platform: str, cause: BaseException) -> None:
        self.platform = platform
        self.cause = cause
        super().__init__(f"Failed to process the '{platform}' Cordova platform: {cause}")
