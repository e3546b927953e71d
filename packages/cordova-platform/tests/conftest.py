# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for Cordova platform tests."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

from cordova_platform import CommandLocator, ProcessResult, SubprocessError
from webapp_manifest import Manifest


class FakeRunner:
    """Records commands instead of running them.

    Simulates the parts of the Cordova CLI the platform relies on: "create"
    makes the project folder and "platform add" makes the platform folders.

    Attributes:
        calls: (command, args, cwd) for every invocation, in order
        fail_on: First arguments (e.g., "plugin") whose invocation fails
        on_call: Optional hook invoked with (args, cwd) after each call
    """

    def __init__(
        self,
        fail_on: Sequence[str] = (),
        on_call: Optional[Callable[[list[str], Path], None]] = None,
    ) -> None:
        self.calls: list[tuple[str, list[str], Path]] = []
        self.fail_on = set(fail_on)
        self.on_call = on_call

    async def run(self, command, args, cwd) -> ProcessResult:
        args = [str(arg) for arg in args]
        cwd = Path(cwd)
        self.calls.append((str(command), args, cwd))

        if args and args[0] in self.fail_on:
            raise SubprocessError(str(command), args, 1, f"{args[0]} failed")

        if args[:1] == ["create"]:
            (cwd / args[1]).mkdir(parents=True, exist_ok=True)
        elif args[:2] == ["platform", "add"]:
            for platform in args[2:]:
                (cwd / "platforms" / platform).mkdir(parents=True, exist_ok=True)

        if self.on_call is not None:
            self.on_call(args, cwd)

        return ProcessResult(command=str(command), args=tuple(args), returncode=0)

    @property
    def arguments(self) -> list[list[str]]:
        return [args for _, args, _ in self.calls]


def make_executable(directory: Path, name: str) -> Path:
    """Create an empty executable file."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(name="make_executable")
def make_executable_fixture():
    """Factory creating empty executable files."""
    return make_executable


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """A directory containing a fake cordova executable."""
    directory = tmp_path / "bin"
    make_executable(directory, "cordova")
    return directory


@pytest.fixture
def locator(bin_dir: Path) -> CommandLocator:
    return CommandLocator(search_paths=[bin_dir], os_name="linux")


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances with custom failures or hooks."""
    return FakeRunner


@pytest.fixture
def manifest() -> Manifest:
    return Manifest.from_dict(
        {
            "start_url": "https://www.my-example.com/app/",
            "short_name": "My Example!",
            "icons": [{"src": "icon.png", "sizes": "48x48"}],
        },
        generated_from="tests",
    )


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path
