# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
import stat
from pathlib import Path
from typing import Sequence

import pytest
from click.testing import CliRunner, Result

from cordova_platform import ProcessResult, SubprocessError
from hwa_cli.main import Context, cli

ANDROID_ICONS = ["48x48", "72x72", "96x96", "144x144", "192x192", "512x512"]


class RecordingRunner:
    """Records cordova invocations and creates the folders cordova would."""

    def __init__(self, fail_on: Sequence[str] = ()) -> None:
        self.calls: list[tuple[str, list[str], Path]] = []
        self.fail_on = set(fail_on)

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

        return ProcessResult(command=str(command), args=tuple(args), returncode=0)

    @property
    def arguments(self) -> list[list[str]]:
        return [args for _, args, _ in self.calls]


def write_manifest_file(path: Path, sizes: Sequence[str], **content) -> Path:
    """Write a manifest.json with one icon per size."""
    manifest = {
        "start_url": "https://www.example.com/",
        "short_name": "Example",
        "icons": [{"src": f"icon-{size}.png", "sizes": size} for size in sizes],
        **content,
    }
    path.write_text(json.dumps(manifest), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with [tool.hwa] configuration and a fake cordova command."""
    project_dir = tmp_path / "project"
    bin_dir = project_dir / "bin"
    bin_dir.mkdir(parents=True)

    cordova = bin_dir / "cordova"
    cordova.write_text("#!/bin/sh\n", encoding="utf-8")
    cordova.chmod(cordova.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "example-app"
version = "1.0.0"

[tool.hwa]
platforms = ["android", "ios"]
output_dir = "build"
search_paths = ["bin"]
"""
    )
    write_manifest_file(project_dir / "manifest.json", ANDROID_ICONS)
    return project_dir


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner instances with failing commands."""
    return RecordingRunner


@pytest.fixture
def write_manifest():
    """Factory writing manifest.json files with the given icon sizes."""
    return write_manifest_file


@pytest.fixture
def invoke(cli_runner: CliRunner, project: Path, runner: RecordingRunner):
    """Invoke hwa in the project with a recording runner on a Linux host.

    Keyword arguments override the runner and host.
    """

    def _invoke(
        args: Sequence[str],
        runner: RecordingRunner = runner,
        host: str = "linux",
    ) -> Result:
        context = Context()
        context.runner = runner
        context.host = host
        return cli_runner.invoke(cli, ["-C", str(project), *args], obj=context)

    return _invoke

