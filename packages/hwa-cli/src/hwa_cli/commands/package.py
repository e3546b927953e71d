# SPDX-License-Identifier: MIT
"""Build app packages for a generated Cordova project."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click

from cordova_platform import SUB_PLATFORMS, CordovaPlatformError

from ..config import ConfigError
from ..main import echo_error, echo_success, echo_warning, pass_context, Context


@click.command()
@click.option(
    "--platform",
    "-p",
    "platforms",
    multiple=True,
    type=click.Choice(list(SUB_PLATFORMS), case_sensitive=False),
    help="Platform to package (repeatable, defaults to [tool.hwa].platforms).",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the generated Cordova project.",
)
@pass_context
def package(ctx: Context, platforms: tuple[str, ...], output_dir: Optional[Path]) -> None:
    """Build app packages with cordova build.

    Platforms that cannot be built on this machine (iOS outside macOS) are
    skipped with a warning.
    """
    try:
        root_dir = ctx.resolve_output_dir(output_dir)
        platform = ctx.platform(platforms)
        built = asyncio.run(platform.package(root_dir))
    except (ConfigError, CordovaPlatformError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not built:
        echo_warning("No packages were built.")
        return

    echo_success(f"\nPackaging complete: {', '.join(built)}")
