# SPDX-License-Identifier: MIT
"""Open a generated project in its IDE."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click

from cordova_platform import SUB_PLATFORMS, CordovaPlatformError

from ..config import ConfigError
from ..main import echo_error, echo_success, pass_context, Context


@click.command(name="open")
@click.argument(
    "platform_id",
    metavar="PLATFORM",
    type=click.Choice(list(SUB_PLATFORMS), case_sensitive=False),
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the generated Cordova project.",
)
@pass_context
def open_project(ctx: Context, platform_id: str, output_dir: Optional[Path]) -> None:
    """Open the IDE project for PLATFORM.

    Only Windows projects can be opened, and only on Windows.
    """
    try:
        root_dir = ctx.resolve_output_dir(output_dir)
        platform = ctx.platform([platform_id])
        project = asyncio.run(platform.open(root_dir))
    except (ConfigError, CordovaPlatformError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_success(f"Opened: {project}")
