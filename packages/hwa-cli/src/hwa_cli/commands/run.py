# SPDX-License-Identifier: MIT
"""Run a generated app."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click

from cordova_platform import SUB_PLATFORMS, CordovaPlatformError

from ..config import ConfigError
from ..main import echo_error, pass_context, Context


@click.command()
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
def run(ctx: Context, platform_id: str, output_dir: Optional[Path]) -> None:
    """Run the app for PLATFORM on a device or emulator."""
    try:
        root_dir = ctx.resolve_output_dir(output_dir)
        platform = ctx.platform([platform_id])
        asyncio.run(platform.run(root_dir))
    except (ConfigError, CordovaPlatformError) as e:
        echo_error(str(e))
        raise SystemExit(1)
