# SPDX-License-Identifier: MIT
"""Generate Cordova apps from a web app manifest."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click

from cordova_platform import SUB_PLATFORMS, CordovaPlatformError, GenerationOptions
from webapp_manifest import ManifestError, load_manifest

from ..config import ConfigError
from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context


@click.command()
@click.argument(
    "manifest_path",
    metavar="MANIFEST",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--platform",
    "-p",
    "platforms",
    multiple=True,
    type=click.Choice(list(SUB_PLATFORMS), case_sensitive=False),
    help="Platform to generate (repeatable, defaults to [tool.hwa].platforms).",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory the Cordova project is generated into.",
)
@click.option(
    "--crosswalk/--no-crosswalk",
    default=None,
    help="Add the Crosswalk web view plugin.",
)
@click.option(
    "--web-app-toolkit/--no-web-app-toolkit",
    default=None,
    help="Add the Web App Toolkit plugin (requires manual steps).",
)
@pass_context
def create(
    ctx: Context,
    manifest_path: Path,
    platforms: tuple[str, ...],
    output_dir: Optional[Path],
    crosswalk: Optional[bool],
    web_app_toolkit: Optional[bool],
) -> None:
    """Generate a Cordova project from MANIFEST.

    The project is created in <output-dir>/cordova, with a shortcut to each
    generated platform folder next to it.

    \b
    Examples:
        hwa create manifest.json                     # All configured platforms
        hwa create manifest.json -p android -p ios   # Selected platforms
        hwa create manifest.json --crosswalk         # Add Crosswalk
    """
    try:
        cli_config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    try:
        manifest = load_manifest(manifest_path)
    except ManifestError as e:
        echo_error(str(e))
        raise SystemExit(1)

    options = GenerationOptions(
        crosswalk=cli_config.crosswalk if crosswalk is None else crosswalk,
        web_app_toolkit=cli_config.web_app_toolkit if web_app_toolkit is None else web_app_toolkit,
    )
    root_dir = ctx.resolve_output_dir(output_dir)

    if ctx.verbose:
        echo_info(f"Manifest: {manifest_path}")
        echo_info(f"Output directory: {root_dir}")

    try:
        platform = ctx.platform(platforms)
        outcome = asyncio.run(platform.create(manifest, root_dir, options))
    except CordovaPlatformError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_success(f"\nProject created: {outcome.platform_dir}")
    echo_info(f"  Package: {outcome.package_name}")
    echo_info(f"  App name: {outcome.app_name}")

    if not outcome.ok:
        failed = ", ".join(o.platform for o in outcome.failed)
        echo_warning(f"These platforms could not be completed: {failed}")
