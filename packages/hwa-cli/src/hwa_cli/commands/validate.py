# SPDX-License-Identifier: MIT
"""Validate a web app manifest against the platform icon rules."""

from __future__ import annotations

import json
from pathlib import Path

import click

from webapp_manifest import ManifestError, ManifestValidationError, load_manifest
from webapp_validation import ANDROID, IOS, WINDOWS, Levels, validate_platforms

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
    type=click.Choice([ANDROID, IOS, WINDOWS], case_sensitive=False),
    help="Platform to validate for (repeatable, defaults to [tool.hwa].platforms).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as errors.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the findings as JSON.",
)
@pass_context
def validate(
    ctx: Context,
    manifest_path: Path,
    platforms: tuple[str, ...],
    strict: bool,
    as_json: bool,
) -> None:
    """Check MANIFEST against the icon requirements of each platform.

    Suggestions never fail validation. Warnings fail it with --strict.

    \b
    Examples:
        hwa validate manifest.json                # All configured platforms
        hwa validate manifest.json -p windows     # Windows only
        hwa validate manifest.json --strict       # Treat warnings as errors
        hwa validate manifest.json --json         # Machine-readable output
    """
    try:
        cli_config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    try:
        manifest = load_manifest(manifest_path)
    except ManifestValidationError as e:
        echo_error(f"Manifest schema errors ({len(e.errors)}):")
        for error in e.errors:
            echo_error(f"  - [{error.field}] {error.message}")
        raise SystemExit(1)
    except ManifestError as e:
        echo_error(str(e))
        raise SystemExit(1)

    runs = validate_platforms(manifest, list(platforms) or cli_config.platforms)

    findings = {platform: run.findings() for platform, run in runs.items()}
    failures = [failure for run in runs.values() for failure in run.failures()]
    warnings = [
        result
        for results in findings.values()
        for result in results
        if result.level == Levels.WARNING
    ]

    if as_json:
        report = {
            "platforms": {
                platform: [result.to_dict() for result in results]
                for platform, results in findings.items()
            },
            "failures": [
                {"platform": f.platform, "rule": f.rule, "error": str(f.error)} for f in failures
            ],
        }
        click.echo(json.dumps(report, indent=2))
    else:
        echo_info(f"Validating: {manifest_path}")
        for platform, results in findings.items():
            if not results:
                echo_info(f"  {platform}: no findings")
                continue
            echo_info(f"  {platform}: {len(results)} finding(s)")
            for result in results:
                sizes = ", ".join(result.data)
                echo_info(f"    [{result.level}] {result.member} {result.code}: {sizes}")
                if ctx.verbose and result.description:
                    echo_info(f"      {result.description}")
        echo_info("")

    if failures:
        echo_error(f"Rule errors ({len(failures)}):")
        for failure in failures:
            echo_error(f"  - {failure.error}")
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    if warnings and strict:
        echo_error("\nValidation failed (strict mode)!")
        raise SystemExit(1)

    if as_json:
        return

    if warnings:
        echo_warning(f"Warnings ({len(warnings)}) found.")
        echo_success("\nValidation passed with warnings.")
    else:
        echo_success("\nValidation passed!")
