# SPDX-License-Identifier: MIT
"""CLI entry point for the hwa command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from cordova_platform import CommandLocator, PLATFORM_ID, ProcessRunner, get_platform

from .config import CLIConfig, ConfigError, load_config

# Library loggers whose records are shown on the console
LOGGERS = ("cordova_platform", "webapp_manifest", "webapp_validation")


class Context:
    """CLI context object passed to commands.

    runner and host are passed through to the platform; None uses a real
    ProcessRunner and the current host.
    """

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.runner: Optional[ProcessRunner] = None
        self.host: Optional[str] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve_output_dir(self, output_dir: Optional[Path]) -> Path:
        """Resolve an --output-dir option against the project directory."""
        config = self.load_config()
        if output_dir is None:
            return config.output_dir
        if not output_dir.is_absolute():
            return config.project_dir / output_dir
        return output_dir

    def platform(self, platforms: Sequence[str]):
        """Build the Cordova platform for the given sub-platforms."""
        config = self.load_config()
        locator = CommandLocator(search_paths=config.search_paths, base_dir=config.project_dir)
        return get_platform(
            PLATFORM_ID,
            list(platforms) or config.platforms,
            locator=locator,
            runner=self.runner,
            host=self.host,
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


class ClickEchoHandler(logging.Handler):
    """Logging handler that prints records with the echo helpers."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                echo_error(message)
            elif record.levelno >= logging.WARNING:
                echo_warning(message)
            else:
                echo_info(message)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool) -> None:
    """Route library log records to the console."""
    level = logging.DEBUG if verbose else logging.INFO
    for name in LOGGERS:
        logger = logging.getLogger(name)
        for handler in [h for h in logger.handlers if isinstance(h, ClickEchoHandler)]:
            logger.removeHandler(handler)
        logger.addHandler(ClickEchoHandler())
        logger.setLevel(level)


@click.group()
@click.version_option(package_name="cordova-hosted-webapp-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Hosted web app packaging tool.

    Generate, package, and run Cordova apps for Android, iOS, and Windows
    from a web app manifest.

    \b
    Examples:
        hwa create manifest.json
        hwa create manifest.json -p android -p windows --crosswalk
        hwa package
        hwa run android
        hwa open windows
        hwa validate manifest.json --strict
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    setup_logging(verbose)


# Import and register commands
from .commands import create, open_project, package, run, validate

cli.add_command(create.create)
cli.add_command(package.package)
cli.add_command(run.run)
cli.add_command(open_project.open_project)
cli.add_command(validate.validate)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
