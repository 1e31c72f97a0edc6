# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import click

from semver_core import Version, VersionError, parse_version

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve_version(self, version: Optional[str]) -> Version:
        """Parse ``version``, falling back to the project version.

        Raises:
            ConfigError: If no version is given and the project has none
            InvalidVersionFormat: If the version is not a semantic version
        """
        if version is None:
            config = self.load_config()
            if not config.version:
                raise ConfigError(
                    f"No [project].version found in {config.project_dir / 'pyproject.toml'}"
                )
            version = config.version
            self.debug(f"Using project version {version}")
        return parse_version(version)

    def debug(self, message: str) -> None:
        """Print a message only in verbose mode."""
        if self.verbose:
            click.secho(message, fg="cyan", err=True)


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


@contextmanager
def report_errors() -> Iterator[None]:
    """Report version and configuration errors, then exit with status 1."""
    try:
        yield
    except (ConfigError, VersionError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-tool")
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
    help="Read the project version from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Parse, validate, compare and bump Semantic Versioning 2.0.0 versions.
    Commands that take an optional VERSION use the project's
    [project].version from pyproject.toml when it is omitted.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver compare 1.0.0-beta.2 1.0.0-beta.11
        semver bump minor 1.2.3
        semver snapshot patch
        semver release 1.3.0-SNAPSHOT
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import query, mutate, release

cli.add_command(query.parse)
cli.add_command(query.validate)
cli.add_command(query.compare)
cli.add_command(query.sort)
cli.add_command(mutate.bump)
cli.add_command(mutate.prerelease)
cli.add_command(mutate.build)
cli.add_command(release.release)
cli.add_command(release.snapshot)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
