# SPDX-License-Identifier: MIT
"""Read-only commands: parse, validate, compare and sort versions."""

from __future__ import annotations

import json
from typing import Optional

import click

from semver_core import compare_versions, is_valid_semver, sort_versions

from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
    report_errors,
)


@click.command()
@click.argument("version", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the fields as JSON.")
@pass_context
def parse(ctx: Context, version: Optional[str], as_json: bool) -> None:
    """Parse VERSION and print its fields.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver parse --json v2.0.0
    """
    with report_errors():
        parsed = ctx.resolve_version(version)

    fields = {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": parsed.prerelease,
        "build": parsed.build,
    }

    if as_json:
        echo_info(json.dumps(fields))
        return

    for name, value in fields.items():
        echo_info(f"{name}: {'' if value is None else value}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("-q", "--quiet", is_flag=True, help="Only set the exit status.")
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION is a semantic version.

    Exits with status 1 if any version is invalid.
    """
    invalid = 0

    for version in versions:
        if is_valid_semver(version):
            if not quiet:
                echo_success(f"{version}: valid")
                if version[0] in "vV":
                    echo_warning(
                        f"{version}: the leading '{version[0]}' is not part of the canonical form"
                    )
        else:
            invalid += 1
            if not quiet:
                echo_error(f"{version}: not a semantic version")

    ctx.debug(f"{len(versions) - invalid} valid, {invalid} invalid")
    if invalid:
        raise SystemExit(1)


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--consider-build",
    is_flag=True,
    help="Rank a version without build metadata above an otherwise equal one with it.",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, consider_build: bool) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2.

    Build metadata is ignored unless --consider-build is given.
    """
    with report_errors():
        result = compare_versions(version1, version2, consider_build=consider_build)
    echo_info(str(result))


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Highest version first.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line."""
    with report_errors():
        ordered = sort_versions(versions, reverse=reverse)
    for version in ordered:
        echo_info(str(version))
