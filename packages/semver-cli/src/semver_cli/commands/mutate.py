# SPDX-License-Identifier: MIT
"""Commands deriving a new version from an existing one."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import Bump

from ..main import Context, echo_info, pass_context, report_errors

BUMP_CHOICES = click.Choice([kind.value for kind in Bump], case_sensitive=False)


@click.command()
@click.argument("kind", type=BUMP_CHOICES)
@click.argument("version", required=False)
@pass_context
def bump(ctx: Context, kind: str, version: Optional[str]) -> None:
    """Bump the KIND part of VERSION.

    KIND is major, minor, patch or release. Pre-release and build
    metadata are always dropped.

    \b
    Examples:
        semver bump minor 1.2.3-rc.1   # 1.3.0
        semver bump release 1.2.3-rc.1 # 1.2.3
    """
    with report_errors():
        current = ctx.resolve_version(version)
        echo_info(str(current.bump(kind)))


@click.command()
@click.argument("label")
@click.argument("version", required=False)
@pass_context
def prerelease(ctx: Context, label: str, version: Optional[str]) -> None:
    """Set the pre-release of VERSION to LABEL, dropping build metadata."""
    with report_errors():
        current = ctx.resolve_version(version)
        echo_info(str(current.with_prerelease(label)))


@click.command()
@click.argument("metadata")
@click.argument("version", required=False)
@pass_context
def build(ctx: Context, metadata: str, version: Optional[str]) -> None:
    """Set the build metadata of VERSION to METADATA."""
    with report_errors():
        current = ctx.resolve_version(version)
        echo_info(str(current.with_build_metadata(metadata)))
