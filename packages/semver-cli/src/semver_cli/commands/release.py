# SPDX-License-Identifier: MIT
"""Snapshot release workflow commands."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import SNAPSHOT, next_snapshot, release_snapshot

from ..main import Context, echo_info, pass_context, report_errors
from .mutate import BUMP_CHOICES


def _snapshot_label(ctx: Context, label: Optional[str], version: Optional[str]) -> str:
    """Pick the snapshot label: option, then project config, then default."""
    if label:
        return label
    if version is None:
        return ctx.load_config().snapshot_label
    return SNAPSHOT


@click.command()
@click.argument("version", required=False)
@click.option("--label", help=f"Snapshot label (default: {SNAPSHOT}).")
@pass_context
def release(ctx: Context, version: Optional[str], label: Optional[str]) -> None:
    """Release a snapshot VERSION by stripping its label.

    \b
    Examples:
        semver release 1.2.3-SNAPSHOT  # 1.2.3
    """
    with report_errors():
        current = ctx.resolve_version(version)
        label = _snapshot_label(ctx, label, version)
        ctx.debug(f"Releasing {current} (label {label})")
        echo_info(str(release_snapshot(current, label)))


@click.command()
@click.argument("kind", type=BUMP_CHOICES)
@click.argument("version", required=False)
@click.option("--label", help=f"Snapshot label (default: {SNAPSHOT}).")
@pass_context
def snapshot(ctx: Context, kind: str, version: Optional[str], label: Optional[str]) -> None:
    """Create the next snapshot after VERSION by bumping KIND.

    A VERSION that already is a snapshot is printed unchanged.

    \b
    Examples:
        semver snapshot minor 1.2.3    # 1.3.0-SNAPSHOT
    """
    with report_errors():
        current = ctx.resolve_version(version)
        label = _snapshot_label(ctx, label, version)
        echo_info(str(next_snapshot(current, kind, label)))
