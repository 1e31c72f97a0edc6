# SPDX-License-Identifier: MIT
"""Snapshot-based release helpers.

A snapshot is a pre-release whose label ends with ``SNAPSHOT``
(e.g. ``1.2.3-SNAPSHOT``). Releasing a snapshot strips the label; after a
release the next snapshot is created by bumping and re-adding the label.
"""

from __future__ import annotations

from typing import Union

from .bump import Bump
from .errors import NotASnapshot
from .semver import Version, parse_version

SNAPSHOT = "SNAPSHOT"


def is_snapshot(version: Union[str, Version], label: str = SNAPSHOT) -> bool:
    """Return True if the version's pre-release ends with ``label``."""
    v = parse_version(version) if isinstance(version, str) else version
    return v.prerelease is not None and v.prerelease.endswith(label)


def release_snapshot(version: Union[str, Version], label: str = SNAPSHOT) -> Version:
    """Turn a snapshot version into its release.

    Examples:
        >>> str(release_snapshot("1.2.3-SNAPSHOT"))
        '1.2.3'

    Raises:
        InvalidVersionFormat: If ``version`` is not a semantic version
        NotASnapshot: If ``version`` is not a snapshot version
    """
    v = parse_version(version) if isinstance(version, str) else version
    if not is_snapshot(v, label):
        raise NotASnapshot(str(version), label)
    return v.to_release()


def next_snapshot(
    version: Union[str, Version],
    kind: Union[Bump, str],
    label: str = SNAPSHOT,
) -> Version:
    """Create the next snapshot after ``version``.

    A version that already is a snapshot is returned unchanged.

    Examples:
        >>> str(next_snapshot("1.2.3", Bump.MINOR))
        '1.3.0-SNAPSHOT'

    Raises:
        InvalidVersionFormat: If ``version`` is not a semantic version
        InvalidIdentifier: If ``label`` is not a valid pre-release
    """
    v = parse_version(version) if isinstance(version, str) else version
    if is_snapshot(v, label):
        return v
    return v.bump(kind).with_prerelease(label)
