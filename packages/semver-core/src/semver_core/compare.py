# SPDX-License-Identifier: MIT
"""Version comparison following Semantic Versioning 2.0.0 precedence.

Pre-release versions sort below their release: 1.0.0-rc.1 < 1.0.0.
Build metadata is ignored unless explicitly requested.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Union

from .precedence import compare_fields, compare_prerelease
from .semver import Version, parse_version

VersionLike = Union[str, Version]

_precedence_key = cmp_to_key(lambda a, b: compare_versions(a, b))

__all__ = [
    "compare_versions",
    "compare_prerelease",
    "version_key",
    "sort_versions",
    "max_version",
]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    *,
    consider_build: bool = False,
) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        consider_build: Break precedence ties on the presence of build
            metadata; a version without build metadata then sorts after
            one with it. The content of the metadata is never compared.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionFormat: If either version string is invalid

    Note:
        A result of 0 does not mean the versions are equal: "1.0.0+a" and
        "1.0.0+b" compare as 0 but are different Version values.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+x", "1.0.0+y")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = compare_fields(
        (v1.major, v1.minor, v1.patch, v1.prerelease),
        (v2.major, v2.minor, v2.patch, v2.prerelease),
    )
    if result or not consider_build:
        return result

    if v1.build is None and v2.build is not None:
        return 1
    if v1.build is not None and v2.build is None:
        return -1
    return 0


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, consistent with compare_versions.

    The key compares through compare_versions itself. A plain tuple cannot
    reproduce the ordering, because identifiers such as "9", "10" and "1a"
    compare in a cycle.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _precedence_key(_coerce(version))


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.

    Raises:
        InvalidVersionFormat: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=version_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the highest-precedence version.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionFormat: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=version_key)
