# SPDX-License-Identifier: MIT
"""Semantic version parsing and the immutable Version value.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
- An optional leading "v" or "V" is accepted on input but never rendered
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .bump import Bump
from .errors import InvalidIdentifier, InvalidVersionFormat
from .grammar import SEMVER_PATTERN, is_valid_build, is_valid_prerelease
from .precedence import compare_fields


def _check_number(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidIdentifier(str(value), field)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Instances are always valid: the constructor checks every field, and all
    mutators return new instances.

    Equality and hashing include build metadata, while ordering (``<``, ``>``
    and friends) follows SemVer precedence and ignores it. Two versions that
    differ only in build metadata compare as equal in precedence but are not
    equal values.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g., "alpha.1", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        _check_number(self.major, "major")
        _check_number(self.minor, "minor")
        _check_number(self.patch, "patch")

        # Empty strings mean "absent"
        if self.prerelease == "":
            object.__setattr__(self, "prerelease", None)
        if self.build == "":
            object.__setattr__(self, "build", None)

        if self.prerelease is not None and not is_valid_prerelease(self.prerelease):
            raise InvalidIdentifier(self.prerelease, "prerelease")
        if self.build is not None and not is_valid_build(self.build):
            raise InvalidIdentifier(self.build, "build")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    # Ordering by precedence. Build metadata never takes part.

    def _precedence(self, other: "Version") -> int:
        return compare_fields(
            (self.major, self.minor, self.patch, self.prerelease),
            (other.major, other.minor, other.patch, other.prerelease),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers."""
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated build metadata identifiers."""
        return tuple(self.build.split(".")) if self.build else ()

    def bump(self, kind: Union[Bump, str]) -> "Version":
        """Return a new version with the given part bumped.

        Every bump drops pre-release and build metadata:

        - MAJOR: 1.2.3-rc.1 -> 2.0.0
        - MINOR: 1.2.3-rc.1 -> 1.3.0
        - PATCH: 1.2.3-rc.1 -> 1.2.4
        - RELEASE: 1.2.3-rc.1 -> 1.2.3

        Raises:
            ValueError: If ``kind`` is not a Bump or the name of one
        """
        kind = Bump.coerce(kind)
        if kind is Bump.MAJOR:
            return Version(self.major + 1, 0, 0)
        if kind is Bump.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if kind is Bump.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return Version(self.major, self.minor, self.patch)

    def bump_major(self) -> "Version":
        return self.bump(Bump.MAJOR)

    def bump_minor(self) -> "Version":
        return self.bump(Bump.MINOR)

    def bump_patch(self) -> "Version":
        return self.bump(Bump.PATCH)

    def to_release(self) -> "Version":
        """Strip pre-release and build metadata, keeping the numeric core."""
        return self.bump(Bump.RELEASE)

    def with_prerelease(self, prerelease: str) -> "Version":
        """Return a new version with the given pre-release and no build metadata.

        Raises:
            InvalidIdentifier: If ``prerelease`` is not a valid pre-release string
        """
        if not is_valid_prerelease(prerelease):
            raise InvalidIdentifier(prerelease, "prerelease")
        return Version(self.major, self.minor, self.patch, prerelease)

    def with_build_metadata(self, build: str) -> "Version":
        """Return a new version with the given build metadata.

        The pre-release part is kept unchanged.

        Raises:
            InvalidIdentifier: If ``build`` is not a valid build metadata string
        """
        if not is_valid_build(build):
            raise InvalidIdentifier(build, "build")
        return Version(self.major, self.minor, self.patch, self.prerelease, build)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not stripped.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionFormat: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("v2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionFormat(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionFormat(version_string)

    # The pattern has already rejected leading zeros; int() only converts.
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("V1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def if_semver(version_string: str, action: Callable[[Version], object]) -> Optional[Version]:
    """Run ``action`` on the parsed version if ``version_string`` is valid.

    Returns:
        The parsed Version, or None (without calling ``action``) when the
        string is not a semantic version
    """
    if not is_valid_semver(version_string):
        return None
    version = parse_version(version_string)
    action(version)
    return version


def to_string(version: Version) -> str:
    """Render ``version`` in canonical form. Same as ``str(version)``."""
    return str(version)


def bump(version: Version, kind: Union[Bump, str]) -> Version:
    """Function form of Version.bump."""
    return version.bump(kind)


def with_prerelease(version: Version, prerelease: str) -> Version:
    """Function form of Version.with_prerelease."""
    return version.with_prerelease(prerelease)


def with_build_metadata(version: Version, build: str) -> Version:
    """Function form of Version.with_build_metadata."""
    return version.with_build_metadata(build)
