# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and bumping.

This package implements the Semantic Versioning 2.0.0 grammar and precedence
rules on an immutable Version value.

Example:
    >>> from semver_core import Bump, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>> str(version.bump(Bump.PATCH))
    '1.2.4'
    >>> str(parse_version("0.2.1+b13").with_prerelease("rc.1"))
    '0.2.1-rc.1'
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .bump import Bump
from .errors import (
    VersionError,
    InvalidVersionFormat,
    InvalidIdentifier,
    NotASnapshot,
)
from .grammar import (
    Field,
    SEMVER_PATTERN,
    is_valid_field,
    is_valid_prerelease,
    is_valid_build,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    if_semver,
    to_string,
    bump,
    with_prerelease,
    with_build_metadata,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    version_key,
    sort_versions,
    max_version,
)
from .release import (
    SNAPSHOT,
    is_snapshot,
    release_snapshot,
    next_snapshot,
)

__all__ = [
    # Version value
    "Version",
    "Bump",
    "parse_version",
    "is_valid_semver",
    "if_semver",
    "to_string",
    "bump",
    "with_prerelease",
    "with_build_metadata",
    # Grammar
    "Field",
    "SEMVER_PATTERN",
    "is_valid_field",
    "is_valid_prerelease",
    "is_valid_build",
    # Comparison
    "compare_versions",
    "compare_prerelease",
    "version_key",
    "sort_versions",
    "max_version",
    # Release helpers
    "SNAPSHOT",
    "is_snapshot",
    "release_snapshot",
    "next_snapshot",
    # Errors
    "VersionError",
    "InvalidVersionFormat",
    "InvalidIdentifier",
    "NotASnapshot",
]
