# SPDX-License-Identifier: MIT
"""Exceptions raised by semantic version parsing and mutation."""

from __future__ import annotations

_FIELD_NAMES = {
    "major": "major version",
    "minor": "minor version",
    "patch": "patch version",
    "prerelease": "pre-release",
    "build": "build metadata",
}


class VersionError(ValueError):
    """Base class for all semantic version errors."""


class InvalidVersionFormat(VersionError):
    """Raised when a string does not follow semantic versioning."""

    def __init__(self, version: object, message: str = ""):
        self.version = version if isinstance(version, str) else repr(version)
        self.message = message or f"Invalid semantic version '{self.version}'"
        super().__init__(self.message)


class InvalidIdentifier(VersionError):
    """Raised when a single version field fails its grammar.

    Attributes:
        identifier: The rejected text
        field: Which field was being set ("major", "prerelease", "build", ...)
    """

    def __init__(self, identifier: object, field: str):
        self.identifier = identifier if isinstance(identifier, str) else repr(identifier)
        self.field = field
        self.message = f"Invalid {_FIELD_NAMES.get(field, field)} '{self.identifier}'"
        super().__init__(self.message)


class NotASnapshot(VersionError):
    """Raised when releasing a version that is not a snapshot."""

    def __init__(self, version: str, label: str = "SNAPSHOT"):
        self.version = version
        self.label = label
        self.message = f"Version '{version}' is not a {label} version! Unable to release"
        super().__init__(self.message)
