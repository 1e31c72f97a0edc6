# SPDX-License-Identifier: MIT
"""The version parts that can be bumped."""

from __future__ import annotations

from enum import Enum
from typing import Union


class Bump(str, Enum):
    """Part of a version to increment.

    RELEASE keeps the numeric core and only strips pre-release and build.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    RELEASE = "release"

    @classmethod
    def coerce(cls, value: Union["Bump", str]) -> "Bump":
        """Return the Bump for ``value``, accepting names in any case.

        Raises:
            ValueError: If ``value`` names no bump kind
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown bump kind {value!r} (expected one of: {choices})")
