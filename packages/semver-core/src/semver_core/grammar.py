# SPDX-License-Identifier: MIT
"""Grammar rules for the fields of a semantic version.

All checks are pure predicates over strings. Only ASCII digits and letters are
accepted, so ``str.isdigit`` is never used for validation (it admits other
Unicode digits).
"""

from __future__ import annotations

import re
from enum import Enum

_NUMERIC = r"0|[1-9][0-9]*"
_ALPHANUMERIC = r"[0-9]*[A-Za-z-][0-9A-Za-z-]*"
_PRERELEASE_IDENT = rf"(?:{_NUMERIC}|{_ALPHANUMERIC})"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

NUMERIC_PATTERN = re.compile(_NUMERIC)
PRERELEASE_IDENTIFIER_PATTERN = re.compile(_PRERELEASE_IDENT)
BUILD_IDENTIFIER_PATTERN = re.compile(_BUILD_IDENT)
PRERELEASE_PATTERN = re.compile(rf"{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*")
BUILD_PATTERN = re.compile(rf"{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*")

# Full version string: optional v/V prefix, numeric core, optional
# pre-release and build. Always matched with fullmatch().
SEMVER_PATTERN = re.compile(
    r"[vV]?"
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{PRERELEASE_PATTERN.pattern}))?"
    rf"(?:\+(?P<buildmetadata>{BUILD_PATTERN.pattern}))?"
)


class Field(str, Enum):
    """Version fields that carry dot-separated identifiers."""

    PRERELEASE = "prerelease"
    BUILD = "build"


def _fullmatch(pattern: re.Pattern[str], text: object) -> bool:
    return isinstance(text, str) and pattern.fullmatch(text) is not None


def is_numeric_core(text: str) -> bool:
    """Check a MAJOR, MINOR or PATCH field: digits with no leading zero."""
    return _fullmatch(NUMERIC_PATTERN, text)


def is_numeric_identifier(text: str) -> bool:
    """Return True if ``text`` consists only of ASCII digits."""
    return isinstance(text, str) and text.isascii() and text.isdigit()


def is_prerelease_identifier(text: str) -> bool:
    """Check a single pre-release identifier.

    Numeric identifiers must not have leading zeros ("0" itself is fine).
    """
    return _fullmatch(PRERELEASE_IDENTIFIER_PATTERN, text)


def is_build_identifier(text: str) -> bool:
    """Check a single build identifier. Leading zeros are allowed."""
    return _fullmatch(BUILD_IDENTIFIER_PATTERN, text)


def is_valid_prerelease(text: str) -> bool:
    """Check a full dot-separated pre-release string."""
    return _fullmatch(PRERELEASE_PATTERN, text)


def is_valid_build(text: str) -> bool:
    """Check a full dot-separated build metadata string."""
    return _fullmatch(BUILD_PATTERN, text)


def is_valid_field(text: str, kind: Field | str) -> bool:
    """Check ``text`` against the grammar of the given field kind.

    Args:
        text: Candidate pre-release or build string
        kind: Field.PRERELEASE or Field.BUILD (or their string values)

    Returns:
        True if ``text`` is a well-formed value for that field

    Raises:
        ValueError: If ``kind`` is not a known field
    """
    if Field(kind) is Field.PRERELEASE:
        return is_valid_prerelease(text)
    return is_valid_build(text)
