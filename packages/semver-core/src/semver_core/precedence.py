# SPDX-License-Identifier: MIT
"""Precedence rules of Semantic Versioning 2.0.0.

These functions work on the raw fields so that both the Version type and the
public comparison helpers can share them.
"""

from __future__ import annotations

from typing import Optional

from .grammar import is_numeric_identifier


def _sign(left: int | str, right: int | str) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1  # type: ignore[operator]


def compare_identifier(left: str, right: str) -> int:
    """Compare two pre-release identifiers.

    Two numeric identifiers compare numerically; any other pair compares in
    ASCII order, so "--" < "1" < "alpha".

    Mixing the two rules is not transitive when an alphanumeric identifier
    starts with a digit: "9" < "10" < "1a" < "9".
    """
    if left == right:
        return 0
    if is_numeric_identifier(left) and is_numeric_identifier(right):
        return _sign(int(left), int(right))
    return _sign(left, right)


def compare_prerelease(left: Optional[str], right: Optional[str]) -> int:
    """Compare two pre-release strings.

    ``None`` (or an empty string) means "no pre-release", which has higher
    precedence than any pre-release: 1.0.0-rc.1 < 1.0.0.

    Returns:
        -1, 0 or 1
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    left_parts = left.split(".")
    right_parts = right.split(".")

    for l_part, r_part in zip(left_parts, right_parts):
        result = compare_identifier(l_part, r_part)
        if result:
            return result

    # Equal prefix: fewer identifiers means lower precedence
    return _sign(len(left_parts), len(right_parts))


def compare_fields(
    left: tuple[int, int, int, Optional[str]],
    right: tuple[int, int, int, Optional[str]],
) -> int:
    """Compare (major, minor, patch, prerelease) tuples by precedence."""
    for l_num, r_num in zip(left[:3], right[:3]):
        if l_num != r_num:
            return _sign(l_num, r_num)
    return compare_prerelease(left[3], right[3])
