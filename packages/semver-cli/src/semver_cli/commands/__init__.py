# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import query, mutate, release

__all__ = ["query", "mutate", "release"]
