# SPDX-License-Identifier: MIT
"""Command-line interface for semantic version handling."""

__version__ = "0.1.0"
