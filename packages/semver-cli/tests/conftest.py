# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.2.3-SNAPSHOT"
description = "Test project"
"""
    )

    yield project_dir


@pytest.fixture
def labelled_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project using a custom snapshot label."""
    project_dir = tmp_path / "labelled_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "labelled"
version = "2.0.0"

[tool.semver]
snapshot-label = "dev"
"""
    )

    yield project_dir
