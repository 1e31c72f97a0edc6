# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semver_core import SNAPSHOT, is_valid_prerelease


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name
        version: Current project version ([project].version)
        snapshot_label: Pre-release label marking snapshot versions
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    snapshot_label: str = SNAPSHOT

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If [tool.semver] holds an invalid value
        """
        project = pyproject.get("project", {})
        tool_semver = pyproject.get("tool", {}).get("semver", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {type(version).__name__}")

        snapshot_label = tool_semver.get("snapshot-label", SNAPSHOT)
        if not is_valid_prerelease(snapshot_label):
            raise ConfigError(
                f"[tool.semver].snapshot-label '{snapshot_label}' is not a valid pre-release"
            )

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=version,
            snapshot_label=snapshot_label,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return CLIConfig.from_pyproject(project_dir)
