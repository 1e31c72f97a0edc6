# SPDX-License-Identifier: MIT
"""Tests for the semver CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_cli.main import cli, main


class TestParseCommand:
    """Tests for semver parse."""

    def test_parse_fields(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: build.5" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--json", "v2.0.0"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "major": 2,
            "minor": 0,
            "patch": 0,
            "prerelease": None,
            "build": None,
        }

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.2"])

        assert result.exit_code == 1
        assert "Invalid semantic version '1.2'" in result.output

    def test_parse_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "parse"])

        assert result.exit_code == 0
        assert "prerelease: SNAPSHOT" in result.output


class TestValidateCommand:
    """Tests for semver validate."""

    def test_all_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1.0.0-0"])

        assert result.exit_code == 0
        assert "1.0.0: valid" in result.output

    def test_some_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "01.9.1"])

        assert result.exit_code == 1
        assert "01.9.1: not a semantic version" in result.output

    def test_prefix_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "v1.0.0"])

        assert result.exit_code == 0
        assert "Warning: v1.0.0: the leading 'v'" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "-q", "1.09.1"])

        assert result.exit_code == 1
        assert result.output == ""


class TestCompareCommand:
    """Tests for semver compare."""

    def test_lower(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-beta.2", "1.0.0-beta.11"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_build_ignored(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0+x", "1.0.0+y"])
        assert result.output.strip() == "0"

    def test_consider_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--consider-build", "1.0.0", "1.0.0+y"])
        assert result.output.strip() == "1"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "x"])

        assert result.exit_code == 1
        assert "Invalid semantic version 'x'" in result.output


class TestSortCommand:
    """Tests for semver sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-alpha.beta", "1.0.0-alpha.1"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0.0-alpha.1", "1.0.0-alpha.beta", "1.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-r", "0.1.0", "1.0.0"])
        assert result.output.splitlines() == ["1.0.0", "0.1.0"]


class TestMutateCommands:
    """Tests for semver bump, prerelease and build."""

    def test_bump(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "patch", "1.2.3-rc1.0+build-1234"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.4"

    def test_bump_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "MAJOR", "1.2.3"])
        assert result.output.strip() == "2.0.0"

    def test_bump_unknown_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "micro", "1.2.3"])
        assert result.exit_code == 2

    def test_bump_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "bump", "minor"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.3.0"

    def test_bump_without_project(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "bump", "minor"])

        assert result.exit_code == 1
        assert "pyproject.toml not found" in result.output

    def test_prerelease(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["prerelease", "rc.1", "0.2.1+b13"])

        assert result.exit_code == 0
        assert result.output.strip() == "0.2.1-rc.1"

    def test_prerelease_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["prerelease", "092", "0.2.1"])

        assert result.exit_code == 1
        assert "Invalid pre-release '092'" in result.output

    def test_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["build", "007", "1.0.0-rc.1"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-rc.1+007"


class TestReleaseCommands:
    """Tests for semver release and snapshot."""

    def test_release(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["release", "1.2.3-SNAPSHOT"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3"

    def test_release_not_snapshot(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["release", "1.2.3"])

        assert result.exit_code == 1
        assert "is not a SNAPSHOT version" in result.output

    def test_release_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-v", "-C", str(temp_project), "release"])

        assert result.exit_code == 0
        assert "1.2.3" in result.output.splitlines()

    def test_snapshot(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["snapshot", "minor", "1.2.3"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.3.0-SNAPSHOT"

    def test_snapshot_label_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["snapshot", "patch", "1.2.3", "--label", "dev"])
        assert result.output.strip() == "1.2.4-dev"

    def test_snapshot_label_from_config(
        self, cli_runner: CliRunner, labelled_project: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-C", str(labelled_project), "snapshot", "major"])

        assert result.exit_code == 0
        assert result.output.strip() == "3.0.0-dev"


class TestMain:
    """Tests for the console script entry point."""

    def test_invalid_version_exits_once(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["semver", "parse", "1.2"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.count("Error:") == 1
        assert "Invalid semantic version '1.2'" in err
        assert "Unexpected error" not in err
