# SPDX-License-Identifier: MIT
"""Tests for the semver command line interface."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_range import __version__
from semver_range.cli import cli, main
from semver_range.lexical import MAX_UINT64


def _run(cli_runner: CliRunner, project_dir: Path, *args: str):
    return cli_runner.invoke(cli, ["-C", str(project_dir), *args])


class TestParseCommand:
    """Tests for the parse command."""

    def test_components(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "parse", "1.2.3-rc.1+build.5")

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "1.2.3-rc.1+build.5",
            "  major: 1",
            "  minor: 2",
            "  patch: 3",
            "  prerelease[0]: rc (alphanumeric)",
            "  prerelease[1]: 1 (numeric)",
            "  build[0]: build",
            "  build[1]: 5",
        ]

    def test_invalid(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "parse", "1.2")

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_tolerant_flag(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "parse", "--tolerant", "v1.2")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "1.2.0"

    def test_configured_project(self, cli_runner, temp_project):
        """Test tolerant parsing and hidden build metadata from pyproject.toml."""
        result = _run(cli_runner, temp_project, "parse", "v01.2.3+build")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "1.2.3"
        assert not any("build" in line for line in lines)


class TestValidateCommand:
    """Tests for the validate command."""

    def test_all_valid(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "validate", "1.0.0", "2.0.0-rc.1+b")

        assert result.exit_code == 0
        assert "1.0.0: valid" in result.output
        assert "2.0.0-rc.1+b: valid" in result.output

    def test_some_invalid(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "validate", "1.0.0", "1.0", "01.0.0")

        assert result.exit_code == 1
        assert "1.0.0: valid" in result.output
        assert "Error: 1.0:" in result.output
        assert "Error: 01.0.0:" in result.output


class TestCompareCommand:
    """Tests for the compare command."""

    def test_less(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "compare", "1.0.0-alpha", "1.0.0")
        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_equal_ignores_build(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "compare", "1.0.0+a", "1.0.0+b")
        assert result.output.strip() == "0"

    def test_greater(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "compare", "1.10.0", "1.9.0")
        assert result.output.strip() == "1"

    def test_invalid(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "compare", "1.0.0", "banana")
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSatisfiesCommand:
    """Tests for the satisfies command."""

    def test_inside(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "satisfies", ">=1.2.0 <2.0.0 || 3.x", "1.4.0", "3.9.9")

        assert result.exit_code == 0
        assert "1.4.0: yes" in result.output
        assert "3.9.9: yes" in result.output

    def test_outside(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "satisfies", ">=1.2.0 <2.0.0 || 3.x", "1.4.0", "2.1.0")

        assert result.exit_code == 1
        assert "1.4.0: yes" in result.output
        assert "2.1.0: no" in result.output

    def test_verbose_shows_range(self, cli_runner, empty_project):
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(empty_project), "satisfies", ">= 1.0.0 <2.0.0 || 3.x", "1.5.0"]
        )

        assert result.exit_code == 0
        assert "Range: >=1.0.0 <2.0.0 || >=3.0.0 <4.0.0" in result.output

    def test_invalid_range(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "satisfies", "~1.0.0", "1.0.0")

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_dangling_or(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "satisfies", "1.0.0 ||", "1.0.0")
        assert result.exit_code == 1


class TestBumpCommand:
    """Tests for the bump command."""

    def test_minor(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "minor", "1.2.3")
        assert result.exit_code == 0
        assert result.output.strip() == "1.3.0"

    def test_major(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "major", "1.2.3")
        assert result.output.strip() == "2.0.0"

    def test_keeps_prerelease_with_warning(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "patch", "1.2.3-rc.1")

        assert result.exit_code == 0
        assert "1.2.4-rc.1" in result.output
        assert "Warning:" in result.output

    def test_finalize(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "patch", "1.2.3-rc.1+b", "--finalize")

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.4"

    def test_overflow(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "patch", f"1.2.{MAX_UINT64}")

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_part(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "bump", "build", "1.2.3")
        assert result.exit_code == 2


class TestSortCommand:
    """Tests for the sort command."""

    def test_sort(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "sort", "1.10.0", "1.2.0", "1.2.0-rc.1")

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.2.0-rc.1", "1.2.0", "1.10.0"]

    def test_reverse(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "sort", "-r", "1.0.0", "3.0.0", "2.0.0")
        assert result.output.splitlines() == ["3.0.0", "2.0.0", "1.0.0"]

    def test_invalid(self, cli_runner, empty_project):
        result = _run(cli_runner, empty_project, "sort", "1.0.0", "1.0")
        assert result.exit_code == 1


class TestGroupOptions:
    """Tests for options on the top-level group."""

    def test_version(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config(self, cli_runner, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.semver-range]\ntolerant = 1\n")
        result = _run(cli_runner, tmp_path, "parse", "1.0.0")

        assert result.exit_code == 1
        assert "must be a boolean" in result.output

    def test_missing_directory(self, cli_runner, tmp_path):
        result = _run(cli_runner, tmp_path / "missing", "parse", "1.0.0")
        assert result.exit_code == 2

    def test_main_reports_invalid_config(self, tmp_path, monkeypatch, capsys):
        """Test that the console script entry point exits 1 on a bad configuration."""
        (tmp_path / "pyproject.toml").write_text("[tool.semver-range]\nverbose = true\n")
        monkeypatch.setattr(sys, "argv", ["semver", "-C", str(tmp_path), "parse", "1.0.0"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Unknown [tool.semver-range] keys: verbose" in capsys.readouterr().err
