# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a [tool.semver-range] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.semver-range]
tolerant = true
include_build = false
"""
    )

    return project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a temporary project directory without pyproject.toml."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    return project_dir
