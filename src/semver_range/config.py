# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Table read from pyproject.toml: [tool.semver-range]
TOOL_TABLE = "semver-range"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory the configuration was loaded from
        tolerant: Parse version arguments with the tolerant parser
        include_build: Show build metadata in ``semver parse`` output
    """

    project_dir: Optional[Path] = None
    tolerant: bool = False
    include_build: bool = True

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        A directory without pyproject.toml yields the default configuration.

        Raises:
            ConfigError: If the file is not valid TOML or the table is invalid
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

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
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        known = {f.name for f in fields(cls) if f.name != "project_dir"}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ConfigError(f"Unknown [tool.{TOOL_TABLE}] keys: {', '.join(unknown)}")

        for key, value in table.items():
            if not isinstance(value, bool):
                raise ConfigError(
                    f"[tool.{TOOL_TABLE}].{key} must be a boolean, got {type(value).__name__}"
                )

        return cls(project_dir=project_dir, **table)


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load configuration for ``project_dir`` (default: current directory)."""
    return CLIConfig.from_pyproject(project_dir or Path.cwd())
