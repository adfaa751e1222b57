# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .compare import compare_versions, sort_versions
from .config import CLIConfig, ConfigError, load_config
from .errors import SemverError
from .ranges import compile_range, matches
from .semver import NumericId, Version, parse_version, parse_version_tolerant, validate


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                echo_error(str(e))
                raise SystemExit(1)
        return self.config

    def parse(self, text: str, tolerant: bool = False) -> Version:
        """Parse a version argument, honouring the configured parser mode."""
        if tolerant or self.load_config().tolerant:
            return parse_version_tolerant(text)
        return parse_version(text)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Load [tool.semver-range] configuration from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing, comparison and range matching.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver compare 1.0.0-alpha 1.0.0
        semver satisfies ">=1.2.0 <2.0.0 || 3.x" 1.4.0 2.1.0
        semver bump minor 1.2.3
        semver sort 1.10.0 1.2.0 1.2.0-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("parse")
@click.argument("version")
@click.option("--tolerant", is_flag=True, help="Accept v prefixes, leading zeros and short forms.")
@pass_context
def parse_command(ctx: Context, version: str, tolerant: bool) -> None:
    """Parse VERSION and show its components."""
    try:
        v = ctx.parse(version, tolerant)
    except SemverError as e:
        echo_error(str(e))
        raise SystemExit(1)

    include_build = ctx.load_config().include_build
    echo_info(str(v) if include_build else str(v.with_build(())))
    echo_info(f"  major: {v.major}")
    echo_info(f"  minor: {v.minor}")
    echo_info(f"  patch: {v.patch}")
    for index, identifier in enumerate(v.prerelease):
        kind = "numeric" if isinstance(identifier, NumericId) else "alphanumeric"
        echo_info(f"  prerelease[{index}]: {identifier} ({kind})")
    if include_build:
        for index, build in enumerate(v.build):
            echo_info(f"  build[{index}]: {build}")


@cli.command("validate")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version."""
    failed = False
    for text in versions:
        try:
            validate(ctx.parse(text))
        except SemverError as e:
            echo_error(f"{text}: {e}")
            failed = True
        else:
            echo_success(f"{text}: valid")

    if failed:
        raise SystemExit(1)


@cli.command("compare")
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare_command(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    try:
        result = compare_versions(ctx.parse(version1), ctx.parse(version2))
    except SemverError as e:
        echo_error(str(e))
        raise SystemExit(1)
    echo_info(str(int(result)))


@cli.command("satisfies")
@click.argument("range_expression", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def satisfies_command(ctx: Context, range_expression: str, versions: tuple[str, ...]) -> None:
    """Check each VERSION against RANGE; exit 1 if any falls outside it."""
    try:
        matcher = compile_range(range_expression)
        parsed = [ctx.parse(text) for text in versions]
    except SemverError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"Range: {matcher}")

    outside = False
    for v in parsed:
        if matches(matcher, v):
            echo_success(f"{v}: yes")
        else:
            echo_info(f"{v}: no")
            outside = True

    if outside:
        raise SystemExit(1)


@cli.command("bump")
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version")
@click.option("--finalize", is_flag=True, help="Drop pre-release and build metadata from the result.")
@pass_context
def bump_command(ctx: Context, part: str, version: str, finalize: bool) -> None:
    """Increment PART of VERSION and print the result.

    Pre-release and build metadata are carried over unless --finalize is given.
    """
    try:
        v = ctx.parse(version)
        bumped = getattr(v, f"increment_{part}")()
    except SemverError as e:
        echo_error(str(e))
        raise SystemExit(1)
    if finalize:
        bumped = bumped.finalize()
    elif v.prerelease or v.build:
        echo_warning("pre-release and build metadata were kept; use --finalize to drop them")
    echo_info(str(bumped))


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort highest first.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS sorted by precedence."""
    try:
        ordered = sort_versions([ctx.parse(text) for text in versions], reverse=reverse)
    except SemverError as e:
        echo_error(str(e))
        raise SystemExit(1)
    for v in ordered:
        echo_info(str(v))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
