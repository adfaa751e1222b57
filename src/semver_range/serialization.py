# SPDX-License-Identifier: MIT
"""JSON and YAML conversion for Version values.

Versions are written as their canonical string and read back with the strict
parser. A Version is validated before it is written, so a programmatically
built Version with bad identifiers never reaches the output.

The YAML dumper and loader are dedicated subclasses of PyYAML's safe classes;
PyYAML's own registries are left untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

import yaml

from .errors import TypeMismatchError
from .semver import Version, parse_version, validate

logger = logging.getLogger(__name__)

# Explicit YAML tag for scalars that should load as Version objects
YAML_TAG = "!semver"


class VersionJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Version objects as canonical strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Version):
            validate(o)
            return str(o)
        return super().default(o)


def dumps_version(version: Version) -> str:
    """Encode a Version as a JSON string literal, e.g. ``"1.2.3"``.

    Raises:
        VersionValidationError: If the version holds invalid identifiers
    """
    return json.dumps(version, cls=VersionJSONEncoder)


def loads_version(data: Union[str, bytes]) -> Version:
    """Decode a JSON string literal into a Version.

    Raises:
        TypeMismatchError: If the JSON value is not a string
        InvalidVersionError: If the string is not a valid version
    """
    value = json.loads(data)
    if not isinstance(value, str):
        logger.debug(f"Rejected non-string JSON version value: {value!r}")
        raise TypeMismatchError(value)
    return parse_version(value)


class VersionDumper(yaml.SafeDumper):
    """Safe YAML dumper that writes Version objects as plain string scalars."""


class VersionLoader(yaml.SafeLoader):
    """Safe YAML loader that parses ``!semver`` tagged scalars into Versions."""


def _represent_version(dumper: yaml.SafeDumper, version: Version) -> yaml.ScalarNode:
    validate(version)
    return dumper.represent_str(str(version))


def _construct_version(loader: yaml.SafeLoader, node: yaml.Node) -> Version:
    if not isinstance(node, yaml.ScalarNode):
        logger.debug(f"Rejected non-scalar YAML node tagged {YAML_TAG}: {node.id}")
        raise TypeMismatchError(node)
    return parse_version(loader.construct_scalar(node))


VersionDumper.add_representer(Version, _represent_version)
VersionLoader.add_constructor(YAML_TAG, _construct_version)


def dump_yaml(data: Any) -> str:
    """Dump data to YAML, rendering any Version values as strings."""
    return yaml.dump(data, Dumper=VersionDumper, sort_keys=False)


def load_yaml(text: str) -> Any:
    """Load YAML, turning ``!semver`` tagged scalars into Versions."""
    return yaml.load(text, Loader=VersionLoader)


def load_version_yaml(text: str) -> Version:
    """Load a YAML document consisting of a single version scalar.

    Raises:
        TypeMismatchError: If the document is not a string scalar
        InvalidVersionError: If the string is not a valid version
    """
    value = load_yaml(text)
    if isinstance(value, Version):
        return value
    if not isinstance(value, str):
        logger.debug(f"Rejected non-string YAML version value: {value!r}")
        raise TypeMismatchError(value)
    return parse_version(value)
