# SPDX-License-Identifier: MIT
"""Tests for JSON and YAML conversion of versions."""

from __future__ import annotations

import json

import pytest
import yaml

from semver_range import (
    AlphanumericId,
    ErrorKind,
    InvalidVersionError,
    TypeMismatchError,
    Version,
    VersionValidationError,
    parse_version,
)
from semver_range.serialization import (
    VersionJSONEncoder,
    dump_yaml,
    dumps_version,
    load_version_yaml,
    load_yaml,
    loads_version,
)


class TestJSON:
    """Tests for JSON encoding and decoding."""

    def test_dumps(self):
        assert dumps_version(parse_version("1.2.3-rc.1+build.5")) == '"1.2.3-rc.1+build.5"'

    def test_loads(self):
        v = loads_version('"1.2.3-rc.1+build.5"')
        assert str(v) == "1.2.3-rc.1+build.5"

    def test_encoder_in_document(self):
        data = {"name": "pkg", "version": Version(2, 0, 0)}
        assert json.loads(json.dumps(data, cls=VersionJSONEncoder)) == {
            "name": "pkg",
            "version": "2.0.0",
        }

    def test_encoder_rejects_other_objects(self):
        with pytest.raises(TypeError):
            json.dumps(object(), cls=VersionJSONEncoder)

    def test_dumps_validates(self):
        bad = Version(1, 0, 0, build=("bad!",))
        with pytest.raises(VersionValidationError) as exc_info:
            dumps_version(bad)
        assert exc_info.value.kind == ErrorKind.INVALID_BUILD_CHARACTER

    def test_dumps_rejects_empty_prerelease(self):
        bad = Version(1, 0, 0, prerelease=(AlphanumericId(""),))
        with pytest.raises(VersionValidationError) as exc_info:
            dumps_version(bad)
        assert exc_info.value.kind == ErrorKind.EMPTY_PRERELEASE

    @pytest.mark.parametrize("document", ["123", "null", "[1, 2]", '{"v": "1.0.0"}'])
    def test_loads_non_string(self, document):
        with pytest.raises(TypeMismatchError):
            loads_version(document)

    def test_loads_invalid_version(self):
        with pytest.raises(InvalidVersionError) as exc_info:
            loads_version('"1.0"')
        assert exc_info.value.kind == ErrorKind.MALFORMED_STRUCTURE


class TestYAML:
    """Tests for YAML dumping and loading."""

    def test_dump_version_as_plain_string(self):
        text = dump_yaml({"version": parse_version("1.2.3-beta.2")})
        assert yaml.safe_load(text) == {"version": "1.2.3-beta.2"}

    def test_dump_validates(self):
        with pytest.raises(VersionValidationError):
            dump_yaml({"version": Version(1, 0, 0, build=("",))})

    def test_load_tagged_scalar(self):
        data = load_yaml("version: !semver 1.2.3+build\nname: pkg\n")
        assert isinstance(data["version"], Version)
        assert str(data["version"]) == "1.2.3+build"
        assert data["name"] == "pkg"

    def test_untagged_scalar_stays_string(self):
        assert load_yaml("version: 1.2.3\n") == {"version": "1.2.3"}

    def test_tagged_non_scalar(self):
        with pytest.raises(TypeMismatchError):
            load_yaml("version: !semver [1, 2, 3]\n")

    def test_tagged_invalid_version(self):
        with pytest.raises(InvalidVersionError):
            load_yaml("version: !semver 1.02.3\n")

    def test_load_version_yaml(self):
        assert load_version_yaml("1.2.3-rc.1\n") == parse_version("1.2.3-rc.1")
        assert load_version_yaml("!semver 2.0.0\n") == Version(2, 0, 0)

    def test_load_version_yaml_non_string(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            load_version_yaml("42\n")
        assert exc_info.value.source_type == "int"

    def test_global_registries_untouched(self):
        """Test that the stock safe dumper and loader do not know about versions."""
        with pytest.raises(yaml.representer.RepresenterError):
            yaml.safe_dump({"version": Version(1, 0, 0)})
        with pytest.raises(yaml.constructor.ConstructorError):
            yaml.safe_load("version: !semver 1.0.0\n")
