# SPDX-License-Identifier: MIT
"""Tests for the pydantic SemVer field type."""

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from semver_range import Version, VersionValidationError, parse_version
from semver_range.pydantic_types import SemVer


class Release(BaseModel):
    """Test model with a version field."""

    name: str
    version: SemVer
    previous: Optional[SemVer] = None


class TestSemVerValidation:
    """Tests for validating SemVer fields."""

    def test_from_string(self):
        release = Release(name="pkg", version="1.2.3-rc.1")
        assert isinstance(release.version, Version)
        assert release.version == parse_version("1.2.3-rc.1")

    def test_from_version(self):
        v = Version(1, 0, 0)
        release = Release(name="pkg", version=v)
        assert release.version is v

    def test_from_json(self):
        release = Release.model_validate_json('{"name": "pkg", "version": "2.0.0+build"}')
        assert str(release.version) == "2.0.0+build"

    def test_optional(self):
        assert Release(name="pkg", version="1.0.0").previous is None

    def test_invalid_string(self):
        with pytest.raises(ValidationError) as exc_info:
            Release(name="pkg", version="1.0")
        assert "version" in str(exc_info.value)

    def test_leading_zero(self):
        with pytest.raises(ValidationError):
            Release(name="pkg", version="01.0.0")

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            Release(name="pkg", version=100)

    def test_wrong_type_json(self):
        with pytest.raises(ValidationError):
            Release.model_validate_json('{"name": "pkg", "version": 100}')


class TestSemVerSerialization:
    """Tests for serializing SemVer fields."""

    def test_model_dump(self):
        release = Release(name="pkg", version="1.2.3-beta.2+sha.5")
        assert release.model_dump() == {
            "name": "pkg",
            "version": "1.2.3-beta.2+sha.5",
            "previous": None,
        }

    def test_model_dump_json_round_trip(self):
        release = Release(name="pkg", version="1.2.3", previous="1.2.2")
        restored = Release.model_validate_json(release.model_dump_json())
        assert restored.version == release.version
        assert restored.previous == release.previous

    def test_invalid_version_not_serialized(self):
        release = Release(name="pkg", version=Version(1, 0, 0, build=("bad build",)))
        with pytest.raises((VersionValidationError, PydanticSerializationError)):
            release.model_dump_json()

    def test_json_schema(self):
        schema = Release.model_json_schema()
        version_schema = schema["properties"]["version"]
        assert version_schema["type"] == "string"
        assert "Semantic version" in version_schema["description"]
