# SPDX-License-Identifier: MIT
"""Pydantic field type for semantic versions.

Example:
    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: SemVer
    >>> Release(version="1.2.3").model_dump(mode="json")
    {'version': '1.2.3'}
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .semver import Version, parse_version, validate


def _serialize(version: Version) -> str:
    validate(version)
    return str(version)


class _SemVerAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(parse_version),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(Version), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema.str_schema())
        json_schema["description"] = "Semantic version (MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD])"
        return json_schema


# Accepts a Version or a version string; serializes to the canonical string
SemVer = Annotated[Version, _SemVerAnnotation]
