# SPDX-License-Identifier: MIT
"""SQLAlchemy column type storing a Version as its canonical string."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from .errors import TypeMismatchError
from .semver import Version, parse_version, validate

logger = logging.getLogger(__name__)


class VersionType(TypeDecorator):
    """Text column holding a semantic version.

    Bound values may be Version objects or version strings; both are
    validated before being written. Loaded values are parsed strictly.

    Example:
        version: Mapped[Version] = mapped_column(VersionType())
    """

    impl = String
    cache_ok = True

    def __init__(self, length: int = 255, **kwargs: Any) -> None:
        super().__init__(length, **kwargs)

    @property
    def python_type(self) -> type:
        return Version

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = parse_version(value)
        if not isinstance(value, Version):
            logger.debug(f"Rejected {type(value).__name__} bound to a version column")
            raise TypeMismatchError(value, "Version")
        validate(value)
        return str(value)

    def process_result_value(self, value: Any, dialect: Any) -> Optional[Version]:
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            value = bytes(value).decode("ascii")
        if not isinstance(value, str):
            logger.debug(f"Rejected {type(value).__name__} loaded from a version column")
            raise TypeMismatchError(value)
        return parse_version(value)
