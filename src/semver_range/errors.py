# SPDX-License-Identifier: MIT
"""Error types raised by version parsing, validation, and range compilation.

Every error carries an :class:`ErrorKind` so callers can branch on the kind of
failure without matching on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure reported by this package."""

    EMPTY_INPUT = "empty_input"
    MALFORMED_STRUCTURE = "malformed_structure"
    INVALID_MAJOR = "invalid_major"
    INVALID_MINOR = "invalid_minor"
    INVALID_PATCH = "invalid_patch"
    EMPTY_PRERELEASE = "empty_prerelease"
    INVALID_PRERELEASE_CHARACTER = "invalid_prerelease_character"
    EMPTY_BUILD_METADATA = "empty_build_metadata"
    INVALID_BUILD_CHARACTER = "invalid_build_character"
    OVERFLOW = "overflow"
    DANGLING_OR = "dangling_or"
    EMPTY_RANGE_GROUP = "empty_range_group"
    UNKNOWN_COMPARATOR = "unknown_comparator"
    TYPE_MISMATCH = "type_mismatch"


class NumberReason(str, Enum):
    """Why a numeric segment was rejected."""

    NON_DIGIT = "non_digit"
    LEADING_ZERO = "leading_zero"
    OVERFLOW = "overflow"


class SemverError(ValueError):
    """Base class for all errors raised by semver_range.

    Attributes:
        kind: The kind of failure
        value: The offending input (version string, identifier, or range)
        message: Human readable description
    """

    def __init__(self, kind: ErrorKind, value: str, message: str = ""):
        self.kind = kind
        self.value = value
        self.message = message or f"{kind.value.replace('_', ' ')}: {value!r}"
        super().__init__(self.message)


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(
        self,
        kind: ErrorKind,
        value: str,
        message: str = "",
        reason: Optional[NumberReason] = None,
    ):
        self.reason = reason
        super().__init__(kind, value, message)


class VersionValidationError(SemverError):
    """Raised when a constructed Version holds invalid identifiers."""


class VersionOverflowError(SemverError):
    """Raised when incrementing a field already at its maximum value."""

    def __init__(self, value: str, field: str):
        self.field = field
        super().__init__(
            ErrorKind.OVERFLOW, value, f"Cannot increment {field} of {value}: value at maximum"
        )


class InvalidRangeError(SemverError):
    """Raised when a range expression cannot be compiled."""


class TypeMismatchError(SemverError, TypeError):
    """Raised when a text conversion receives a value that is not text."""

    def __init__(self, value: object, expected: str = "str"):
        self.source_type = type(value).__name__
        super().__init__(
            ErrorKind.TYPE_MISMATCH,
            repr(value),
            f"Cannot convert {self.source_type} to {expected}",
        )
