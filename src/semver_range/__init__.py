# SPDX-License-Identifier: MIT
"""Semantic version parsing, ordering and range matching.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, and for testing versions against
range expressions such as ``>=1.2.0 <2.0.0 || 3.x``.

Example:
    >>> from semver_range import parse_version, compare_versions, compile_range
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_string
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0", "2.0.0") == -1
    True
    >>>
    >>> compile_range(">1.0.0 <2.0.0").matches(parse_version("1.5.0"))
    True
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    NumberReason,
    SemverError,
    InvalidVersionError,
    VersionValidationError,
    VersionOverflowError,
    InvalidRangeError,
    TypeMismatchError,
)
from .semver import (
    Version,
    NumericId,
    AlphanumericId,
    PrereleaseId,
    SEMVER_SPEC_VERSION,
    parse_version,
    parse_version_tolerant,
    must_parse_version,
    is_valid_semver,
    new_prerelease_id,
    new_build_id,
    validate,
    to_canonical_string,
)
from .compare import (
    Ordering,
    compare_versions,
    compare_prerelease_ids,
    version_key,
    sort_versions,
)
from .ranges import (
    Comparator,
    VersionRange,
    AllOf,
    AnyOf,
    Matcher,
    compile_range,
    must_compile_range,
    matches,
    satisfies,
)

__all__ = [
    # Errors
    "ErrorKind",
    "NumberReason",
    "SemverError",
    "InvalidVersionError",
    "VersionValidationError",
    "VersionOverflowError",
    "InvalidRangeError",
    "TypeMismatchError",
    # Version parsing
    "Version",
    "NumericId",
    "AlphanumericId",
    "PrereleaseId",
    "SEMVER_SPEC_VERSION",
    "parse_version",
    "parse_version_tolerant",
    "must_parse_version",
    "is_valid_semver",
    "new_prerelease_id",
    "new_build_id",
    "validate",
    "to_canonical_string",
    # Version comparison
    "Ordering",
    "compare_versions",
    "compare_prerelease_ids",
    "version_key",
    "sort_versions",
    # Ranges
    "Comparator",
    "VersionRange",
    "AllOf",
    "AnyOf",
    "Matcher",
    "compile_range",
    "must_compile_range",
    "matches",
    "satisfies",
]
