# SPDX-License-Identifier: MIT
"""Version comparison following Semantic Versioning 2.0.0 precedence.

Pre-release ordering: numeric identifiers sort below alphanumeric ones,
numbers compare by value, text compares lexically, and a shorter identifier
list sorts first when it is a prefix of the other.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence, Union

from .semver import NumericId, PrereleaseId, Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions, mapped onto -1, 0 and 1."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _cmp(a, b) -> Ordering:
    if a == b:
        return Ordering.EQUAL
    return Ordering.LESS if a < b else Ordering.GREATER


def compare_prerelease_ids(id1: PrereleaseId, id2: PrereleaseId) -> Ordering:
    """Compare two pre-release identifiers.

    A numeric identifier is always lower than an alphanumeric one,
    regardless of value.
    """
    if isinstance(id1, NumericId):
        if isinstance(id2, NumericId):
            return _cmp(id1.value, id2.value)
        return Ordering.LESS
    if isinstance(id2, NumericId):
        return Ordering.GREATER
    return _cmp(id1.value, id2.value)


def _compare_prerelease(
    pre1: Sequence[PrereleaseId], pre2: Sequence[PrereleaseId]
) -> Ordering:
    """Compare two pre-release identifier sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return Ordering.EQUAL
    if not pre1:
        return Ordering.GREATER  # Release > pre-release
    if not pre2:
        return Ordering.LESS  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        result = compare_prerelease_ids(p1, p2)
        if result != Ordering.EQUAL:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(pre1), len(pre2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta") == -1
        True
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2") == 0
        True
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result != Ordering.EQUAL:
            return result

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def _prerelease_part_key(identifier: PrereleaseId) -> tuple:
    if isinstance(identifier, NumericId):
        return (0, identifier.value, "")
    return (1, 0, identifier.value)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases get (1,) so they sort after any (0, ...) pre-release key;
    # tuple comparison already puts a prefix before its extensions
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_prerelease_part_key(part) for part in v.prerelease))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse (where needed) and sort versions by precedence."""
    parsed = [parse_version(v) if isinstance(v, str) else v for v in versions]
    return sorted(parsed, key=version_key, reverse=reverse)
