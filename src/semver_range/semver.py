# SPDX-License-Identifier: MIT
"""Semantic version values and parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Pre-release identifiers are kept as a tagged union of :class:`NumericId` and
:class:`AlphanumericId`; the variant is decided purely by whether the source
text consists only of digits.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Union

from .errors import (
    ErrorKind,
    InvalidVersionError,
    NumberReason,
    SemverError,
    TypeMismatchError,
    VersionOverflowError,
    VersionValidationError,
)
from .lexical import (
    NUMBERS,
    fits_uint64,
    has_leading_zero,
    is_alphanumeric,
    is_numeric,
)


@dataclass(frozen=True, slots=True)
class NumericId:
    """A pre-release identifier made only of digits (e.g. the ``1`` in ``rc.1``)."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericId:
    """A pre-release identifier containing at least one letter or hyphen."""

    value: str

    def __str__(self) -> str:
        return self.value


PrereleaseId = Union[NumericId, AlphanumericId]


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Equality, ordering and hashing follow version precedence, so build
    metadata never affects ``==`` or ``<``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g. ``alpha``, ``1``)
        build: Build metadata identifiers (e.g. ``build``, ``123``)
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[PrereleaseId, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the value stays hashable
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease_string}"
        if self.build:
            version += f"+{self.build_string}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is lower, equal or higher than ``other``."""
        from .compare import compare_versions

        return compare_versions(self, other)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_string(self) -> str:
        return ".".join(str(identifier) for identifier in self.prerelease)

    @property
    def build_string(self) -> str:
        return ".".join(self.build)

    def finalize(self) -> Version:
        """Return a copy without pre-release identifiers or build metadata."""
        return Version(self.major, self.minor, self.patch)

    def with_prerelease(self, prerelease: Iterable[PrereleaseId]) -> Version:
        """Return a copy carrying ``prerelease``; the result is not validated."""
        return dataclasses.replace(self, prerelease=tuple(prerelease))

    def with_build(self, build: Iterable[str]) -> Version:
        """Return a copy carrying ``build``; the result is not validated."""
        return dataclasses.replace(self, build=tuple(build))

    def increment_patch(self) -> Version:
        """Return a copy with the patch number incremented.

        Pre-release and build metadata are kept as they are.

        Raises:
            VersionOverflowError: If patch is already at the maximum value
        """
        self._check_increment("patch", self.patch)
        return dataclasses.replace(self, patch=self.patch + 1)

    def increment_minor(self) -> Version:
        """Return a copy with minor incremented and patch reset to 0.

        Raises:
            VersionOverflowError: If minor is already at the maximum value
        """
        self._check_increment("minor", self.minor)
        return dataclasses.replace(self, minor=self.minor + 1, patch=0)

    def increment_major(self) -> Version:
        """Return a copy with major incremented and minor and patch reset to 0.

        Raises:
            VersionOverflowError: If major is already at the maximum value
        """
        self._check_increment("major", self.major)
        return dataclasses.replace(self, major=self.major + 1, minor=0, patch=0)

    def _check_increment(self, field: str, value: int) -> None:
        if not fits_uint64(value + 1):
            raise VersionOverflowError(str(self), field)


# Latest fully supported version of the Semantic Versioning specification
SEMVER_SPEC_VERSION = Version(2, 0, 0)


def _parse_number(text: str, kind: ErrorKind, field: str, version_string: str) -> int:
    if not is_numeric(text):
        raise InvalidVersionError(
            kind,
            version_string,
            f"Invalid character(s) found in {field} number {text!r}",
            NumberReason.NON_DIGIT,
        )
    if has_leading_zero(text):
        raise InvalidVersionError(
            kind,
            version_string,
            f"Leading zero found in {field} number {text!r}",
            NumberReason.LEADING_ZERO,
        )
    number = int(text)
    if not fits_uint64(number):
        raise InvalidVersionError(
            kind,
            version_string,
            f"{field.capitalize()} number {text!r} does not fit in 64 bits",
            NumberReason.OVERFLOW,
        )
    return number


def _parse_prerelease_id(text: str, version_string: str) -> PrereleaseId:
    if not text:
        raise InvalidVersionError(
            ErrorKind.EMPTY_PRERELEASE,
            version_string,
            f"Empty pre-release identifier in {version_string!r}",
        )
    if is_numeric(text):
        if has_leading_zero(text):
            raise InvalidVersionError(
                ErrorKind.INVALID_PRERELEASE_CHARACTER,
                version_string,
                f"Leading zero found in numeric pre-release identifier {text!r}",
                NumberReason.LEADING_ZERO,
            )
        number = int(text)
        if not fits_uint64(number):
            raise InvalidVersionError(
                ErrorKind.INVALID_PRERELEASE_CHARACTER,
                version_string,
                f"Numeric pre-release identifier {text!r} does not fit in 64 bits",
                NumberReason.OVERFLOW,
            )
        return NumericId(number)
    if not is_alphanumeric(text):
        raise InvalidVersionError(
            ErrorKind.INVALID_PRERELEASE_CHARACTER,
            version_string,
            f"Invalid character(s) found in pre-release identifier {text!r}",
        )
    return AlphanumericId(text)


def _parse_build_id(text: str, version_string: str) -> str:
    if not text:
        raise InvalidVersionError(
            ErrorKind.EMPTY_BUILD_METADATA,
            version_string,
            f"Empty build metadata identifier in {version_string!r}",
        )
    if not is_alphanumeric(text):
        raise InvalidVersionError(
            ErrorKind.INVALID_BUILD_CHARACTER,
            version_string,
            f"Invalid character(s) found in build metadata {text!r}",
        )
    return text


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Parsing is strict: no surrounding whitespace, no ``v`` prefix and no
    leading zeros. Use :func:`parse_version_tolerant` for loose input.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
        TypeMismatchError: If the input is not a string

    Examples:
        >>> str(parse_version("1.0.0-alpha.1+build.456"))
        '1.0.0-alpha.1+build.456'

        >>> parse_version("1.0.0-rc.1").prerelease
        (AlphanumericId(value='rc'), NumericId(value=1))
    """
    if not isinstance(version_string, str):
        raise TypeMismatchError(version_string)
    if not version_string:
        raise InvalidVersionError(
            ErrorKind.EMPTY_INPUT, version_string, "Version string cannot be empty"
        )

    parts = version_string.split(".", 2)
    if len(parts) != 3:
        raise InvalidVersionError(
            ErrorKind.MALFORMED_STRUCTURE,
            version_string,
            f"No Major.Minor.Patch elements found in {version_string!r}",
        )

    major = _parse_number(parts[0], ErrorKind.INVALID_MAJOR, "major", version_string)
    minor = _parse_number(parts[1], ErrorKind.INVALID_MINOR, "minor", version_string)

    # A hyphen after the first "+" belongs to build metadata, not pre-release
    remainder = parts[2]
    build_index = remainder.find("+")
    head = remainder if build_index == -1 else remainder[:build_index]
    prerelease_index = head.find("-")
    patch_text = head if prerelease_index == -1 else head[:prerelease_index]
    patch = _parse_number(patch_text, ErrorKind.INVALID_PATCH, "patch", version_string)

    prerelease: tuple[PrereleaseId, ...] = ()
    if prerelease_index != -1:
        prerelease = tuple(
            _parse_prerelease_id(part, version_string)
            for part in head[prerelease_index + 1 :].split(".")
        )

    build: tuple[str, ...] = ()
    if build_index != -1:
        build = tuple(
            _parse_build_id(part, version_string)
            for part in remainder[build_index + 1 :].split(".")
        )

    return Version(major, minor, patch, prerelease, build)


def _strip_leading_zeros(segment: str) -> str:
    if len(segment) > 1:
        segment = segment.lstrip("0")
        if not segment or segment[0] not in NUMBERS:
            segment = "0" + segment
    return segment


def parse_version_tolerant(version_string: str) -> Version:
    """Parse a version string, normalizing common non-strict input first.

    Normalization trims surrounding whitespace, drops a single leading
    ``v``/``V``, strips leading zeros from the MAJOR.MINOR.PATCH segments and
    pads missing minor/patch segments with ``0``. Shorthand that already
    carries a suffix (``1.0-rc.1``) is ambiguous and rejected.

    Examples:
        >>> str(parse_version_tolerant("v1.2"))
        '1.2.0'
        >>> str(parse_version_tolerant(" 01.02.03 "))
        '1.2.3'
    """
    if not isinstance(version_string, str):
        raise TypeMismatchError(version_string)

    text = version_string.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    if not text:
        raise InvalidVersionError(
            ErrorKind.EMPTY_INPUT, version_string, "Version string cannot be empty"
        )

    parts = text.split(".")
    core: list[str] = []
    for part in parts:
        core.append(_strip_leading_zeros(part))
        if len(core) == 3 or "-" in part or "+" in part:
            break

    if len(core) < 3:
        if "-" in core[-1] or "+" in core[-1]:
            raise InvalidVersionError(
                ErrorKind.MALFORMED_STRUCTURE,
                version_string,
                f"Short version {version_string!r} cannot carry pre-release or build metadata",
            )
        core.extend(["0"] * (3 - len(core)))

    normalized = ".".join(core + parts[len(core) :])
    return parse_version(normalized)


def must_parse_version(version_string: str) -> Version:
    """Parse a version known to be valid, such as a literal in source code.

    Raises:
        RuntimeError: If the string is not a valid semantic version
    """
    try:
        return parse_version(version_string)
    except SemverError as e:
        raise RuntimeError(f"semver: parse_version({version_string!r}): {e}") from e


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def new_prerelease_id(text: str) -> PrereleaseId:
    """Parse a single pre-release identifier.

    Raises:
        InvalidVersionError: If the identifier is empty, has a leading zero or
            contains characters outside ``[0-9A-Za-z-]``
    """
    if not isinstance(text, str):
        raise TypeMismatchError(text)
    return _parse_prerelease_id(text, text)


def new_build_id(text: str) -> str:
    """Validate a single build metadata identifier and return it."""
    if not isinstance(text, str):
        raise TypeMismatchError(text)
    return _parse_build_id(text, text)


def validate(version: Version) -> None:
    """Check that a Version holds only valid components.

    Versions built directly (rather than parsed) are not checked at
    construction, so serializers call this before writing a Version out.

    Raises:
        VersionValidationError: If any component is out of range or any
            identifier is empty or contains invalid characters
    """
    # Identifiers may not be renderable yet, so errors name the base version
    label = f"{version.major}.{version.minor}.{version.patch}"

    for field, kind in (
        ("major", ErrorKind.INVALID_MAJOR),
        ("minor", ErrorKind.INVALID_MINOR),
        ("patch", ErrorKind.INVALID_PATCH),
    ):
        value = getattr(version, field)
        if not isinstance(value, int) or isinstance(value, bool) or not fits_uint64(value):
            raise VersionValidationError(
                kind, label, f"{field.capitalize()} number {value!r} is not a 64-bit unsigned integer"
            )

    for identifier in version.prerelease:
        if isinstance(identifier, NumericId):
            if not isinstance(identifier.value, int) or not fits_uint64(identifier.value):
                raise VersionValidationError(
                    ErrorKind.INVALID_PRERELEASE_CHARACTER,
                    label,
                    f"Numeric pre-release identifier {identifier.value!r} is out of range",
                )
        elif isinstance(identifier, AlphanumericId):
            if not identifier.value:
                raise VersionValidationError(
                    ErrorKind.EMPTY_PRERELEASE, label, "Pre-release identifier is empty"
                )
            if not isinstance(identifier.value, str) or not is_alphanumeric(identifier.value):
                raise VersionValidationError(
                    ErrorKind.INVALID_PRERELEASE_CHARACTER,
                    label,
                    f"Invalid character(s) found in pre-release {identifier.value!r}",
                )
        else:
            raise VersionValidationError(
                ErrorKind.INVALID_PRERELEASE_CHARACTER,
                label,
                f"Pre-release identifier {identifier!r} is not a NumericId or AlphanumericId",
            )

    for build in version.build:
        if not isinstance(build, str):
            raise VersionValidationError(
                ErrorKind.INVALID_BUILD_CHARACTER,
                label,
                f"Build metadata identifier {build!r} is not a string",
            )
        if not build:
            raise VersionValidationError(
                ErrorKind.EMPTY_BUILD_METADATA, label, "Build metadata identifier is empty"
            )
        if not is_alphanumeric(build):
            raise VersionValidationError(
                ErrorKind.INVALID_BUILD_CHARACTER,
                label,
                f"Invalid character(s) found in build metadata {build!r}",
            )


def to_canonical_string(version: Version) -> str:
    """Render ``version`` in canonical MAJOR.MINOR.PATCH[-PRE][+BUILD] form."""
    return str(version)
