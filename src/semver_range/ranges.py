# SPDX-License-Identifier: MIT
"""Version range expressions.

A range is a set of comparator tokens. Space separated tokens are ANDed and
``||`` separates alternatives, with AND binding tighter than OR (there is no
grouping syntax):

- ``<1.0.0``, ``<=1.0.0``, ``>1.0.0``, ``>=1.0.0``
- ``1.0.0``, ``=1.0.0``, ``==1.0.0``
- ``!1.0.0``, ``!=1.0.0``
- ``>1.0.0 <2.0.0`` matches 1.1.1 and 1.8.7 but not 1.0.0 or 2.0.0
- ``<2.0.0 || >=3.0.0`` matches 1.x.x and 3.x.x but not 2.x.x

An ``x`` in the minor or patch position is a wildcard and is rewritten into
explicit bounds before the tokens are parsed:

- ``>=1.2.x`` becomes ``>=1.2.0`` and ``<=1.2.x`` becomes ``<1.3.0``
- ``>1.x`` becomes ``>=2.0.0`` and ``<1.x`` becomes ``<1.0.0``
- ``1.2.x`` becomes ``>=1.2.0 <1.3.0``
- ``!=1.2.x`` splits its AND-group in two: one alternative with ``<1.2.0``
  and one with ``>=1.3.0``

Example:
    >>> matcher = compile_range(">= 1.0.0 <2.0.0 || 3.x")
    >>> str(matcher)
    '>=1.0.0 <2.0.0 || >=3.0.0 <4.0.0'
    >>> matcher.matches(parse_version("3.4.1"))
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .compare import compare_versions
from .errors import (
    ErrorKind,
    InvalidRangeError,
    InvalidVersionError,
    SemverError,
    TypeMismatchError,
)
from .lexical import NUMBERS
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

OR_TOKEN = "||"

# Whitespace directly after one of these does not end a token
_COMPARATOR_CHARS = frozenset("<>=!")


class Comparator(Enum):
    """Comparison operators usable in a range; the value is the rendering."""

    EQ = ""
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    def __str__(self) -> str:
        return self.value

    def holds(self, ordering: int) -> bool:
        """Return True if a ``compare_versions`` result satisfies this operator."""
        if self is Comparator.EQ:
            return ordering == 0
        if self is Comparator.NE:
            return ordering != 0
        if self is Comparator.GT:
            return ordering > 0
        if self is Comparator.GE:
            return ordering >= 0
        if self is Comparator.LT:
            return ordering < 0
        return ordering <= 0


_COMPARATOR_TOKENS: dict[str, Comparator] = {
    "": Comparator.EQ,
    "=": Comparator.EQ,
    "==": Comparator.EQ,
    "!": Comparator.NE,
    "!=": Comparator.NE,
    ">": Comparator.GT,
    ">=": Comparator.GE,
    "<": Comparator.LT,
    "<=": Comparator.LE,
}


def parse_comparator(operator: str, token: str = "") -> Comparator:
    """Look up the Comparator for an operator prefix such as ``>=``.

    Raises:
        InvalidRangeError: If the operator is not recognized
    """
    try:
        return _COMPARATOR_TOKENS[operator]
    except KeyError:
        raise InvalidRangeError(
            ErrorKind.UNKNOWN_COMPARATOR,
            token or operator,
            f"Could not parse comparator {operator!r} in {token or operator!r}",
        ) from None


@dataclass(frozen=True, slots=True)
class VersionRange:
    """A single comparison against a fixed version, e.g. ``>=1.2.0``."""

    comparator: Comparator
    version: Version

    def __str__(self) -> str:
        return f"{self.comparator}{self.version}"

    def matches(self, version: Version) -> bool:
        return matches(self, version)


@dataclass(frozen=True, slots=True)
class AllOf:
    """Matches when every child matcher matches (logical AND)."""

    matchers: tuple[Matcher, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchers", tuple(self.matchers))
        if not self.matchers:
            raise ValueError("AllOf requires at least one matcher")

    def __str__(self) -> str:
        return " ".join(str(matcher) for matcher in self.matchers)

    def matches(self, version: Version) -> bool:
        return matches(self, version)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Matches when at least one child matcher matches (logical OR)."""

    matchers: tuple[Matcher, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchers", tuple(self.matchers))
        if not self.matchers:
            raise ValueError("AnyOf requires at least one matcher")

    def __str__(self) -> str:
        return f" {OR_TOKEN} ".join(str(matcher) for matcher in self.matchers)

    def matches(self, version: Version) -> bool:
        return matches(self, version)


Matcher = Union[VersionRange, AllOf, AnyOf]


def matches(matcher: Matcher, version: Version) -> bool:
    """Evaluate a compiled matcher against a version.

    AllOf stops at the first failing child and AnyOf at the first passing one.
    """
    if isinstance(matcher, VersionRange):
        return matcher.comparator.holds(compare_versions(version, matcher.version))
    if isinstance(matcher, AllOf):
        return all(matches(child, version) for child in matcher.matchers)
    if isinstance(matcher, AnyOf):
        return any(matches(child, version) for child in matcher.matchers)
    raise TypeError(f"Not a range matcher: {type(matcher).__name__}")


# =============================================================================
# Compilation pipeline
# =============================================================================


def tokenize(text: str) -> list[str]:
    """Split a range string into tokens on whitespace.

    Whitespace that follows a comparator character does not end a token, so
    ``>= 1.2.0`` and ``>=1.2.0`` both yield the single token ``>=1.2.0``.
    """
    tokens: list[str] = []
    current: list[str] = []
    last_char = ""
    for char in text:
        if char.isspace():
            if last_char not in _COMPARATOR_CHARS and current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)
        last_char = char
    if current:
        tokens.append("".join(current))
    return tokens


def split_or_groups(tokens: list[str]) -> list[list[str]]:
    """Split tokens on ``||`` into AND-groups.

    Raises:
        InvalidRangeError: If there are no tokens, ``||`` starts or ends the
            range, or two ``||`` leave an empty group between them
    """
    if not tokens:
        raise InvalidRangeError(ErrorKind.EMPTY_INPUT, "", "Range string cannot be empty")
    if tokens[0] == OR_TOKEN:
        raise InvalidRangeError(
            ErrorKind.DANGLING_OR, " ".join(tokens), f"First element in range is {OR_TOKEN!r}"
        )
    if tokens[-1] == OR_TOKEN:
        raise InvalidRangeError(
            ErrorKind.DANGLING_OR, " ".join(tokens), f"Last element in range is {OR_TOKEN!r}"
        )

    groups: list[list[str]] = [[]]
    for token in tokens:
        if token == OR_TOKEN:
            if not groups[-1]:
                raise InvalidRangeError(
                    ErrorKind.EMPTY_RANGE_GROUP,
                    " ".join(tokens),
                    f"Empty group between {OR_TOKEN!r} operators",
                )
            groups.append([])
        else:
            groups[-1].append(token)
    return groups


def split_comparator_version(token: str) -> tuple[str, str]:
    """Split a token at its first digit into operator and version text.

    Raises:
        InvalidRangeError: If the token contains no digit at all
    """
    for index, char in enumerate(token):
        if char in NUMBERS:
            return token[:index], token[index:]
    raise InvalidRangeError(
        ErrorKind.UNKNOWN_COMPARATOR, token, f"Could not get version from range token {token!r}"
    )


def _parse_token_version(token: str, version_text: str) -> Version:
    try:
        return parse_version(version_text)
    except InvalidVersionError as e:
        raise InvalidVersionError(
            e.kind,
            token,
            f"Could not parse version {version_text!r} in {token!r}: {e.message}",
            e.reason,
        ) from e


class _Wildcard(Enum):
    NONE = 0
    MINOR = 2
    PATCH = 3


def _wildcard_type(version_text: str) -> _Wildcard:
    parts = version_text.split(".")
    if len(parts) > 3:
        return _Wildcard.NONE
    # Everything after a wildcard segment must be a wildcard too
    if len(parts) >= 2 and parts[1] == "x" and parts[2:] in ([], ["x"]):
        return _Wildcard.MINOR
    if len(parts) == 3 and parts[2] == "x":
        return _Wildcard.PATCH
    return _Wildcard.NONE


def _expand_token(token: str) -> list[list[str]]:
    """Rewrite one token into alternatives, each a list of ANDed tokens."""
    operator, version_text = split_comparator_version(token)
    wildcard = _wildcard_type(version_text)
    if wildcard is _Wildcard.NONE:
        return [[token]]

    comparator = parse_comparator(operator, token)

    parts = version_text.split(".")
    if wildcard is _Wildcard.MINOR:
        lower = _parse_token_version(token, f"{parts[0]}.0.0")
        next_bound = lower.increment_major
    else:
        lower = _parse_token_version(token, f"{parts[0]}.{parts[1]}.0")
        next_bound = lower.increment_minor

    # Only some comparators need the upper bound
    if comparator is Comparator.GT:
        expanded = [[f">={next_bound()}"]]
    elif comparator is Comparator.GE:
        expanded = [[f">={lower}"]]
    elif comparator is Comparator.LT:
        expanded = [[f"<{lower}"]]
    elif comparator is Comparator.LE:
        expanded = [[f"<{next_bound()}"]]
    elif comparator is Comparator.EQ:
        expanded = [[f">={lower}", f"<{next_bound()}"]]
    else:
        # Outside the wildcard is an OR, so the enclosing group splits in two
        expanded = [[f"<{lower}"], [f">={next_bound()}"]]

    logger.debug(f"Expanded wildcard {token!r} to {expanded}")
    return expanded


def expand_wildcards(group: list[str]) -> list[list[str]]:
    """Expand wildcard tokens in an AND-group.

    Returns one or more AND-groups; more than one only when a negated
    wildcard forces the group to become alternatives.
    """
    alternatives: list[list[str]] = [[]]
    for token in group:
        branches = _expand_token(token)
        alternatives = [alt + branch for alt in alternatives for branch in branches]
    return alternatives


def parse_comparator_token(token: str) -> VersionRange:
    """Parse a single token such as ``>=1.2.0`` into a VersionRange.

    Raises:
        InvalidRangeError: If the operator is not recognized
        InvalidVersionError: If the version part is malformed
    """
    operator, version_text = split_comparator_version(token)
    comparator = parse_comparator(operator, token)
    return VersionRange(comparator, _parse_token_version(token, version_text))


def compile_range(range_string: str) -> Matcher:
    """Compile a range expression into a reusable matcher.

    Args:
        range_string: Range expression such as ``>=1.2.0 <2.0.0 || 3.x``

    Returns:
        A VersionRange for a single comparison, an AllOf for one AND-group,
        or an AnyOf of those for several alternatives

    Raises:
        InvalidRangeError: If the structure or an operator is invalid
        InvalidVersionError: If a version inside the range is malformed
        TypeMismatchError: If the input is not a string
    """
    if not isinstance(range_string, str):
        raise TypeMismatchError(range_string)

    tokens = tokenize(range_string)
    logger.debug(f"Range {range_string!r} tokenized as {tokens}")

    alternatives: list[Matcher] = []
    for group in split_or_groups(tokens):
        for expanded in expand_wildcards(group):
            leaves = [parse_comparator_token(token) for token in expanded]
            alternatives.append(leaves[0] if len(leaves) == 1 else AllOf(tuple(leaves)))

    if len(alternatives) == 1:
        return alternatives[0]
    return AnyOf(tuple(alternatives))


def must_compile_range(range_string: str) -> Matcher:
    """Compile a range known to be valid, such as a literal in source code.

    Raises:
        RuntimeError: If the range cannot be compiled
    """
    try:
        return compile_range(range_string)
    except SemverError as e:
        raise RuntimeError(f"semver: compile_range({range_string!r}): {e}") from e


def satisfies(version: Union[str, Version], range_: Union[str, Matcher]) -> bool:
    """Return True if ``version`` falls within ``range_``.

    Examples:
        >>> satisfies("1.2.9", "1.2.x")
        True
        >>> satisfies("2.5.0", "<2.0.0 || >=3.0.0")
        False
    """
    v = parse_version(version) if isinstance(version, str) else version
    matcher = compile_range(range_) if isinstance(range_, str) else range_
    return matches(matcher, v)
