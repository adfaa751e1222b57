# SPDX-License-Identifier: MIT
"""Character classifiers shared by the version parser and range compiler."""

from __future__ import annotations

NUMBERS = frozenset("0123456789")
ALPHAS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-")
ALPHANUMERICS = NUMBERS | ALPHAS

# Largest value of an unsigned 64-bit integer
MAX_UINT64 = 2**64 - 1


def contains_only(text: str, charset: frozenset[str]) -> bool:
    """Return True if every character of ``text`` is in ``charset``.

    An empty string trivially satisfies any charset.
    """
    return all(char in charset for char in text)


def is_numeric(text: str) -> bool:
    """Return True for a non-empty string of ASCII digits.

    ``str.isdigit`` is not used because it accepts non-ASCII digits.
    """
    return bool(text) and contains_only(text, NUMBERS)


def is_alphanumeric(text: str) -> bool:
    """Return True for a non-empty string restricted to ``[0-9A-Za-z-]``."""
    return bool(text) and contains_only(text, ALPHANUMERICS)


def has_leading_zero(text: str) -> bool:
    """Return True if a numeric string carries a redundant leading zero."""
    return len(text) > 1 and text[0] == "0"


def fits_uint64(value: int) -> bool:
    return 0 <= value <= MAX_UINT64
