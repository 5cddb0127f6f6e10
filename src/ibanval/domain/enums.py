"""Enumerations used across the ibanval domain layer."""

from __future__ import annotations

import string
from enum import StrEnum

_ALPHA = frozenset(string.ascii_uppercase)
_DIGIT = frozenset(string.digits)


class CharacterClass(StrEnum):
    """Character categories of the SWIFT registry BBAN notation.

    Unlike the registry's ``c`` class, ``ALPHA_OR_DIGIT`` does not admit
    lowercase letters; addresses are uppercased before they are matched.
    """

    ALPHA = "a"
    DIGIT = "n"
    ALPHA_OR_DIGIT = "c"

    def matches(self, char: str) -> bool:
        if self is CharacterClass.ALPHA:
            return char in _ALPHA
        if self is CharacterClass.DIGIT:
            return char in _DIGIT
        return char in _ALPHA or char in _DIGIT


class ValidationStatus(StrEnum):
    """Outcome of a non-raising validation check."""

    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHECKSUM = "invalid_checksum"
    UNKNOWN_COUNTRY = "unknown_country"
    INVALID_BBAN = "invalid_bban"


class OutputFormat(StrEnum):
    """Textual representations defined by ISO 13616."""

    ELECTRONIC = "electronic"
    PAPER = "paper"
