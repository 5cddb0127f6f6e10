"""Domain layer exports."""

from .base import DomainModel
from .enums import CharacterClass, OutputFormat, ValidationStatus
from .grammar import BBAN_MAX_LENGTH, CountryFormat, Grammar, GrammarSegment, matches
from .types import CountryCode, IdentifierRange

__all__ = [
    "BBAN_MAX_LENGTH",
    "CharacterClass",
    "CountryCode",
    "CountryFormat",
    "DomainModel",
    "Grammar",
    "GrammarSegment",
    "IdentifierRange",
    "OutputFormat",
    "ValidationStatus",
    "matches",
]
