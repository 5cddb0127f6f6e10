"""IBAN validation per ISO 13616 with country specific BBAN checks."""

from .address import BaseIban, Iban
from .domain import CharacterClass, CountryFormat, Grammar, GrammarSegment
from .exceptions import (
    BaseIbanError,
    CountryError,
    IbanError,
    InvalidBbanError,
    InvalidChecksumError,
    InvalidFormatError,
    UnknownCountryError,
)
from .registry import CountryRegistry, registry
from .validation import (
    IbanValidator,
    ValidationReport,
    is_valid_iban,
    parse_basic,
    parse_iban,
    validate_country,
)

__all__ = [
    "BaseIban",
    "BaseIbanError",
    "CharacterClass",
    "CountryError",
    "CountryFormat",
    "CountryRegistry",
    "Grammar",
    "GrammarSegment",
    "Iban",
    "IbanError",
    "IbanValidator",
    "InvalidBbanError",
    "InvalidChecksumError",
    "InvalidFormatError",
    "UnknownCountryError",
    "ValidationReport",
    "is_valid_iban",
    "parse_basic",
    "parse_iban",
    "registry",
    "validate_country",
]
