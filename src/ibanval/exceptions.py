"""Exceptions raised while validating IBANs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ibanval.domain import ValidationStatus

if TYPE_CHECKING:
    from ibanval.address import BaseIban


class IbanError(ValueError):
    """Base class for every IBAN validation failure."""

    code: ValidationStatus
    message = "the IBAN is invalid"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class BaseIbanError(IbanError):
    """Raised when a string does not follow the basic ISO 13616 rules."""


class InvalidFormatError(BaseIbanError):
    """Raised for wrong characters, wrong length, bad spacing or reserved check digits."""

    code = ValidationStatus.INVALID_FORMAT
    message = "the string doesn't conform to the IBAN format"


class InvalidChecksumError(BaseIbanError):
    """Raised when the MOD 97-10 remainder is not 1."""

    code = ValidationStatus.INVALID_CHECKSUM
    message = "the IBAN has an invalid checksum"


class CountryError(IbanError):
    """Raised when a basic IBAN fails the country specific checks.

    The basic IBAN is kept on the exception so callers can still read the
    country code, check digits and unchecked BBAN.
    """

    def __init__(self, base_iban: BaseIban, message: str | None = None) -> None:
        super().__init__(message)
        self.base_iban = base_iban

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountryError):
            return NotImplemented
        return type(self) is type(other) and self.base_iban == other.base_iban

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.base_iban))


class UnknownCountryError(CountryError):
    """Raised when the country code is absent from the registry."""

    code = ValidationStatus.UNKNOWN_COUNTRY
    message = "the IBAN country code wasn't recognized"


class InvalidBbanError(CountryError):
    """Raised when the BBAN does not follow the country grammar."""

    code = ValidationStatus.INVALID_BBAN
    message = "the IBAN doesn't have a correct BBAN"


__all__ = [
    "BaseIbanError",
    "CountryError",
    "IbanError",
    "InvalidBbanError",
    "InvalidChecksumError",
    "InvalidFormatError",
    "UnknownCountryError",
]
