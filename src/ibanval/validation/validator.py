"""Two-stage IBAN validation service."""

from __future__ import annotations

import logging

from ibanval.address import BaseIban, Iban
from ibanval.domain import ValidationStatus
from ibanval.exceptions import (
    BaseIbanError,
    CountryError,
    IbanError,
    InvalidBbanError,
    UnknownCountryError,
)
from ibanval.parsing import normalize, validate_checksum
from ibanval.registry import CountryRegistry, registry

from .report import ValidationReport


class IbanValidator:
    """Turns raw strings into basic and fully validated IBANs.

    The first stage normalizes the input and checks the MOD 97-10 checksum,
    producing a :class:`BaseIban`. The second stage looks up the country
    format and matches the BBAN, producing an :class:`Iban`.
    """

    def __init__(
        self,
        country_registry: CountryRegistry | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = country_registry if country_registry is not None else registry
        self._logger = logger or logging.getLogger(__name__)

    def parse_basic(self, address: str) -> BaseIban:
        """Parse ``address`` without looking at the country format.

        Raises:
            InvalidFormatError: for malformed input or reserved check digits.
            InvalidChecksumError: when the MOD 97-10 remainder is not 1.
        """

        try:
            canonical = normalize(address)
            validate_checksum(canonical)
        except BaseIbanError as exc:
            self._logger.debug("Rejected IBAN input %r: %s", address, exc)
            raise
        return BaseIban.model_construct(electronic=canonical)

    def validate_country(self, base_iban: BaseIban) -> Iban:
        """Check the BBAN of ``base_iban`` against its country format.

        Raises:
            UnknownCountryError: when the country code is not registered.
            InvalidBbanError: when the BBAN does not follow the grammar.
        """

        country_format = self._registry.lookup(base_iban.country_code)
        if country_format is None:
            self._logger.debug("Unknown IBAN country %s", base_iban.country_code)
            raise UnknownCountryError(base_iban)
        if not country_format.grammar.matches(base_iban.bban_unchecked):
            self._logger.debug(
                "BBAN of %s does not match %s",
                base_iban.electronic_str,
                country_format.grammar.notation(),
            )
            raise InvalidBbanError(base_iban)
        return Iban.from_country_format(base_iban, country_format)

    def parse(self, address: str) -> Iban:
        """Fully validate ``address``; see :meth:`parse_basic` and :meth:`validate_country`."""

        return self.validate_country(self.parse_basic(address))

    def is_valid(self, address: str) -> bool:
        try:
            self.parse(address)
        except IbanError:
            return False
        return True

    def check(self, address: str) -> ValidationReport:
        """Validate ``address`` and describe the outcome instead of raising.

        Reports are built with ``model_construct`` so results checked against
        an injected registry are not re-checked against the global one.
        """

        text = address if isinstance(address, str) else repr(address)
        try:
            iban = self.parse(address)
        except CountryError as exc:
            return ValidationReport.model_construct(
                input=text,
                status=exc.code,
                base_iban=exc.base_iban,
                error=str(exc),
            )
        except IbanError as exc:
            return ValidationReport.model_construct(input=text, status=exc.code, error=str(exc))
        return ValidationReport.model_construct(
            input=text,
            status=ValidationStatus.VALID,
            base_iban=iban.base_iban,
            iban=iban,
        )


default_validator = IbanValidator()


def parse_basic(address: str) -> BaseIban:
    """Parse a basic IBAN with the default validator."""

    return default_validator.parse_basic(address)


def validate_country(base_iban: BaseIban) -> Iban:
    return default_validator.validate_country(base_iban)


def parse_iban(address: str) -> Iban:
    """Parse a fully validated IBAN with the default validator."""

    return default_validator.parse(address)


def is_valid_iban(address: str) -> bool:
    return default_validator.is_valid(address)


__all__ = [
    "IbanValidator",
    "default_validator",
    "is_valid_iban",
    "parse_basic",
    "parse_iban",
    "validate_country",
]
