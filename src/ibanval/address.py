"""Validated IBAN value objects."""

from __future__ import annotations

from typing import Any

from pydantic import (
    PrivateAttr,
    SerializationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

from ibanval.domain import CountryFormat, DomainModel, IdentifierRange
from ibanval.exceptions import InvalidBbanError, InvalidFormatError, UnknownCountryError
from ibanval.parsing import normalize, to_paper_format, validate_checksum
from ibanval.registry import CountryRegistry, registry


class BaseIban(DomainModel):
    """An IBAN that passed the format and checksum checks of ISO 13616.

    The BBAN is not checked against the country format; use :class:`Iban`
    for that. Validating a string accepts both the electronic and the paper
    format. Serialization emits the paper format in JSON mode and the
    electronic format in python mode.

    ``model_validate`` reports failures as ``pydantic.ValidationError`` with
    the :class:`~ibanval.exceptions.IbanError` under ``ctx["error"]``;
    :meth:`parse` raises the typed error itself.
    """

    electronic: str

    @classmethod
    def parse(cls, address: str) -> BaseIban:
        """Parse ``address``, raising ``InvalidFormatError`` or ``InvalidChecksumError``."""

        canonical = normalize(address)
        validate_checksum(canonical)
        return cls.model_construct(electronic=canonical)

    @model_validator(mode="before")
    @classmethod
    def coerce_address(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"electronic": normalize(data)}
        if isinstance(data, Iban):
            return {"electronic": data.electronic_str}
        return data

    @field_validator("electronic")
    @classmethod
    def ensure_canonical(cls, value: str) -> str:
        if normalize(value) != value:
            raise InvalidFormatError
        validate_checksum(value)
        return value

    @model_serializer(mode="plain")
    def serialize_address(self, info: SerializationInfo) -> str:
        if info.mode_is_json():
            return self.to_display_string()
        return self.electronic

    @property
    def electronic_str(self) -> str:
        return self.electronic

    @property
    def country_code(self) -> str:
        return self.electronic[:2]

    @property
    def check_digits_str(self) -> str:
        return self.electronic[2:4]

    @property
    def check_digits(self) -> int:
        return int(self.check_digits_str)

    @property
    def bban_unchecked(self) -> str:
        """The part after the check digits, not validated against the country format."""
        return self.electronic[4:]

    def to_canonical_string(self) -> str:
        return self.electronic

    def to_display_string(self) -> str:
        return to_paper_format(self.electronic)

    def __str__(self) -> str:
        return self.to_display_string()


def _match_country(base_iban: BaseIban, country_registry: CountryRegistry) -> CountryFormat:
    country_format = country_registry.lookup(base_iban.country_code)
    if country_format is None:
        raise UnknownCountryError(base_iban)
    if not country_format.grammar.matches(base_iban.bban_unchecked):
        raise InvalidBbanError(base_iban)
    return country_format


class Iban(DomainModel):
    """A fully validated IBAN whose BBAN follows its country format.

    The country format the BBAN was matched against is kept with the IBAN,
    so bank and branch identifiers come from the same registry that
    accepted it.
    """

    base_iban: BaseIban
    _country_format: CountryFormat | None = PrivateAttr(default=None)

    @classmethod
    def parse(cls, address: str) -> Iban:
        """Fully validate ``address`` against the global registry.

        Raises the :class:`~ibanval.exceptions.IbanError` subclasses directly
        instead of wrapping them in ``pydantic.ValidationError``.
        """

        return cls.from_base_iban(BaseIban.parse(address))

    @classmethod
    def from_base_iban(
        cls,
        base_iban: BaseIban,
        country_registry: CountryRegistry | None = None,
    ) -> Iban:
        """Check ``base_iban`` against its country format.

        Raises:
            UnknownCountryError: when the country code is not registered.
            InvalidBbanError: when the BBAN does not follow the grammar.
        """

        resolved = country_registry if country_registry is not None else registry
        return cls.from_country_format(base_iban, _match_country(base_iban, resolved))

    @classmethod
    def from_country_format(cls, base_iban: BaseIban, country_format: CountryFormat) -> Iban:
        """Wrap ``base_iban`` whose BBAN already matched ``country_format``."""

        iban = cls.model_construct(base_iban=base_iban)
        iban._country_format = country_format
        return iban

    @model_validator(mode="before")
    @classmethod
    def coerce_address(cls, data: Any) -> Any:
        if isinstance(data, (str, BaseIban)):
            return {"base_iban": data}
        return data

    @model_validator(mode="after")
    def ensure_country_format(self) -> Iban:
        self._country_format = _match_country(self.base_iban, registry)
        return self

    @model_serializer(mode="plain")
    def serialize_address(self, info: SerializationInfo) -> str:
        if info.mode_is_json():
            return self.to_display_string()
        return self.electronic_str

    @property
    def electronic_str(self) -> str:
        return self.base_iban.electronic_str

    @property
    def country_code(self) -> str:
        return self.base_iban.country_code

    @property
    def check_digits_str(self) -> str:
        return self.base_iban.check_digits_str

    @property
    def check_digits(self) -> int:
        return self.base_iban.check_digits

    @property
    def bban_unchecked(self) -> str:
        return self.base_iban.bban_unchecked

    @property
    def bban(self) -> str:
        return self.base_iban.bban_unchecked

    @property
    def country_format(self) -> CountryFormat:
        """The registry record the BBAN was matched against."""

        if self._country_format is None:
            return registry.require(self.country_code)
        return self._country_format

    @property
    def bank_identifier(self) -> str | None:
        """The bank identifier, or None when the country does not define one.

        >>> Iban.model_validate("AD12 0001 2030 2003 5910 0100").bank_identifier
        '0001'
        """
        return self._slice(self.country_format.bank_identifier_range)

    @property
    def branch_identifier(self) -> str | None:
        return self._slice(self.country_format.branch_identifier_range)

    def _slice(self, bounds: IdentifierRange | None) -> str | None:
        if bounds is None:
            return None
        start, end = bounds
        return self.bban[start:end]

    def to_canonical_string(self) -> str:
        return self.base_iban.to_canonical_string()

    def to_display_string(self) -> str:
        return self.base_iban.to_display_string()

    def __str__(self) -> str:
        return self.to_display_string()


__all__ = ["BaseIban", "Iban"]
