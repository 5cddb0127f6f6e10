"""Read-only lookup facade over the country format table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from ibanval.domain import CountryFormat, Grammar

from .countries import COUNTRY_FORMATS


@dataclass(frozen=True, slots=True)
class CountryRegistry:
    """Runtime view mapping country codes to their BBAN formats."""

    _formats: Mapping[str, CountryFormat] = field(default_factory=lambda: COUNTRY_FORMATS)

    def lookup(self, country_code: str) -> CountryFormat | None:
        return self._formats.get(country_code)

    def lookup_grammar(self, country_code: str) -> Grammar | None:
        country_format = self.lookup(country_code)
        return country_format.grammar if country_format is not None else None

    def require(self, country_code: str) -> CountryFormat:
        try:
            return self._formats[country_code]
        except KeyError as exc:
            msg = f"Country {country_code} is not in the IBAN registry"
            raise KeyError(msg) from exc

    def country_codes(self) -> tuple[str, ...]:
        return tuple(sorted(self._formats))

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._formats

    def __iter__(self) -> Iterator[CountryFormat]:
        for country_code in self.country_codes():
            yield self._formats[country_code]

    def __len__(self) -> int:
        return len(self._formats)


registry = CountryRegistry()


def lookup(country_code: str) -> Grammar | None:
    """Return the BBAN grammar of ``country_code``, or None when it is unknown."""

    return registry.lookup_grammar(country_code)


__all__ = ["CountryRegistry", "lookup", "registry"]
