"""BBAN grammar models."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from pydantic import Field, field_validator, model_validator

from .base import DomainModel
from .enums import CharacterClass
from .types import CountryCode, IdentifierRange

BBAN_MAX_LENGTH = 30


class GrammarSegment(DomainModel):
    """A run of ``count`` characters that all belong to ``character_class``."""

    count: Annotated[int, Field(ge=1)]
    character_class: CharacterClass

    def notation(self) -> str:
        return f"{self.count}!{self.character_class.value}"


class Grammar(DomainModel):
    """Fixed-width BBAN shape as an ordered concatenation of segments."""

    segments: tuple[GrammarSegment, ...]

    @field_validator("segments")
    @classmethod
    def ensure_segments(cls, value: tuple[GrammarSegment, ...]) -> tuple[GrammarSegment, ...]:
        if not value:
            msg = "A grammar needs at least one segment"
            raise ValueError(msg)
        if sum(segment.count for segment in value) > BBAN_MAX_LENGTH:
            msg = f"A grammar cannot describe more than {BBAN_MAX_LENGTH} characters"
            raise ValueError(msg)
        return value

    @classmethod
    def of(cls, *segments: tuple[int, CharacterClass]) -> Grammar:
        return cls(
            segments=tuple(
                GrammarSegment(count=count, character_class=character_class)
                for count, character_class in segments
            )
        )

    @property
    def length(self) -> int:
        return sum(segment.count for segment in self.segments)

    def classes(self) -> Iterator[CharacterClass]:
        """Yield the expected character class for every BBAN position."""

        for segment in self.segments:
            for _ in range(segment.count):
                yield segment.character_class

    def matches(self, bban: str) -> bool:
        """Return True when ``bban`` has exactly this shape."""

        if len(bban) != self.length:
            return False
        return all(
            character_class.matches(char)
            for character_class, char in zip(self.classes(), bban, strict=True)
        )

    def notation(self) -> str:
        """Render the grammar in registry notation, e.g. ``4!a6!n8!n``."""

        return "".join(segment.notation() for segment in self.segments)


class CountryFormat(DomainModel):
    """Registry record describing the BBAN of one country."""

    country_code: CountryCode
    grammar: Grammar
    bank_identifier_range: IdentifierRange | None = None
    branch_identifier_range: IdentifierRange | None = None
    notes: tuple[str, ...] = ()

    @field_validator("country_code")
    @classmethod
    def ensure_country_code(cls, value: str) -> str:
        if len(value) != 2 or not all(CharacterClass.ALPHA.matches(char) for char in value):
            msg = f"Country code must be two uppercase letters, got {value!r}"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def ensure_ranges(self) -> CountryFormat:
        for name, bounds in (
            ("bank_identifier_range", self.bank_identifier_range),
            ("branch_identifier_range", self.branch_identifier_range),
        ):
            if bounds is None:
                continue
            start, end = bounds
            if not 0 <= start < end <= self.grammar.length:
                msg = f"{name} {bounds} falls outside the {self.country_code} BBAN"
                raise ValueError(msg)
        return self

    @property
    def bban_length(self) -> int:
        return self.grammar.length

    @property
    def iban_length(self) -> int:
        return self.grammar.length + 4


def matches(bban: str, grammar: Grammar) -> bool:
    """Check ``bban`` against ``grammar``; see :meth:`Grammar.matches`."""

    return grammar.matches(bban)


__all__ = [
    "BBAN_MAX_LENGTH",
    "CountryFormat",
    "Grammar",
    "GrammarSegment",
    "matches",
]
