"""Value objects describing validation outcomes."""

from __future__ import annotations

from ibanval.address import BaseIban, Iban
from ibanval.domain import DomainModel, ValidationStatus


class ValidationReport(DomainModel):
    """Outcome of checking one input string without raising."""

    input: str
    status: ValidationStatus
    base_iban: BaseIban | None = None
    iban: Iban | None = None
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID


__all__ = ["ValidationReport"]
