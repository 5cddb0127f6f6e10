"""Validation orchestration exports."""

from .report import ValidationReport
from .validator import (
    IbanValidator,
    default_validator,
    is_valid_iban,
    parse_basic,
    parse_iban,
    validate_country,
)

__all__ = [
    "IbanValidator",
    "ValidationReport",
    "default_validator",
    "is_valid_iban",
    "parse_basic",
    "parse_iban",
    "validate_country",
]
