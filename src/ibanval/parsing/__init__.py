"""Format normalization and checksum helpers."""

from .checksum import (
    RESERVED_CHECK_DIGITS,
    compute_check_digits,
    has_reserved_check_digits,
    is_valid_checksum,
    mod97,
    validate_checksum,
)
from .format import (
    MAX_IBAN_LENGTH,
    MAX_PAPER_LENGTH,
    MIN_IBAN_LENGTH,
    PAPER_GROUP_SIZE,
    normalize,
    parse_electronic,
    parse_paper,
    to_paper_format,
)

__all__ = [
    "MAX_IBAN_LENGTH",
    "MAX_PAPER_LENGTH",
    "MIN_IBAN_LENGTH",
    "PAPER_GROUP_SIZE",
    "RESERVED_CHECK_DIGITS",
    "compute_check_digits",
    "has_reserved_check_digits",
    "is_valid_checksum",
    "mod97",
    "normalize",
    "parse_electronic",
    "parse_paper",
    "to_paper_format",
    "validate_checksum",
]
