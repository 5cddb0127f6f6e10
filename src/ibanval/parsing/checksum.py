"""ISO 7064 MOD 97-10 checksum over canonical IBAN strings."""

from __future__ import annotations

from ibanval.exceptions import InvalidChecksumError, InvalidFormatError

RESERVED_CHECK_DIGITS = frozenset({"00", "01"})


def _fold(remainder: int, char: str) -> int:
    if "0" <= char <= "9":
        return (remainder * 10 + ord(char) - ord("0")) % 97
    # Letters count as two digits: A=10 .. Z=35.
    return (remainder * 100 + ord(char) - ord("A") + 10) % 97


def mod97(address: str) -> int:
    """Return the MOD 97-10 remainder of a canonical address.

    The country code and check digits are moved behind the BBAN, so the
    characters from index 4 onwards are folded first, then the first four.
    The address must only hold ``0-9`` and ``A-Z``.
    """

    remainder = 0
    for char in address[4:]:
        remainder = _fold(remainder, char)
    for char in address[:4]:
        remainder = _fold(remainder, char)
    return remainder


def has_reserved_check_digits(address: str) -> bool:
    return address[2:4] in RESERVED_CHECK_DIGITS


def is_valid_checksum(address: str) -> bool:
    """Return True when the remainder is 1 and the check digits are not reserved."""

    return not has_reserved_check_digits(address) and mod97(address) == 1


def validate_checksum(address: str) -> None:
    """Raise when a canonical address fails the checksum rules.

    Raises:
        InvalidFormatError: when the check digits are ``00`` or ``01``.
        InvalidChecksumError: when the remainder is not 1.
    """

    if has_reserved_check_digits(address):
        raise InvalidFormatError
    if mod97(address) != 1:
        raise InvalidChecksumError


def compute_check_digits(country_code: str, bban: str) -> str:
    """Return the two check digits that make ``country_code + ?? + bban`` valid."""

    return f"{98 - mod97(country_code + '00' + bban):02d}"


__all__ = [
    "RESERVED_CHECK_DIGITS",
    "compute_check_digits",
    "has_reserved_check_digits",
    "is_valid_checksum",
    "mod97",
    "validate_checksum",
]
