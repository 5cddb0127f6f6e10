"""Electronic and paper format handling for IBAN strings."""

from __future__ import annotations

import string
from collections.abc import Iterable

from ibanval.exceptions import InvalidFormatError

PAPER_GROUP_SIZE = 4
MIN_IBAN_LENGTH = 5
MAX_IBAN_LENGTH = 34
MAX_PAPER_LENGTH = MAX_IBAN_LENGTH + (MAX_IBAN_LENGTH - 1) // PAPER_GROUP_SIZE

_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def parse_electronic(chars: Iterable[str]) -> str:
    """Build the canonical string from characters in electronic format.

    The country code must already be uppercase and the check digits must be
    digits. The BBAN may use either case and is uppercased.
    """

    canonical: list[str] = []
    for index, char in enumerate(chars):
        if len(canonical) == MAX_IBAN_LENGTH:
            raise InvalidFormatError
        if index < 2:
            allowed = _UPPERCASE
        elif index < 4:
            allowed = _DIGITS
        else:
            allowed = _ALPHANUMERIC
        if char not in allowed:
            raise InvalidFormatError
        canonical.append(char.upper())

    if len(canonical) < MIN_IBAN_LENGTH:
        raise InvalidFormatError
    return "".join(canonical)


def parse_paper(address: str) -> str:
    """Build the canonical string from an address in paper format.

    Groups of four characters are separated by one space. The last group
    holds one to four characters and is not followed by a space.
    """

    group_stride = PAPER_GROUP_SIZE + 1
    if len(address) > MAX_PAPER_LENGTH or len(address) % group_stride == 0:
        raise InvalidFormatError
    if any(
        address[index] != " "
        for index in range(PAPER_GROUP_SIZE, len(address), group_stride)
    ):
        raise InvalidFormatError
    return parse_electronic(
        char for index, char in enumerate(address) if index % group_stride != PAPER_GROUP_SIZE
    )


def normalize(address: str) -> str:
    """Return the canonical electronic form of ``address``.

    The electronic interpretation is tried first, then the paper one.

    Raises:
        InvalidFormatError: when neither interpretation applies.
    """

    if not isinstance(address, str):
        raise InvalidFormatError
    try:
        return parse_electronic(address)
    except InvalidFormatError:
        return parse_paper(address)


def to_paper_format(canonical: str) -> str:
    """Split a canonical address into space separated groups of four."""

    return " ".join(
        canonical[start : start + PAPER_GROUP_SIZE]
        for start in range(0, len(canonical), PAPER_GROUP_SIZE)
    )


__all__ = [
    "MAX_IBAN_LENGTH",
    "MAX_PAPER_LENGTH",
    "MIN_IBAN_LENGTH",
    "PAPER_GROUP_SIZE",
    "normalize",
    "parse_electronic",
    "parse_paper",
    "to_paper_format",
]
