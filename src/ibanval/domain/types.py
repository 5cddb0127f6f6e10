"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

CountryCode = NewType("CountryCode", str)
IdentifierRange = tuple[int, int]

__all__ = [
    "CountryCode",
    "IdentifierRange",
]
