"""Country pattern registry exports."""

from .countries import COUNTRY_FORMATS
from .service import CountryRegistry, lookup, registry

__all__ = [
    "COUNTRY_FORMATS",
    "CountryRegistry",
    "lookup",
    "registry",
]
