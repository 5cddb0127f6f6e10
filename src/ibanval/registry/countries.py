"""Country BBAN formats from the SWIFT IBAN registry.

The table is static data. Identifier ranges are zero based, end exclusive
offsets into the BBAN.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ibanval.domain import CharacterClass, CountryCode, CountryFormat, Grammar, IdentifierRange

_A = CharacterClass.ALPHA
_N = CharacterClass.DIGIT
_C = CharacterClass.ALPHA_OR_DIGIT


def _country(
    code: str,
    segments: list[tuple[int, CharacterClass]],
    *,
    bank: IdentifierRange | None = None,
    branch: IdentifierRange | None = None,
    notes: tuple[str, ...] = (),
) -> CountryFormat:
    return CountryFormat(
        country_code=CountryCode(code),
        grammar=Grammar.of(*segments),
        bank_identifier_range=bank,
        branch_identifier_range=branch,
        notes=notes,
    )


_FORMATS: tuple[CountryFormat, ...] = (
    _country("AD", [(4, _N), (4, _N), (12, _C)], bank=(0, 4), branch=(4, 8)),
    _country("AE", [(3, _N), (16, _N)], bank=(0, 3)),
    _country(
        "AL",
        [(8, _N), (16, _C)],
        bank=(0, 8),
        branch=(3, 7),
        notes=(
            "Registry bank identifier range 1-3 disagrees with its length 8; the length is used.",
            "Registry branch identifier example 1100 is shorter than its range; example used.",
        ),
    ),
    _country("AT", [(5, _N), (11, _N)], bank=(0, 5)),
    _country("AZ", [(4, _A), (20, _C)], bank=(0, 4)),
    _country("BA", [(3, _N), (3, _N), (8, _N), (2, _N)], bank=(0, 3), branch=(3, 6)),
    _country("BE", [(3, _N), (7, _N), (2, _N)], bank=(0, 3)),
    _country("BG", [(4, _A), (4, _N), (2, _N), (8, _C)], bank=(0, 4), branch=(4, 8)),
    _country("BH", [(4, _A), (14, _C)], bank=(0, 4)),
    _country("BI", [(5, _N), (5, _N), (11, _N), (2, _N)], bank=(0, 5), branch=(5, 10)),
    _country("BR", [(8, _N), (5, _N), (10, _N), (1, _A), (1, _C)], bank=(0, 8), branch=(8, 13)),
    _country("BY", [(4, _C), (4, _N), (16, _C)], bank=(0, 4)),
    _country("CH", [(5, _N), (12, _C)], bank=(0, 5)),
    _country("CR", [(4, _N), (14, _N)], bank=(0, 4)),
    _country("CY", [(3, _N), (5, _N), (16, _C)], bank=(0, 3), branch=(3, 8)),
    _country("CZ", [(4, _N), (6, _N), (10, _N)], bank=(0, 4)),
    _country("DE", [(8, _N), (10, _N)], bank=(0, 8)),
    _country("DJ", [(5, _N), (5, _N), (11, _N), (2, _N)], bank=(0, 5), branch=(5, 10)),
    _country("DK", [(4, _N), (9, _N), (1, _N)], bank=(0, 4)),
    _country("DO", [(4, _C), (20, _N)], bank=(0, 4)),
    _country("EE", [(2, _N), (2, _N), (11, _N), (1, _N)], bank=(0, 2)),
    _country("EG", [(4, _N), (4, _N), (17, _N)], bank=(0, 4), branch=(4, 8)),
    _country("ES", [(4, _N), (4, _N), (1, _N), (1, _N), (10, _N)], bank=(0, 4), branch=(4, 8)),
    _country("FI", [(3, _N), (11, _N)], bank=(0, 3)),
    _country("FK", [(2, _A), (12, _N)], bank=(0, 2)),
    _country("FO", [(4, _N), (9, _N), (1, _N)], bank=(0, 4)),
    _country("FR", [(5, _N), (5, _N), (11, _C), (2, _N)], bank=(0, 5)),
    _country("GB", [(4, _A), (6, _N), (8, _N)], bank=(0, 4), branch=(4, 10)),
    _country("GE", [(2, _A), (16, _N)], bank=(0, 2)),
    _country("GI", [(4, _A), (15, _C)], bank=(0, 4)),
    _country("GL", [(4, _N), (9, _N), (1, _N)], bank=(0, 4)),
    _country("GR", [(3, _N), (4, _N), (16, _C)], bank=(0, 3), branch=(3, 7)),
    _country("GT", [(4, _C), (20, _C)], bank=(0, 4)),
    _country("HR", [(7, _N), (10, _N)], bank=(0, 7)),
    _country("HU", [(3, _N), (4, _N), (1, _N), (15, _N), (1, _N)], bank=(0, 3), branch=(3, 7)),
    _country("IE", [(4, _A), (6, _N), (8, _N)], bank=(0, 4), branch=(4, 10)),
    _country("IL", [(3, _N), (3, _N), (13, _N)], bank=(0, 3), branch=(3, 6)),
    _country("IQ", [(4, _A), (3, _N), (12, _N)], bank=(0, 4), branch=(4, 7)),
    _country("IS", [(4, _N), (2, _N), (6, _N), (10, _N)], bank=(0, 2), branch=(2, 4)),
    _country("IT", [(1, _A), (5, _N), (5, _N), (12, _C)], bank=(1, 6), branch=(6, 11)),
    _country(
        "JO",
        [(4, _A), (4, _N), (18, _C)],
        bank=(0, 4),
        branch=(4, 8),
        notes=(
            "Registry bank identifier range is incorrect; positions 1-4 are used.",
            "Registry provides no branch identifier example.",
        ),
    ),
    _country("KW", [(4, _A), (22, _C)], bank=(0, 4)),
    _country("KZ", [(3, _N), (13, _C)], bank=(0, 3)),
    _country("LB", [(4, _N), (20, _C)], bank=(0, 4)),
    _country("LC", [(4, _A), (24, _C)], bank=(0, 4)),
    _country("LI", [(5, _N), (12, _C)], bank=(0, 5)),
    _country("LT", [(5, _N), (11, _N)], bank=(0, 5)),
    _country("LU", [(3, _N), (13, _C)], bank=(0, 3)),
    _country("LV", [(4, _A), (13, _C)], bank=(0, 4)),
    _country("LY", [(3, _N), (3, _N), (15, _N)], bank=(0, 3), branch=(3, 6)),
    _country("MC", [(5, _N), (5, _N), (11, _C), (2, _N)], bank=(0, 5), branch=(5, 10)),
    _country("MD", [(2, _C), (18, _C)], bank=(0, 2)),
    _country("ME", [(3, _N), (13, _N), (2, _N)], bank=(0, 3)),
    _country(
        "MK",
        [(3, _N), (10, _C), (2, _N)],
        bank=(0, 3),
        notes=("Registry bank identifier example does not match the example BBAN.",),
    ),
    _country("MN", [(4, _N), (12, _N)], bank=(0, 4)),
    _country("MR", [(5, _N), (5, _N), (11, _N), (2, _N)], bank=(0, 5), branch=(5, 10)),
    _country("MT", [(4, _A), (5, _N), (18, _C)], bank=(0, 4), branch=(4, 9)),
    _country(
        "MU",
        [(4, _A), (2, _N), (2, _N), (12, _N), (3, _N), (3, _A)],
        bank=(0, 6),
        branch=(6, 8),
    ),
    _country("NI", [(4, _A), (20, _N)], bank=(0, 4)),
    _country("NL", [(4, _A), (10, _N)], bank=(0, 4)),
    _country("NO", [(4, _N), (6, _N), (1, _N)], bank=(0, 4)),
    _country("OM", [(3, _N), (16, _C)], bank=(0, 3)),
    _country("PK", [(4, _A), (16, _C)], bank=(0, 4)),
    _country("PL", [(8, _N), (16, _N)], branch=(0, 8)),
    _country("PS", [(4, _A), (21, _C)], bank=(0, 4)),
    _country("PT", [(4, _N), (4, _N), (11, _N), (2, _N)], bank=(0, 4), branch=(4, 8)),
    _country("QA", [(4, _A), (21, _C)], bank=(0, 4)),
    _country("RO", [(4, _A), (16, _C)], bank=(0, 4)),
    _country("RS", [(3, _N), (13, _N), (2, _N)], bank=(0, 3)),
    _country("RU", [(9, _N), (5, _N), (15, _C)], bank=(0, 9), branch=(9, 14)),
    _country("SA", [(2, _N), (18, _C)], bank=(0, 2)),
    _country("SC", [(4, _A), (2, _N), (2, _N), (16, _N), (3, _A)], bank=(0, 6), branch=(6, 8)),
    _country("SD", [(2, _N), (12, _N)], bank=(0, 2)),
    _country(
        "SE",
        [(3, _N), (16, _N), (1, _N)],
        bank=(0, 3),
        notes=("Registry bank identifier example does not match the example BBAN.",),
    ),
    _country("SI", [(5, _N), (8, _N), (2, _N)], bank=(0, 5)),
    _country("SK", [(4, _N), (6, _N), (10, _N)], bank=(0, 4)),
    _country("SM", [(1, _A), (5, _N), (5, _N), (12, _C)], bank=(1, 6), branch=(6, 11)),
    _country("SO", [(4, _N), (3, _N), (12, _N)], bank=(0, 4), branch=(4, 7)),
    _country(
        "ST",
        [(4, _N), (4, _N), (11, _N), (2, _N)],
        bank=(0, 4),
        branch=(4, 8),
        notes=("Registry bank identifier example does not match the example BBAN.",),
    ),
    _country("SV", [(4, _A), (20, _N)], bank=(0, 4)),
    _country("TL", [(3, _N), (14, _N), (2, _N)], bank=(0, 3)),
    _country("TN", [(2, _N), (3, _N), (13, _N), (2, _N)], bank=(0, 2), branch=(2, 5)),
    _country("TR", [(5, _N), (1, _N), (16, _C)], bank=(0, 5)),
    _country("UA", [(6, _N), (19, _C)], bank=(0, 6)),
    _country("VA", [(3, _N), (15, _N)], bank=(0, 3)),
    _country("VG", [(4, _A), (16, _N)], bank=(0, 4)),
    _country("XK", [(4, _N), (10, _N), (2, _N)], bank=(0, 2), branch=(2, 4)),
    _country("YE", [(4, _A), (4, _N), (18, _C)], bank=(0, 4), branch=(4, 8)),
)

COUNTRY_FORMATS: Mapping[str, CountryFormat] = MappingProxyType(
    {country_format.country_code: country_format for country_format in _FORMATS}
)

__all__ = ["COUNTRY_FORMATS"]
