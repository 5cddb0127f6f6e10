from __future__ import annotations

import logging

import pytest

from ibanval import (
    BaseIban,
    CharacterClass,
    CountryFormat,
    CountryRegistry,
    Grammar,
    Iban,
    IbanValidator,
    InvalidBbanError,
    InvalidChecksumError,
    InvalidFormatError,
    UnknownCountryError,
    is_valid_iban,
    parse_basic,
    parse_iban,
    validate_country,
)
from ibanval.domain import ValidationStatus
from ibanval.exceptions import BaseIbanError, CountryError, IbanError
from ibanval.registry import COUNTRY_FORMATS

VALID_IBANS = [
    "AD1200012030200359100100",
    "AE070331234567890123456",
    "AL47212110090000000235698741",
    "AT611904300234573201",
    "AZ21NABZ00000000137010001944",
    "BA391290079401028494",
    "BE68539007547034",
    "BG80BNBG96611020345678",
    "BH67BMAG00001299123456",
    "BI4210000100010000332045181",
    "BR1800360305000010009795493C1",
    "BY13NBRB3600900000002Z00AB00",
    "CH9300762011623852957",
    "CR05015202001026284066",
    "CY17002001280000001200527600",
    "CZ6508000000192000145399",
    "DE89370400440532013000",
    "DK5000400440116243",
    "DJ2100010000000154000100186",
    "DO28BAGR00000001212453611324",
    "EE382200221020145685",
    "EG380019000500000000263180002",
    "ES9121000418450200051332",
    "FI2112345600000785",
    "FK88SC123456789012",
    "FO6264600001631634",
    "FR1420041010050500013M02606",
    "GB29NWBK60161331926819",
    "GE29NB0000000101904917",
    "GI75NWBK000000007099453",
    "GL8964710001000206",
    "GR1601101250000000012300695",
    "GT82TRAJ01020000001210029690",
    "HR1210010051863000160",
    "HU42117730161111101800000000",
    "IE29AIBK93115212345678",
    "IL620108000000099999999",
    "IQ98NBIQ850123456789012",
    "IS140159260076545510730339",
    "IT60X0542811101000000123456",
    "JO94CBJO0010000000000131000302",
    "KW81CBKU0000000000001234560101",
    "KZ86125KZT5004100100",
    "LB62099900000001001901229114",
    "LC55HEMM000100010012001200023015",
    "LI21088100002324013AA",
    "LT121000011101001000",
    "LU280019400644750000",
    "LV80BANK0000435195001",
    "LY83002048000020100120361",
    "MC5811222000010123456789030",
    "MD24AG000225100013104168",
    "ME25505000012345678951",
    "MK07250120000058984",
    "MN121234123456789123",
    "MR1300020001010000123456753",
    "MT84MALT011000012345MTLCAST001S",
    "MU17BOMM0101101030300200000MUR",
    "NI79BAMC00000000000003123123",
    "NL91ABNA0417164300",
    "NO9386011117947",
    "OM810180000001299123456",
    "PK36SCBL0000001123456702",
    "PL61109010140000071219812874",
    "PS92PALS000000000400123456702",
    "PT50000201231234567890154",
    "QA58DOHB00001234567890ABCDEFG",
    "RO49AAAA1B31007593840000",
    "RS35260005601001611379",
    "RU0304452522540817810538091310419",
    "SA0380000000608010167519",
    "SC18SSCB11010000000000001497USD",
    "SD2129010501234001",
    "SE4550000000058398257466",
    "SI56263300012039086",
    "SK3112000000198742637541",
    "SM86U0322509800000000270100",
    "SO211000001001000100141",
    "ST68000100010051845310112",
    "SV62CENR00000000000000700025",
    "TL380080012345678910157",
    "TN5910006035183598478831",
    "TR330006100519786457841326",
    "UA213223130000026007233566001",
    "VA59001123000012345678",
    "VG96VPVG0000012345678901",
    "XK051212012345678906",
    "YE15CBYE0001018861234567891234",
]

INVALID_BBANS = [
    "AD54BD012030200359100100",
    "AE32ABCD234567890123456",
    "AL84212110090000AB023569874",
    "AT24190430234533203672",
    "AZ75N00Z000000000137010001944",
    "BA6312900794010284AC",
    "BE095390075470",
    "BG83BN96611020345678",
    "BH93BG00001299123456",
    "BR15003605000010009795493C1",
    "BY56NBRB36009000002Z00AB00",
]

INVALID_CHECKSUMS = [
    "DE4450010234607324931",
    "GR16011012500000834112300695",
    "GB29NWBK60934331926819",
    "SA0380000000648510167519",
    "CH9300762011645852957",
    "TR330006100519786457465326",
]


def test_german_example() -> None:
    iban = parse_iban("DE44500105175407324931")
    assert iban.country_code == "DE"
    assert iban.check_digits == 44
    assert iban.check_digits_str == "44"
    assert iban.bban == "500105175407324931"
    assert iban.to_display_string() == "DE44 5001 0517 5407 3249 31"


def test_paper_format_example() -> None:
    iban = parse_iban("LV80 BANK 0000 4351 9500 1")
    assert iban.to_canonical_string() == "LV80BANK0000435195001"


def test_checksum_failure_example() -> None:
    with pytest.raises(InvalidChecksumError):
        parse_iban("DE4450010234607324931")


def test_misaligned_spacing_example() -> None:
    with pytest.raises(InvalidFormatError):
        parse_iban("MR0 041 9")


def test_unknown_country_example() -> None:
    base = parse_basic("ZZ07273912631298461")
    with pytest.raises(UnknownCountryError) as excinfo:
        parse_iban("ZZ07273912631298461")
    assert excinfo.value.base_iban == base
    assert excinfo.value.base_iban.bban_unchecked == "273912631298461"


def test_invalid_bban_example() -> None:
    base = parse_basic("AL84212110090000AB023569874")
    with pytest.raises(InvalidBbanError) as excinfo:
        validate_country(base)
    assert excinfo.value.base_iban == base
    assert excinfo.value == InvalidBbanError(base)
    assert excinfo.value != UnknownCountryError(base)


@pytest.mark.parametrize("address", VALID_IBANS)
def test_valid_ibans(address: str) -> None:
    iban = parse_iban(address)
    assert iban.to_canonical_string() == address
    assert parse_iban(iban.to_display_string()) == iban
    assert is_valid_iban(address)


def test_every_registry_country_has_a_valid_example() -> None:
    covered = {address[:2] for address in VALID_IBANS}
    assert covered == set(COUNTRY_FORMATS)


@pytest.mark.parametrize("address", INVALID_BBANS)
def test_invalid_bbans(address: str) -> None:
    base = parse_basic(address)
    with pytest.raises(InvalidBbanError) as excinfo:
        parse_iban(address)
    assert excinfo.value.base_iban == base


@pytest.mark.parametrize("address", INVALID_CHECKSUMS)
def test_invalid_checksums(address: str) -> None:
    with pytest.raises(InvalidChecksumError):
        parse_basic(address)
    assert not is_valid_iban(address)


def test_reserved_check_digits_are_format_errors() -> None:
    with pytest.raises(InvalidFormatError):
        parse_basic("DE01370400440532013032")
    with pytest.raises(InvalidFormatError):
        parse_basic("MR0000020001010000123456754")


def test_error_hierarchy() -> None:
    assert issubclass(InvalidFormatError, BaseIbanError)
    assert issubclass(InvalidChecksumError, BaseIbanError)
    assert issubclass(UnknownCountryError, CountryError)
    assert issubclass(InvalidBbanError, CountryError)
    assert issubclass(IbanError, ValueError)
    assert str(InvalidChecksumError()) == "the IBAN has an invalid checksum"


def test_basic_and_full_results_share_accessors() -> None:
    address = "MR13 0002 0001 0100 0012 3456 753"
    base = parse_basic(address)
    iban = validate_country(base)
    assert isinstance(base, BaseIban)
    assert isinstance(iban, Iban)
    assert iban.base_iban == base
    assert base.electronic_str == "MR1300020001010000123456753"
    assert base.country_code == iban.country_code == "MR"
    assert base.check_digits == iban.check_digits == 13
    assert base.bban_unchecked == iban.bban == "00020001010000123456753"


def test_check_reports_outcome() -> None:
    validator = IbanValidator()
    valid = validator.check("GB29 NWBK 6016 1331 9268 19")
    assert valid.is_valid
    assert valid.status is ValidationStatus.VALID
    assert valid.iban is not None
    assert valid.iban.bank_identifier == "NWBK"

    unknown = validator.check("ZZ07273912631298461")
    assert unknown.status is ValidationStatus.UNKNOWN_COUNTRY
    assert unknown.base_iban is not None
    assert unknown.iban is None

    broken = validator.check("DE44@0010234607324931")
    assert broken.status is ValidationStatus.INVALID_FORMAT
    assert broken.base_iban is None
    assert broken.error == "the string doesn't conform to the IBAN format"


def test_validator_uses_injected_registry() -> None:
    validator = IbanValidator(CountryRegistry({"DE": COUNTRY_FORMATS["DE"]}))
    assert validator.parse("DE44500105175407324931").country_code == "DE"
    with pytest.raises(UnknownCountryError):
        validator.parse("GB29NWBK60161331926819")


def test_injected_registry_supplies_identifiers() -> None:
    custom = CountryFormat(
        country_code="ZZ",
        grammar=Grammar.of((15, CharacterClass.DIGIT)),
        bank_identifier_range=(0, 3),
    )
    validator = IbanValidator(CountryRegistry({"ZZ": custom}))

    iban = validator.parse("ZZ07273912631298461")

    assert iban.country_format == custom
    assert iban.bank_identifier == "273"
    assert iban.branch_identifier is None
    report = validator.check("ZZ07273912631298461")
    assert report.iban is not None
    assert report.iban.bank_identifier == "273"


def test_validator_logs_rejections(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.validation")
    validator = IbanValidator(logger=logger)
    with caplog.at_level(logging.DEBUG, logger="tests.validation"):
        assert not validator.is_valid("AL84212110090000AB023569874")
    assert "does not match 8!n16!c" in caplog.text
