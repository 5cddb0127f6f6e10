"""Typer CLI wiring ibanval services."""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.table import Table

from ibanval.address import BaseIban
from ibanval.domain import CountryFormat, OutputFormat, ValidationStatus
from ibanval.exceptions import IbanError, UnknownCountryError
from ibanval.parsing import compute_check_digits, normalize, to_paper_format
from ibanval.validation import ValidationReport

from .deps import get_container

app = typer.Typer(help="IBAN validation command-line interface")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log validation details"),
) -> None:
    """Validate and format International Bank Account Numbers."""

    settings = get_container().settings
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _render(address: BaseIban, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.ELECTRONIC:
        return address.to_canonical_string()
    return address.to_display_string()


def _accepted(report: ValidationReport, *, strict: bool) -> bool:
    if report.is_valid:
        return True
    return not strict and report.status is ValidationStatus.UNKNOWN_COUNTRY


def _format_range(bounds: tuple[int, int] | None) -> str:
    if bounds is None:
        return "-"
    start, end = bounds
    return f"{start}-{end}"


@app.command("validate")
def validate(
    addresses: list[str] = typer.Argument(..., help="IBANs in electronic or paper format"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON report per address"),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Accept IBANs of unknown countries that pass the basic checks",
    ),
) -> None:
    """Validate IBANs and exit with code 1 if any of them is rejected."""

    container = get_container()
    settings = container.settings
    strict_mode = settings.strict and not lenient

    failures = 0
    for address in addresses:
        report = container.validator.check(address)
        accepted = _accepted(report, strict=strict_mode)
        if not accepted:
            failures += 1
        if as_json:
            typer.echo(json.dumps(report.model_dump(mode="json"), sort_keys=True))
        elif accepted and report.base_iban is not None:
            typer.echo(f"OK\t{_render(report.base_iban, settings.output_format)}")
        else:
            typer.echo(f"{report.status.value}\t{report.input}\t{report.error}")

    if failures:
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect_address(address: str) -> None:
    """Show the parts of an IBAN."""

    container = get_container()
    try:
        iban = container.validator.parse(address)
    except UnknownCountryError as exc:
        base = exc.base_iban
        typer.echo(f"Warning: {exc}")
        bank = branch = None
    except IbanError as exc:
        typer.echo(f"Invalid IBAN: {exc}")
        raise typer.Exit(code=1) from exc
    else:
        base = iban.base_iban
        bank = iban.bank_identifier
        branch = iban.branch_identifier

    typer.echo(f"Country code:\t{base.country_code}")
    typer.echo(f"Check digits:\t{base.check_digits_str}")
    typer.echo(f"BBAN:\t\t{base.bban_unchecked}")
    typer.echo(f"Bank:\t\t{bank or '(none)'}")
    typer.echo(f"Branch:\t\t{branch or '(none)'}")
    typer.echo(f"Electronic:\t{base.to_canonical_string()}")
    typer.echo(f"Paper:\t\t{base.to_display_string()}")


@app.command("format")
def format_address(
    address: str,
    output_format: OutputFormat | None = typer.Option(
        None,
        "--output-format",
        "-f",
        case_sensitive=False,
        help="Override IBANVAL_OUTPUT_FORMAT",
    ),
) -> None:
    """Print a validated IBAN in electronic or paper format."""

    container = get_container()
    try:
        iban = container.validator.parse(address)
    except IbanError as exc:
        typer.echo(f"Invalid IBAN: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(_render(iban.base_iban, output_format or container.settings.output_format))


@app.command("check-digits")
def check_digits(country_code: str, bban: str) -> None:
    """Compute the check digits for a country code and BBAN."""

    try:
        canonical = normalize(country_code.upper() + "00" + bban.replace(" ", ""))
    except IbanError as exc:
        typer.echo(f"Invalid input: {exc}")
        raise typer.Exit(code=1) from exc

    digits = compute_check_digits(canonical[:2], canonical[4:])
    address = canonical[:2] + digits + canonical[4:]
    typer.echo(f"Check digits:\t{digits}")
    typer.echo(f"IBAN:\t\t{to_paper_format(address)}")


@app.command("countries")
def countries(
    code: str | None = typer.Option(None, "--code", help="Only show one country"),
) -> None:
    """List the registry of country BBAN formats."""

    container = get_container()
    country_registry = container.country_registry
    if code is not None:
        country_format = country_registry.lookup(code.upper())
        if country_format is None:
            typer.echo(f"Country {code.upper()} is not in the IBAN registry")
            raise typer.Exit(code=1)
        selected: tuple[CountryFormat, ...] = (country_format,)
    else:
        selected = tuple(country_registry)

    table = Table(title=f"IBAN registry ({len(selected)} countries)")
    table.add_column("Code", style="bold")
    table.add_column("Length", justify="right")
    table.add_column("BBAN format")
    table.add_column("Bank")
    table.add_column("Branch")
    table.add_column("Notes")
    for country_format in selected:
        table.add_row(
            country_format.country_code,
            str(country_format.iban_length),
            country_format.grammar.notation(),
            _format_range(country_format.bank_identifier_range),
            _format_range(country_format.branch_identifier_range),
            "\n".join(country_format.notes),
        )
    console.print(table)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)
    typer.echo("Output format:\t" + settings.output_format.value)
    typer.echo("Strict:\t\t" + str(settings.strict))
