"""CLI de rentline-lookup (Typer + Rich).

Comandos:
- `cep VALUE`: CEP -> dirección.
- `cnpj VALUE`: CNPJ -> empresa.
- `countries` / `country CODE`: configuración de países soportados.
- `health`: chequeo trivial.
- `doctor ...`: diagnósticos de entorno (ver `cli.doctor`).
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_result_json, result_payload
from cli import doctor
from cli.ui_components import (
    build_address_table,
    build_company_table,
    build_countries_table,
    build_error_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.countries import get_enabled_countries, require_country
from core.domain.errors import (
    CountryNotFoundError,
    CountryNotSupportedError,
    ExternalLookupError,
    LookupErrorKind,
)
from core.domain.identifiers import format_postal_code, format_tax_id, normalize_digits
from core.domain.language import Language
from core.domain.models import IdentifierKind
from core.logging import configure_logging
from core.services.brazil_lookup import BrazilLookupService
from core.services.health import health_check

app = typer.Typer(no_args_is_help=True, help="Brazilian CEP/CNPJ lookup with provider fallback.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_service(settings: AppSettings) -> BrazilLookupService:
    """Factory del servicio (los tests la sustituyen por uno con proveedores falsos)."""

    return BrazilLookupService(settings)


def _lookup(
    kind: IdentifierKind,
    value: str,
    *,
    as_json: bool,
    language: Language | None,
    output: Path | None,
) -> None:
    settings = AppSettings()
    configure_logging(settings)
    language = language or settings.default_language
    service = build_service(settings)

    try:
        if kind is IdentifierKind.POSTAL_CODE:
            result = asyncio.run(service.lookup_postal_code(value))
        else:
            result = asyncio.run(service.lookup_tax_id(value))
    except ExternalLookupError as exc:
        if as_json:
            typer.echo(
                json.dumps(
                    {
                        "error": exc.kind.value,
                        "kind": kind.value,
                        "message": exc.user_message(language),
                        "provider": exc.provider,
                    },
                    ensure_ascii=False,
                )
            )
        else:
            _console.print(build_error_panel(exc, language))
        raise typer.Exit(code=2 if exc.kind is LookupErrorKind.INVALID_SHAPE else 1)

    digits = normalize_digits(value)
    if output is not None:
        path = export_result_json(identifier=digits, kind=kind.value, result=result, output_path=output)
        if not as_json:
            _console.print(f"[green]Saved:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(result_payload(identifier=digits, kind=kind.value, result=result), ensure_ascii=False))
        return

    if kind is IdentifierKind.POSTAL_CODE:
        _console.print(build_address_table(format_postal_code(digits), result))
    else:
        _console.print(build_company_table(format_tax_id(digits), result))


@app.command()
def cep(
    value: str = typer.Argument(..., help="CEP in any format (e.g. 01310-100)."),
    as_json: bool = typer.Option(False, "--json", help="Write JSON to stdout."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Message language (pt/en)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the result as JSON."),
) -> None:
    """Resolve a CEP into street, neighborhood, city and state."""

    _lookup(IdentifierKind.POSTAL_CODE, value, as_json=as_json, language=lang, output=output)


@app.command()
def cnpj(
    value: str = typer.Argument(..., help="CNPJ in any format (e.g. 12.345.678/0001-99)."),
    as_json: bool = typer.Option(False, "--json", help="Write JSON to stdout."),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Message language (pt/en)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the result as JSON."),
) -> None:
    """Resolve a CNPJ into company registration data."""

    _lookup(IdentifierKind.TAX_ID, value, as_json=as_json, language=lang, output=output)


@app.command()
def countries(
    as_json: bool = typer.Option(False, "--json", help="Write JSON to stdout."),
) -> None:
    """List enabled countries."""

    enabled = get_enabled_countries()
    if as_json:
        payload = [c.model_dump(mode="json", exclude={"validation_rules"}) for c in enabled]
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return
    _console.print(build_countries_table(enabled))


@app.command()
def country(code: str = typer.Argument(..., help="ISO code (2 letters), e.g. BR.")) -> None:
    """Show one country's configuration."""

    if len(code) != 2:
        raise typer.BadParameter("Country code must be 2 characters")
    try:
        config = require_country(code.upper())
    except (CountryNotFoundError, CountryNotSupportedError) as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    _console.print(build_countries_table([config]))


@app.command()
def health() -> None:
    """Print OK."""

    typer.echo(health_check())


@app.callback()
def _main(
    banner: bool = typer.Option(False, "--banner", help="Show the banner."),
) -> None:
    if banner:
        print_banner(_console)


def run() -> None:
    app()
