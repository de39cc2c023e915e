"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.countries import CountryConfig
from core.domain.errors import ExternalLookupError
from core.domain.language import Language
from core.domain.models import AddressResult, CompanyResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (desactivado en modo `--json`)."""

    title = Text("rentline-lookup", style="bold cyan")
    subtitle = Text("CEP • CNPJ • Countries", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _field_table(title: str, rows: list[tuple[str, str]]) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for label, value in rows:
        table.add_row(label, value or "[dim]-[/dim]")
    return table


def build_address_table(cep: str, result: AddressResult) -> Table:
    return _field_table(
        f"CEP {cep}",
        [
            ("Street", result.street),
            ("Neighborhood", result.neighborhood),
            ("City", result.city),
            ("State", result.state),
        ],
    )


def build_company_table(cnpj: str, result: CompanyResult) -> Table:
    return _field_table(
        f"CNPJ {cnpj}",
        [
            ("Legal name", result.legal_name),
            ("Trade name", result.trade_name),
            ("Incorporated", result.incorporation_date),
            ("Primary activity", result.primary_activity),
            ("Size", result.size),
            ("State registration", result.state_registration),
            ("Municipal registration", result.municipal_registration),
        ],
    )


def build_countries_table(countries: list[CountryConfig]) -> Table:
    table = Table(title="Countries")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Currency", style="green")
    table.add_column("Locale", style="magenta")
    table.add_column("Timezone", style="dim")
    table.add_column("CNPJ", style="yellow")
    for country in countries:
        table.add_row(
            f"{country.flag} {country.code}",
            country.name,
            f"{country.currency_code} ({country.currency_symbol})",
            country.locale,
            country.timezone,
            "required" if country.required_fields.cnpj else "-",
        )
    return table


def build_error_panel(error: ExternalLookupError, language: Language) -> Panel:
    body = Text(error.user_message(language), style="bold")
    details = [f"kind={error.kind.value}"]
    if error.provider:
        details.append(f"provider={error.provider}")
    if error.status_code is not None:
        details.append(f"status={error.status_code}")
    body.append("\n" + " ".join(details), style="dim")
    return Panel(body, title=Text("Erro" if language is Language.PORTUGUESE else "Error"), border_style="red")
