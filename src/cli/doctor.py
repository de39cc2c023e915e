"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


def _provider_probe_urls(settings: AppSettings) -> dict[str, str]:
    """One well-known record per provider (Av. Paulista CEP, Banco do Brasil CNPJ)."""

    return {
        "ViaCEP": f"{settings.viacep_base_url.rstrip('/')}/01310100/json/",
        "BrasilAPI (CEP)": f"{settings.brasilapi_base_url.rstrip('/')}/cep/v1/01310100",
        "BrasilAPI (CNPJ)": f"{settings.brasilapi_base_url.rstrip('/')}/cnpj/v1/00000000000191",
        "ReceitaWS": f"{settings.receitaws_base_url.rstrip('/')}/cnpj/00000000000191",
    }


@app.command()
def run() -> None:
    """Run baseline diagnostics: settings and provider reachability."""

    settings = AppSettings()

    table = Table(title="rentline-lookup Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:.1f}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    for label, url in _provider_probe_urls(settings).items():
        ok_http, detail_http = asyncio.run(_check_http(url, settings))
        table.add_row(label, "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="configure")
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=str(settings.http_timeout_seconds),
        show_default=True,
    ).strip()
    user_agent = typer.prompt("User-Agent", default=settings.user_agent, show_default=True).strip()
    language = typer.prompt(
        "Language (pt/en)",
        default=settings.default_language.value,
        show_default=True,
    ).strip().lower()

    try:
        if float(timeout) <= 0:
            raise ValueError(timeout)
    except ValueError:
        raise typer.BadParameter("timeout must be a positive number")
    if language not in ("pt", "en"):
        raise typer.BadParameter("language must be 'pt' or 'en'")
    if not user_agent:
        raise typer.BadParameter("User-Agent is required")

    env_path = write_user_env_vars(
        {
            "RENTLINE_HTTP_TIMEOUT_SECONDS": timeout,
            "RENTLINE_USER_AGENT": user_agent,
            "RENTLINE_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
