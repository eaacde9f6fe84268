"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.operations import build_endpoints

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    # Sin credencial: solo comprueba que el host responde (cualquier status vale).
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _mask(key: str) -> str:
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}…{key[-4:]}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="tavily-mcp Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_key:
        table.add_row("API key", "OK", _mask(settings.api_key))
    else:
        table.add_row("API key", "MISSING", "Set TAVILY_API_KEY or run `doctor setup-key`")
    table.add_row("Base URL", "OK", settings.base_url)
    for operation, endpoint in build_endpoints(settings.base_url).items():
        table.add_row(f"Endpoint {operation.value}", "OK", endpoint)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User .env", "OK" if get_user_env_file().exists() else "ABSENT", str(get_user_env_file()))

    ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.api_key:
        _console.print(
            "\n[yellow]Note:[/yellow] every tool call fails with 'TAVILY_API_KEY is required' until a key is set."
        )


@app.command(name="setup-key")
def setup_key() -> None:
    """Store the Tavily API key in the user config .env.

    MCP hosts often launch the server from an arbitrary working directory, so
    the project `.env` is not always found.
    """

    api_key = typer.prompt("Tavily API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("api key is required")

    env_path = write_user_env_vars({"TAVILY_API_KEY": api_key})
    _console.print(f"[green]Saved API key to:[/green] {env_path}")
