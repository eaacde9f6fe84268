"""CLI de tavily-mcp (Typer + Rich).

Comandos:
- `serve`: servidor MCP por stdio (lo que lanza el host).
- `search` / `extract` / `crawl` / `map`: una llamada directa a la API.
- `tools`: metadatos de las herramientas.
- `doctor`: diagnóstico y configuración de la API key.

Solo se envían las opciones que el usuario pasa explícitamente.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.formatters import format_response
from adapters.json_exporter import export_response_json
from adapters.mcp_server import serve as serve_mcp
from adapters.tavily_client import TavilyClient
from cli import doctor
from cli.ui_components import build_answer_panel, build_search_table, build_tools_table
from core.config import AppSettings
from core.domain.models import CrawlParams, ExtractParams, MapParams, SearchParams
from core.domain.operations import Operation
from core.errors import TavilyError
from core.logging_setup import configure_logging
from core.tools import get_tools, tool_schema_json

app = typer.Typer(
    no_args_is_help=True,
    help="Tavily search/extract/crawl/map as MCP tools.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _load_settings() -> AppSettings:
    return AppSettings()


def _build_client(settings: AppSettings) -> TavilyClient:
    return TavilyClient(settings)


def _set_only(**options: Any) -> dict[str, Any]:
    # Typer entrega None/[] para lo no indicado; eso no debe viajar a la API.
    return {k: v for k, v in options.items() if v is not None and v != []}


def _run_call(
    operation: Operation,
    coro_factory: Callable[[TavilyClient, str | None], Awaitable[dict[str, Any]]],
    *,
    api_key: str | None,
    as_json: bool,
    output: Path | None,
) -> None:
    settings = _load_settings()
    client = _build_client(settings)
    key = api_key or settings.api_key

    try:
        payload = asyncio.run(coro_factory(client, key))
    except TavilyError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        path = export_response_json(payload=payload, output_path=output)
        _err_console.print(f"[green]Saved response to:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if operation is Operation.SEARCH and isinstance(payload, Mapping):
        try:
            table = build_search_table(payload)
        except ValidationError:
            table = None
        if table is not None:
            if payload.get("answer"):
                _console.print(build_answer_panel(str(payload["answer"])))
            _console.print(table)
            return

    _console.print(format_response(operation, payload), markup=False, highlight=False)


_JSON_OPT = typer.Option(False, "--json", help="Print the raw JSON response.")
_OUTPUT_OPT = typer.Option(None, "--output", "-o", help="Also write the JSON response to a file.")
_KEY_OPT = typer.Option(None, "--api-key", help="Overrides TAVILY_API_KEY.")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR."),
) -> None:
    configure_logging(log_level or _load_settings().log_level)


@app.command()
def serve() -> None:
    """Run the MCP server over stdio."""

    asyncio.run(serve_mcp(_load_settings()))


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query."),
    search_depth: Optional[str] = typer.Option(None, help="basic | advanced"),
    topic: Optional[str] = typer.Option(None, help="general | news"),
    days: Optional[int] = typer.Option(None, help="Days back (news topic only)."),
    time_range: Optional[str] = typer.Option(None, help="day | week | month | year"),
    start_date: Optional[str] = typer.Option(None, help="YYYY-MM-DD"),
    end_date: Optional[str] = typer.Option(None, help="YYYY-MM-DD"),
    max_results: Optional[int] = typer.Option(None, help="Max number of results."),
    include_images: Optional[bool] = typer.Option(None, "--include-images/--no-include-images"),
    include_image_descriptions: Optional[bool] = typer.Option(
        None, "--include-image-descriptions/--no-include-image-descriptions"
    ),
    include_raw_content: Optional[bool] = typer.Option(
        None, "--include-raw-content/--no-include-raw-content"
    ),
    include_domain: Optional[list[str]] = typer.Option(None, "--include-domain"),
    exclude_domain: Optional[list[str]] = typer.Option(None, "--exclude-domain"),
    country: Optional[str] = typer.Option(None, help="Boost results from a country (general topic)."),
    include_favicon: Optional[bool] = typer.Option(None, "--include-favicon/--no-include-favicon"),
    as_json: bool = _JSON_OPT,
    output: Optional[Path] = _OUTPUT_OPT,
    api_key: Optional[str] = _KEY_OPT,
) -> None:
    """Web search."""

    params = SearchParams(
        query=query,
        **_set_only(
            search_depth=search_depth,
            topic=topic,
            days=days,
            time_range=time_range,
            start_date=start_date,
            end_date=end_date,
            max_results=max_results,
            include_images=include_images,
            include_image_descriptions=include_image_descriptions,
            include_raw_content=include_raw_content,
            include_domains=include_domain,
            exclude_domains=exclude_domain,
            country=country,
            include_favicon=include_favicon,
        ),
    )
    _run_call(
        Operation.SEARCH,
        lambda client, key: client.search(params, key),
        api_key=api_key,
        as_json=as_json,
        output=output,
    )


@app.command()
def extract(
    urls: list[str] = typer.Argument(..., help="URLs to extract content from."),
    extract_depth: Optional[str] = typer.Option(None, help="basic | advanced"),
    fmt: Optional[str] = typer.Option(None, "--format", help="markdown | text"),
    include_images: Optional[bool] = typer.Option(None, "--include-images/--no-include-images"),
    include_favicon: Optional[bool] = typer.Option(None, "--include-favicon/--no-include-favicon"),
    as_json: bool = _JSON_OPT,
    output: Optional[Path] = _OUTPUT_OPT,
    api_key: Optional[str] = _KEY_OPT,
) -> None:
    """Extract page content from URLs."""

    params = ExtractParams(
        urls=urls,
        **_set_only(
            extract_depth=extract_depth,
            format=fmt,
            include_images=include_images,
            include_favicon=include_favicon,
        ),
    )
    _run_call(
        Operation.EXTRACT,
        lambda client, key: client.extract(params, key),
        api_key=api_key,
        as_json=as_json,
        output=output,
    )


@app.command()
def crawl(
    url: str = typer.Argument(..., help="Root URL to begin the crawl."),
    max_depth: Optional[int] = typer.Option(None),
    max_breadth: Optional[int] = typer.Option(None),
    limit: Optional[int] = typer.Option(None),
    instructions: Optional[str] = typer.Option(None),
    select_path: Optional[list[str]] = typer.Option(None, "--select-path"),
    select_domain: Optional[list[str]] = typer.Option(None, "--select-domain"),
    allow_external: Optional[bool] = typer.Option(None, "--allow-external/--no-allow-external"),
    category: Optional[list[str]] = typer.Option(None, "--category"),
    extract_depth: Optional[str] = typer.Option(None, help="basic | advanced"),
    fmt: Optional[str] = typer.Option(None, "--format", help="markdown | text"),
    include_favicon: Optional[bool] = typer.Option(None, "--include-favicon/--no-include-favicon"),
    as_json: bool = _JSON_OPT,
    output: Optional[Path] = _OUTPUT_OPT,
    api_key: Optional[str] = _KEY_OPT,
) -> None:
    """Crawl a site starting from URL."""

    params = CrawlParams(
        url=url,
        **_set_only(
            max_depth=max_depth,
            max_breadth=max_breadth,
            limit=limit,
            instructions=instructions,
            select_paths=select_path,
            select_domains=select_domain,
            allow_external=allow_external,
            categories=category,
            extract_depth=extract_depth,
            format=fmt,
            include_favicon=include_favicon,
        ),
    )
    _run_call(
        Operation.CRAWL,
        lambda client, key: client.crawl(params, key),
        api_key=api_key,
        as_json=as_json,
        output=output,
    )


@app.command(name="map")
def map_site(
    url: str = typer.Argument(..., help="Root URL to begin the mapping."),
    max_depth: Optional[int] = typer.Option(None),
    max_breadth: Optional[int] = typer.Option(None),
    limit: Optional[int] = typer.Option(None),
    instructions: Optional[str] = typer.Option(None),
    select_path: Optional[list[str]] = typer.Option(None, "--select-path"),
    select_domain: Optional[list[str]] = typer.Option(None, "--select-domain"),
    allow_external: Optional[bool] = typer.Option(None, "--allow-external/--no-allow-external"),
    category: Optional[list[str]] = typer.Option(None, "--category"),
    as_json: bool = _JSON_OPT,
    output: Optional[Path] = _OUTPUT_OPT,
    api_key: Optional[str] = _KEY_OPT,
) -> None:
    """List the URLs of a site starting from URL."""

    params = MapParams(
        url=url,
        **_set_only(
            max_depth=max_depth,
            max_breadth=max_breadth,
            limit=limit,
            instructions=instructions,
            select_paths=select_path,
            select_domains=select_domain,
            allow_external=allow_external,
            categories=category,
        ),
    )
    _run_call(
        Operation.MAP,
        lambda client, key: client.map(params, key),
        api_key=api_key,
        as_json=as_json,
        output=output,
    )


@app.command()
def tools(as_json: bool = typer.Option(False, "--json", help="Print the MCP tool schemas.")) -> None:
    """Show the tool metadata announced to MCP hosts."""

    definitions = get_tools()
    if as_json:
        typer.echo(json.dumps([tool_schema_json(t) for t in definitions], ensure_ascii=False, indent=2))
        return
    _console.print(build_tools_table(definitions))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
