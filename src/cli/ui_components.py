"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import SearchResponse
from core.tools import ToolDefinition


def print_banner(console: Console) -> None:
    title = Text("tavily-mcp", style="bold cyan")
    subtitle = Text("Search • Extract • Crawl • Map", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_tools_table(tools: list[ToolDefinition]) -> Table:
    """Una fila por herramienta: requeridos y el resto de parámetros."""

    table = Table(title="MCP Tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Required", style="green")
    table.add_column("Optional", style="white")
    for tool in tools:
        optional = [name for name in tool.properties if name not in tool.required]
        table.add_row(tool.name, ", ".join(tool.required), ", ".join(optional))
    return table


def build_search_table(payload: Mapping[str, Any]) -> Table:
    response = SearchResponse.model_validate(payload)
    table = Table(title=f"Results: {response.query}" if response.query else "Results")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("URL", style="magenta")
    table.add_column("Score", style="green", justify="right")
    for index, result in enumerate(response.results or [], start=1):
        score = f"{result.score:.2f}" if result.score is not None else "-"
        table.add_row(str(index), result.title or "", result.url or "", score)
    return table


def build_answer_panel(answer: str) -> Panel:
    return Panel(Text(answer.strip()), title=Text("Answer", style="bold yellow"), border_style="yellow")
