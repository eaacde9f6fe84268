"""Operaciones remotas y su tabla de endpoints.

La tabla es inmutable (`MappingProxyType`) y se construye una vez a partir del
host base; no hay estado global mutable que compartir entre llamadas.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

DEFAULT_BASE_URL = "https://api.tavily.com"


class Operation(str, Enum):
    """Capacidades remotas expuestas por la API."""

    SEARCH = "search"
    EXTRACT = "extract"
    CRAWL = "crawl"
    MAP = "map"

    @property
    def tool_name(self) -> str:
        """Nombre de la herramienta MCP asociada (p.ej. `tavily-search`)."""

        return f"tavily-{self.value}"

    @classmethod
    def from_tool_name(cls, name: str) -> "Operation | None":
        for op in cls:
            if op.tool_name == name:
                return op
        return None


def build_endpoints(base_url: str = DEFAULT_BASE_URL) -> Mapping[Operation, str]:
    """Devuelve el mapeo operación -> URL absoluta del endpoint."""

    base = base_url.rstrip("/")
    return MappingProxyType({op: f"{base}/{op.value}" for op in Operation})
