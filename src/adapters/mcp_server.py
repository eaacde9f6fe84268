"""Servidor MCP (stdio) sobre el adaptador Tavily.

Responsabilidad:
- Anunciar las cuatro herramientas (`core.tools`) al host.
- Traducir `tools/call` a una llamada del adaptador y devolver texto.

Los argumentos del host se reenvían tal cual: ni el SDK (validate_input=False)
ni este módulo los validan contra el schema.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from adapters.formatters import format_response
from adapters.tavily_client import TavilyClient
from core.config import AppSettings
from core.domain.operations import Operation
from core.errors import UnknownToolError
from core.interfaces.client import TavilyAPI
from core.tools import ToolDefinition, get_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "tavily-mcp"


class ToolDispatcher:
    """Une el nombre de herramienta con la operación remota.

    Sin estado propio: la API key se lee de `settings` en cada llamada.
    """

    def __init__(self, client: TavilyAPI, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    def list_tools(self) -> list[ToolDefinition]:
        return get_tools()

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        operation = Operation.from_tool_name(name)
        if operation is None:
            raise UnknownToolError(name)

        # Los errores clasificados ya quedan registrados en el adaptador.
        payload = await self._client.call(operation, dict(arguments or {}), self._settings.api_key)
        return format_response(operation, payload)


def build_server(
    settings: AppSettings | None = None,
    *,
    client: TavilyAPI | None = None,
) -> Server:
    settings = settings or AppSettings()
    dispatcher = ToolDispatcher(client or TavilyClient(settings), settings)
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in dispatcher.list_tools()
        ]

    # Las excepciones llegan al host como resultado `isError` con el mensaje.
    @server.call_tool(validate_input=False)
    async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        text = await dispatcher.call_tool(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve(settings: AppSettings | None = None) -> None:
    """Atiende al host por stdin/stdout hasta que cierre la sesión."""

    settings = settings or AppSettings()
    if not settings.api_key:
        # El servidor arranca igual; cada llamada fallará con MissingCredentialError.
        logger.warning("TAVILY_API_KEY is not set")

    server = build_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("%s listening on stdio", SERVER_NAME)
        await server.run(read_stream, write_stream, server.create_initialization_options())
