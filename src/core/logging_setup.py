"""Configuración de logging (stdlib + Rich).

Los logs van siempre a stderr: en modo `serve` stdout es el canal del
protocolo MCP y cualquier byte extra rompe la sesión del host.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "tavily-mcp-rich"


def configure_logging(level: str | int = "WARNING") -> None:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            root.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    # httpx loguea cada request en INFO; solo interesa en DEBUG.
    logging.getLogger("httpx").setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))
