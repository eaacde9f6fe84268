"""Contrato del cliente de la API remota.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- `ToolDispatcher` acepta cualquier objeto con este método, real o de test.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from core.domain.operations import Operation


@runtime_checkable
class TavilyAPI(Protocol):
    """Una llamada remota por invocación.

    Reglas de diseño:
    - `call` es asíncrono porque hace I/O (HTTP).
    - Devuelve el JSON decodificado tal cual, sin reinterpretarlo.
    """

    async def call(
        self,
        operation: Operation,
        params: Mapping[str, Any],
        api_key: str | None,
    ) -> dict[str, Any]:
        ...
