"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout y cabeceras comunes de la API (JSON + X-Client-Source).
- Facilita testeo: se inyecta un `httpx.MockTransport` sin tocar el adaptador.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults de la API.

    Por qué un builder:
    - Un cliente por llamada: no hay estado compartido entre invocaciones.
    - El `Authorization` no va aquí; se adjunta por request con la key de
      esa llamada.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "accept": "application/json",
        "content-type": "application/json",
        "X-Client-Source": settings.client_source,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
