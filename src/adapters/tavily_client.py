"""Adaptador HTTP para la API de Tavily (search, extract, crawl, map).

Responsabilidad:
- Adjuntar la credencial (cabecera Bearer + campo `api_key` del cuerpo).
- Hacer exactamente un POST por invocación y devolver el JSON tal cual.
- Clasificar los fallos (401, 429, otros no-2xx, transporte).

Fuera de alcance: validar parámetros, reintentos, caché.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.operations import Operation, build_endpoints
from core.errors import (
    InvalidCredentialError,
    MissingCredentialError,
    RequestFailedError,
    TavilyTransportError,
    UsageLimitExceededError,
)

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | BaseModel


def _as_payload(params: Params | None) -> dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        # Solo lo que fijó el llamador: los defaults del schema no se envían.
        return params.model_dump(mode="json", exclude_unset=True)
    return dict(params)


class TavilyClient:
    """Cliente sin estado: endpoints fijos + credencial por llamada."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        endpoints: Mapping[Operation, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._endpoints = endpoints or build_endpoints(self._settings.base_url)
        self._transport = transport

    @property
    def endpoints(self) -> Mapping[Operation, str]:
        return self._endpoints

    async def search(self, params: Params, api_key: str | None) -> dict[str, Any]:
        return await self.call(Operation.SEARCH, params, api_key)

    async def extract(self, params: Params, api_key: str | None) -> dict[str, Any]:
        return await self.call(Operation.EXTRACT, params, api_key)

    async def crawl(self, params: Params, api_key: str | None) -> dict[str, Any]:
        return await self.call(Operation.CRAWL, params, api_key)

    async def map(self, params: Params, api_key: str | None) -> dict[str, Any]:
        return await self.call(Operation.MAP, params, api_key)

    async def call(
        self,
        operation: Operation,
        params: Params | None,
        api_key: str | None,
    ) -> dict[str, Any]:
        """Camino común de las cuatro operaciones."""

        if not api_key:
            raise MissingCredentialError()

        endpoint = self._endpoints[operation]
        body = {**_as_payload(params), "api_key": api_key}
        logger.debug(
            "POST %s (%s) keys=%s",
            endpoint,
            operation.value,
            sorted(k for k in body if k != "api_key"),
        )

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(
                    endpoint,
                    json=body,
                    headers={"Authorization": f"Bearer {api_key}"},
                )
        except httpx.HTTPError as exc:
            logger.warning("%s transport failure: %s", operation.value, exc)
            raise TavilyTransportError(f"{operation.value} request to {endpoint} failed: {exc}") from exc

        if not response.is_success:
            logger.warning("%s returned HTTP %s", operation.value, response.status_code)
            if response.status_code == 401:
                raise InvalidCredentialError()
            if response.status_code == 429:
                raise UsageLimitExceededError()
            raise RequestFailedError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise TavilyTransportError(f"{operation.value} returned a non-JSON body") from exc
