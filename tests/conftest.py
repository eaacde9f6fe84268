"""Fixtures compartidos: settings aislados del entorno y transporte simulado."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings


class RecordingTransport:
    """`httpx.MockTransport` que guarda cada request recibido."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_key="tvly-test-key",
        base_url="https://api.tavily.com",
        client_source="MCP",
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    def _make(status_code: int = 200, payload: Any = None, **kwargs: Any) -> RecordingTransport:
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload if payload is not None else {}, **kwargs)

        return RecordingTransport(responder)

    return _make
