"""Errores clasificados del adaptador Tavily.

Una llamada fallida produce exactamente uno de estos errores; no hay
reintentos ni recuperación local. La remediación (backoff, rotar la key)
queda en manos de quien llama.
"""

from __future__ import annotations


class TavilyError(Exception):
    """Base de todos los errores que produce el adaptador."""


class MissingCredentialError(TavilyError):
    """No se suministró API key; no se llega a abrir conexión."""

    def __init__(self, message: str = "TAVILY_API_KEY is required") -> None:
        super().__init__(message)


class InvalidCredentialError(TavilyError):
    status_code = 401

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message)


class UsageLimitExceededError(TavilyError):
    status_code = 429

    def __init__(self, message: str = "Usage limit exceeded") -> None:
        super().__init__(message)


class RequestFailedError(TavilyError):
    """Cualquier otra respuesta no-2xx."""

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"API request failed: {status_text}")


class TavilyTransportError(TavilyError):
    """Fallo de red, timeout o cuerpo de respuesta no decodificable."""


class UnknownToolError(TavilyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
