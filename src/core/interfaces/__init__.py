"""Interfaces/abstracciones del Core.

Por qué:
- El servidor MCP y la CLI dependen de un contrato (Protocol), no del cliente
  httpx concreto.
- En tests se sustituye por un doble sin red.
"""

from core.interfaces.client import TavilyAPI

__all__ = ["TavilyAPI"]
