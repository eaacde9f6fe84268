"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Da un registro tipado por operación sin perder el comportamiento
  pass-through: los campos que no se fijan no se envían y las claves
  desconocidas se conservan (`extra="allow"`).
- Las respuestas se modelan como documentos abiertos; la API puede añadir
  campos sin romper al adaptador.

Nota:
- Estos modelos no validan rangos ni enums. Los límites viven en el schema de
  las herramientas (`core.tools`), no en tiempo de ejecución.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Params(BaseModel):
    model_config = ConfigDict(extra="allow")


class SearchParams(_Params):
    query: str = Field(..., description="Search query.")
    search_depth: str | None = None
    topic: str | None = None
    days: int | float | None = None
    time_range: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    max_results: int | float | None = None
    include_images: bool | None = None
    include_image_descriptions: bool | None = None
    include_raw_content: bool | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    country: str | None = None
    include_favicon: bool | None = None


class ExtractParams(_Params):
    urls: list[str] = Field(..., description="URLs to extract content from.")
    extract_depth: str | None = None
    include_images: bool | None = None
    format: str | None = None
    include_favicon: bool | None = None


class MapParams(_Params):
    url: str = Field(..., description="Root URL to begin from.")
    max_depth: int | None = None
    max_breadth: int | None = None
    limit: int | None = None
    instructions: str | None = None
    select_paths: list[str] | None = None
    select_domains: list[str] | None = None
    allow_external: bool | None = None
    categories: list[str] | None = None


class CrawlParams(MapParams):
    extract_depth: str | None = None
    format: str | None = None
    include_favicon: bool | None = None


class _Document(BaseModel):
    model_config = ConfigDict(extra="allow")


class SearchImage(_Document):
    url: str | None = None
    description: str | None = None


class SearchResult(_Document):
    """Un resultado de search/extract; extract no trae title/content/score."""

    url: str | None = None
    title: str | None = None
    content: str | None = None
    score: float | None = None
    published_date: str | None = None
    raw_content: str | None = None
    favicon: str | None = None


class SearchResponse(_Document):
    query: str | None = None
    answer: str | None = None
    follow_up_questions: list[str] | None = None
    images: list[str | SearchImage] | None = None
    results: list[SearchResult] | None = None


class CrawlPage(_Document):
    url: str | None = None
    raw_content: str | None = None
    favicon: str | None = None


class CrawlResponse(_Document):
    base_url: str | None = None
    results: list[CrawlPage] | None = None
    response_time: float | None = None


class MapResponse(_Document):
    base_url: str | None = None
    results: list[str] | None = None
    response_time: float | None = None
