"""Render de respuestas como texto plano para el host MCP.

El LLM lee texto; aquí solo se presentan los campos que devolvió la API, no se
calcula nada nuevo.

Nota:
- La forma de la respuesta es de la API. Si un 2xx no encaja en los modelos
  (p.ej. un cuerpo que no es objeto), se devuelve el JSON tal cual en lugar de
  fallar la llamada.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from core.domain.models import CrawlResponse, MapResponse, SearchImage, SearchResponse
from core.domain.operations import Operation

logger = logging.getLogger(__name__)

_CRAWL_PREVIEW_CHARS = 200


def format_search_results(payload: Mapping[str, Any]) -> str:
    """Formato compartido por search y extract."""

    response = SearchResponse.model_validate(payload)
    output: list[str] = []

    if response.answer:
        output.append(f"Answer: {response.answer}")

    output.append("Detailed Results:")
    for result in response.results or []:
        output.append(f"\nTitle: {result.title}")
        output.append(f"URL: {result.url}")
        output.append(f"Content: {result.content}")
        if result.raw_content:
            output.append(f"Raw Content: {result.raw_content}")
        if result.favicon:
            output.append(f"Favicon: {result.favicon}")

    if response.images:
        output.append("\nImages:")
        for index, image in enumerate(response.images, start=1):
            if isinstance(image, SearchImage):
                output.append(f"\n[{index}] URL: {image.url}")
                if image.description:
                    output.append(f"   Description: {image.description}")
            else:
                output.append(f"\n[{index}] URL: {image}")

    return "\n".join(output)


def format_crawl_results(payload: Mapping[str, Any]) -> str:
    response = CrawlResponse.model_validate(payload)
    output = [
        "Crawl Results:",
        f"Base URL: {response.base_url}",
        "\nCrawled Pages:",
    ]
    for index, page in enumerate(response.results or [], start=1):
        output.append(f"\n[{index}] URL: {page.url}")
        if page.raw_content:
            preview = page.raw_content
            if len(preview) > _CRAWL_PREVIEW_CHARS:
                preview = preview[:_CRAWL_PREVIEW_CHARS] + "..."
            output.append(f"Content: {preview}")
        if page.favicon:
            output.append(f"Favicon: {page.favicon}")
    return "\n".join(output)


def format_map_results(payload: Mapping[str, Any]) -> str:
    response = MapResponse.model_validate(payload)
    output = [
        "Site Map Results:",
        f"Base URL: {response.base_url}",
        "\nMapped Pages:",
    ]
    for index, page in enumerate(response.results or [], start=1):
        output.append(f"\n[{index}] URL: {page}")
    return "\n".join(output)


def _raw_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)


def format_response(operation: Operation, payload: Any) -> str:
    if not isinstance(payload, Mapping):
        return _raw_json(payload)

    try:
        if operation is Operation.CRAWL:
            return format_crawl_results(payload)
        if operation is Operation.MAP:
            return format_map_results(payload)
        return format_search_results(payload)
    except ValidationError as exc:
        logger.warning(
            "%s response has an unexpected shape (%d errors); rendering raw JSON",
            operation.value,
            exc.error_count(),
        )
        return _raw_json(payload)
