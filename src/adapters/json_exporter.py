"""Exportación JSON de respuestas.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Guarda la respuesta tal como llegó de la API, sin el render de texto.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping


def export_response_json(*, payload: Mapping[str, Any], output_path: Path) -> Path:
    """Exporta la respuesta a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(dict(payload), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
