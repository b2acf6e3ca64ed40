"""Exportación JSON del contenido.

Por qué JSON por alias:
- Muestra exactamente los nombres bajo los que el formulario envía cada campo.
- Permite reutilizar el fichero como `--data` de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.content import Item


def export_content_json(*, content: Item, output_path: Path) -> Path:
    """Exporta el contenido a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = content.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
