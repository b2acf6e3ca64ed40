"""Carga de contenido desde JSON.

Soporta el formato que produce `json_exporter` (claves = alias de los campos).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from core.domain.content import Item

ItemT = TypeVar("ItemT", bound=Item)


def load_content(content_type: type[ItemT], path: Path) -> ItemT:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return content_type.model_validate(data)
