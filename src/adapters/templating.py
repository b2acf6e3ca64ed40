"""Entorno Jinja2 compartido por widgets y exportadores.

Por qué está en adapters:
- El HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce los modelos de contenido y `Element`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import AppSettings


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def template_search_path(settings: AppSettings | None = None) -> tuple[str, ...]:
    """Override del usuario primero; los templates incluidos siempre como fallback."""

    settings = settings or AppSettings()
    paths: list[str] = []
    if settings.templates_dir is not None and settings.templates_dir.is_dir():
        paths.append(str(settings.templates_dir))
    paths.append(str(_TEMPLATES_DIR))
    return tuple(paths)


@lru_cache(maxsize=8)
def _build_env(search_path: tuple[str, ...]) -> Environment:
    return Environment(
        loader=FileSystemLoader(list(search_path)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def get_env(settings: AppSettings | None = None) -> Environment:
    return _build_env(template_search_path(settings))
