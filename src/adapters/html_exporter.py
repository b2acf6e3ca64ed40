"""Exportación de previsualizaciones HTML.

Por qué está en adapters:
- El HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce el contenido y los `Field` renderizados.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from adapters.content_forms import get_form
from adapters.form_renderer import render_form
from adapters.templating import get_env
from core.config import AppSettings
from core.domain.content import Item


def render_form_page(*, content: Item, settings: AppSettings | None = None) -> str:
    """Renderiza un HTML autocontenido con el formulario de edición."""

    settings = settings or AppSettings()
    type_name = type(content).__name__

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    generated_at_local = datetime.now().astimezone().isoformat(timespec="seconds")

    fields = get_form(type_name, settings).fields(content)
    form = render_form(content, fields, settings=settings)

    title = f"{type_name}: {content.slug}" if content.slug else f"New {type_name}"
    template = get_env(settings).get_template("page.html")
    return template.render(
        lang=settings.default_language.value,
        title=title,
        page_id=f"{type_name}:{content.id}:{generated_at}",
        form=form,
        generated_at=generated_at,
        generated_at_local=generated_at_local,
    )


def export_form_html(
    *, content: Item, output_path: Path, settings: AppSettings | None = None
) -> Path:
    """Exporta la previsualización del formulario como HTML.

    Útil para depurar los widgets y los templates sin levantar el panel.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_form_page(content=content, settings=settings)
    output_path.write_text(html, encoding="utf-8")
    return output_path
