"""Formulario de edición completo para un contenido.

Junta los widgets de un `ContentForm` dentro de un `<form>` con los campos
ocultos de identidad (id, uuid, slug, type) y los botones de guardar/borrar.
"""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlencode

from markupsafe import Markup

from adapters.templating import get_env
from core.config import AppSettings
from core.domain.content import Item
from core.domain.models import Field
from core.services.field_resolver import string_value, tag_name_from_field, value_from_field


_IDENTITY_FIELDS = ("id", "uuid", "slug")


def form_action(content: Item, settings: AppSettings) -> str:
    return f"{settings.edit_url}?{urlencode({'type': type(content).__name__})}"


def render_form(
    content: Item,
    fields: Sequence[Field],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    settings = settings or AppSettings()
    lang = settings.default_language

    hidden = [
        (tag_name_from_field(name, content), string_value(value_from_field(name, content)))
        for name in _IDENTITY_FIELDS
    ]
    hidden.append(("type", type(content).__name__))

    template = get_env(settings).get_template("editor/form.html")
    return Markup(
        template.render(
            action=form_action(content, settings),
            type_name=type(content).__name__,
            hidden=hidden,
            fields=fields,
            can_delete=content.id > 0,
            save_label=lang.text("save"),
            delete_label=lang.text("delete"),
        )
    )
