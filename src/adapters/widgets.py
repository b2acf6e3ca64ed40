"""Widgets HTML del editor de contenido.

Cada función recibe el nombre *Python* del campo, la instancia de contenido y
un mapping de atributos HTML (`attrs["label"]` es la etiqueta visible), y
devuelve `Markup` listo para insertarse en un formulario.

Importante:
- `field_name` debe ser exactamente el nombre del atributo del modelo; si no
  existe (o no tiene alias) se lanza `FieldNotFoundError` / `MissingTagError`.
- Nunca se modifica el `attrs` del llamador.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from markupsafe import Markup

from adapters.templating import get_env
from core.config import AppSettings
from core.domain.models import RESERVED_ATTRS, Element, label_to_id
from core.services.field_resolver import (
    list_value,
    string_value,
    tag_name_from_field,
    tag_name_from_field_multi,
    value_from_field,
)

logger = logging.getLogger(__name__)


def _copy_attrs(attrs: Mapping[str, Any] | None) -> dict[str, str]:
    return {str(k): string_value(v) for k, v in (attrs or {}).items()}


def _render(template_name: str, settings: AppSettings, **context: Any) -> Markup:
    template = get_env(settings).get_template(f"editor/{template_name}")
    logger.debug("rendering editor/%s", template_name)
    return Markup(template.render(**context))


def new_element(
    tag_name: str,
    label: str,
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any] | None,
) -> Element:
    return Element(
        tag_name=tag_name,
        attrs=_copy_attrs(attrs),
        name=tag_name_from_field(field_name, content),
        label=label,
        data=string_value(value_from_field(field_name, content)),
    )


def text_input(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """`<input>` con etiqueta; `attrs` aporta type, placeholder, etc."""

    settings = settings or AppSettings()
    el = new_element("input", string_value(attrs.get("label")), field_name, content, attrs)
    return _render("input.html", settings, el=el)


def textarea(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    settings = settings or AppSettings()
    el = new_element("textarea", string_value(attrs.get("label")), field_name, content, attrs)
    return _render("textarea.html", settings, el=el)


def timestamp(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """`<input>` para un entero unix; 0 (o vacío) se muestra como campo vacío."""

    settings = settings or AppSettings()
    raw = value_from_field(field_name, content)
    data = "" if not raw else str(int(raw))

    el = Element(
        tag_name="input",
        attrs=_copy_attrs(attrs),
        name=tag_name_from_field(field_name, content),
        label=string_value(attrs.get("label")),
        data=data,
    )
    return _render("input.html", settings, el=el)


def file_input(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """Subida de fichero con preview y un input oculto que guarda la URL actual.

    Mientras no se seleccione un fichero nuevo, el formulario envía la URL ya
    guardada bajo el mismo nombre.
    """

    settings = settings or AppSettings()
    return _render(
        "file.html",
        settings,
        name=tag_name_from_field(field_name, content),
        label=string_value(attrs.get("label")),
        value=string_value(value_from_field(field_name, content)),
        upload_label=settings.default_language.text("upload"),
    )


def richtext(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """Editor rich text: div destino para el plugin + input oculto con el HTML.

    El valor viaja escapado dentro del atributo `value` del input oculto; el
    div destino expone endpoint de subida y altura como atributos `data-*`.
    """

    settings = settings or AppSettings()
    editor_attrs = {k: v for k, v in _copy_attrs(attrs).items() if k not in RESERVED_ATTRS}
    editor_attrs["class"] = f"richtext {field_name}"
    editor_attrs["id"] = f"richtext-{field_name}"
    editor_attrs["data-upload-url"] = settings.upload_url
    editor_attrs["data-height"] = str(settings.richtext_height)

    return _render(
        "richtext.html",
        settings,
        label=string_value(attrs.get("label")),
        editor_attrs=editor_attrs,
        field_name=field_name,
        name=tag_name_from_field(field_name, content),
        value=string_value(value_from_field(field_name, content)),
    )


def select(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    options: Mapping[str, str],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """`<select>` con opciones `{valor: texto}`.

    Siempre incluye una opción deshabilitada de llamada a la acción y una
    opción de reset (valor vacío). La opción cuyo valor coincide con el del
    campo queda seleccionada.
    """

    settings = settings or AppSettings()
    lang = settings.default_language

    sel_attrs = dict(attrs)
    sel_attrs["class"] = "browser-default"
    sel = new_element("select", string_value(attrs.get("label")), field_name, content, sel_attrs)

    current = sel.data
    matched = current in options

    cta_attrs = {"disabled": "disabled"}
    if not matched:
        cta_attrs["selected"] = "selected"
    opts = [
        Element(tag_name="option", attrs=cta_attrs, data=lang.text("select_cta")),
        Element(tag_name="option", attrs={"value": ""}, data=lang.text("select_reset")),
    ]

    for key, text in options.items():
        opt_attrs = {"value": key}
        if matched and key == current:
            opt_attrs["selected"] = "selected"
        opts.append(Element(tag_name="option", attrs=opt_attrs, data=text))

    return _render("select.html", settings, el=sel, options=opts)


def checkbox(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    options: Mapping[str, str],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """Grupo de `<input type="checkbox">` para un campo multi-valor.

    La i-ésima opción se envía como `<tag>.<i>`; las opciones presentes en el
    valor actual salen marcadas.
    """

    settings = settings or AppSettings()
    div_attrs = dict(attrs)
    div_attrs["class"] = "input-field col s12"
    div = new_element("div", string_value(attrs.get("label")), "", content, div_attrs)

    checked = set(list_value(field_name, content))

    boxes: list[Element] = []
    for i, (key, text) in enumerate(options.items()):
        box_attrs = {"type": "checkbox", "value": key, "id": label_to_id(text)}
        if key in checked:
            box_attrs["checked"] = "checked"
        boxes.append(
            Element(
                tag_name="input",
                attrs=box_attrs,
                name=tag_name_from_field_multi(field_name, i, content),
                label=text,
            )
        )

    return _render("checkbox.html", settings, el=div, boxes=boxes)


def tags(
    field_name: str,
    content: Any,
    attrs: Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> Markup:
    """Entrada de etiquetas tipo "chips".

    Cada etiqueta guardada se emite como input oculto `<tag>.<i>`; la lista
    inicial también viaja como JSON en `data-initial` para el plugin de chips.
    """

    settings = settings or AppSettings()
    name = tag_name_from_field(field_name, content)
    values = list_value(field_name, content)

    saved = [
        {"name": tag_name_from_field_multi(field_name, i, content), "value": value}
        for i, value in enumerate(values)
    ]

    return _render(
        "tags.html",
        settings,
        name=name,
        label=string_value(attrs.get("label")),
        tags=saved,
        initial=[{"tag": value} for value in values],
        placeholder=settings.default_language.text("tags_placeholder", name=name),
    )
