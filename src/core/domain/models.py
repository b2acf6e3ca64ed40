"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a Jinja2 ni a la CLI.

Nota:
- Estos modelos describen *qué* se renderiza, no *cómo* se renderiza.
"""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup
from pydantic import BaseModel, Field as ModelField


# Claves que el renderer emite por su cuenta y nunca desde `attrs`.
RESERVED_ATTRS = frozenset({"label", "name", "value"})


class Element(BaseModel):
    """Descripción efímera de un elemento DOM (una llamada, un widget).

    Por qué existe:
    - Une nombre de formulario, etiqueta, atributos y valor actual en una sola
      estructura que los templates consumen sin conocer el contenido.
    """

    tag_name: str = ModelField(
        ...,
        min_length=1,
        description="Nombre del tag HTML (input, textarea, select, ...).",
    )
    attrs: dict[str, str] = ModelField(
        default_factory=dict,
        description="Atributos HTML en el orden en que se emitirán.",
    )
    name: str = ModelField(
        default="",
        description="Nombre de formulario (tag de serialización); vacío si no aplica.",
    )
    label: str = ModelField(
        default="",
        description="Texto de la etiqueta <label>.",
    )
    data: str = ModelField(
        default="",
        description="Valor actual del campo como texto.",
    )

    def html_attrs(self) -> dict[str, str]:
        return {k: v for k, v in self.attrs.items() if k not in RESERVED_ATTRS}

    def label_id(self) -> str:
        return label_to_id(self.label)


def label_to_id(label: str) -> str:
    """'Publish Date' -> 'Publish-Date' (id usado por <label for=...>)."""

    return "-".join(label.split(" "))


@dataclass(frozen=True)
class Field:
    """Un widget ya renderizado, listo para insertarse en un formulario."""

    view: Markup
