"""Contratos de formularios de contenido.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que cada tipo de contenido declare su formulario en adaptadores
  sin acoplar el Core a Jinja2 ni a los widgets concretos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.content import Item
from core.domain.models import Field


@runtime_checkable
class ContentForm(Protocol):
    """Contrato mínimo para el formulario de un tipo de contenido.

    Reglas de diseño:
    - `fields` es síncrono y sin estado: solo lee el contenido.
    - Devuelve los widgets en el orden en que aparecen en el formulario.
    """

    content_type: type[Item]

    def fields(self, content: Item) -> list[Field]:
        """Renderiza los widgets del formulario para `content`."""

        ...
