"""Decodificación de un formulario enviado al tipo de contenido.

Es la inversa del esquema de nombres de los widgets:
- campos simples llegan como `<tag>`;
- campos multi-valor llegan como `<tag>.0`, `<tag>.1`, ... (puede haber
  huecos: un checkbox sin marcar no se envía).
"""

from __future__ import annotations

import logging
import re
import types
from typing import Any, Mapping, Sequence, TypeVar, Union, get_args, get_origin

from pydantic.fields import FieldInfo

from core.domain.content import Item

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=Item)

_MULTI_KEY = re.compile(r"^(?P<tag>.+)\.(?P<index>\d+)$")


def _base_annotation(info: FieldInfo) -> Any:
    """`list[str] | None` -> `list[str]`; cualquier otra anotación tal cual."""

    annotation = info.annotation
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_multi(info: FieldInfo) -> bool:
    return get_origin(_base_annotation(info)) in (list, tuple, set)


def _last(raw: str | Sequence[str]) -> str:
    if isinstance(raw, str):
        return raw
    return raw[-1] if raw else ""


def _fields_by_tag(content_type: type[Item]) -> dict[str, FieldInfo]:
    out: dict[str, FieldInfo] = {}
    for info in content_type.model_fields.values():
        tag = info.serialization_alias or info.alias
        if tag:
            out[tag] = info
    return out


def decode_form(content_type: type[ItemT], data: Mapping[str, str | Sequence[str]]) -> ItemT:
    """Construye `content_type` a partir de los pares nombre/valor del formulario.

    Reglas:
    - Claves desconocidas se ignoran (p.ej. `type`, `action`).
    - Un string vacío en un campo no textual cuenta como "no enviado".
    - Entradas vacías de listas se descartan (reset de un tag/opción).

    Lanza `pydantic.ValidationError` si el resultado no valida.
    """

    by_tag = _fields_by_tag(content_type)
    payload: dict[str, Any] = {}
    indexed: dict[str, dict[int, str]] = {}

    for key, raw in data.items():
        info = by_tag.get(key)
        if info is None:
            match = _MULTI_KEY.match(key)
            if match and match["tag"] in by_tag and _is_multi(by_tag[match["tag"]]):
                indexed.setdefault(match["tag"], {})[int(match["index"])] = _last(raw)
            else:
                logger.debug("ignoring unknown form key %r", key)
            continue

        if _is_multi(info):
            values = [raw] if isinstance(raw, str) else list(raw)
            payload[key] = [v for v in values if v != ""]
            continue

        value = _last(raw)
        if value == "" and _base_annotation(info) is not str:
            continue
        payload[key] = value

    for tag, entries in indexed.items():
        values = [entries[i] for i in sorted(entries) if entries[i] != ""]
        payload[tag] = payload.get(tag, []) + values

    return content_type.model_validate(payload)
