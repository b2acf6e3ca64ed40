"""Resolution of form names and current values from content fields.

Every widget needs two things from the content object it edits: the name the
form will post the value under (the field's serialization alias) and the value
currently stored on the instance. Multi-valued fields are posted as
`<alias>.<index>`, one entry per element, which is what `form_decoder`
collects back into a list.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from core.domain.errors import EditorError, FieldNotFoundError, FieldTypeError, MissingTagError

logger = logging.getLogger(__name__)


def _field_info(field_name: str, content: Any) -> FieldInfo:
    if not isinstance(content, BaseModel):
        raise EditorError(
            f"Editor elements need a Pydantic model instance, got {type(content).__name__}."
        )

    info = type(content).model_fields.get(field_name)
    if info is None:
        raise FieldNotFoundError(field_name)
    return info


def tag_name_from_field(field_name: str, content: Any) -> str:
    # Some elements (wrappers, dividers) have no name and no field behind them.
    if field_name == "":
        return field_name

    info = _field_info(field_name, content)
    tag = info.serialization_alias or info.alias
    if not tag:
        raise MissingTagError(field_name)

    logger.debug("resolved %s.%s -> %s", type(content).__name__, field_name, tag)
    return tag


def tag_name_from_field_multi(field_name: str, index: int, content: Any) -> str:
    """Name for the `index`-th entry of a multi-valued field, e.g. `category.2`."""

    return f"{tag_name_from_field(field_name, content)}.{index}"


def value_from_field(field_name: str, content: Any) -> Any:
    if field_name == "":
        return None

    _field_info(field_name, content)
    return getattr(content, field_name)


def string_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def list_value(field_name: str, content: Any) -> list[str]:
    """Current value of a multi-valued field as a list of strings."""

    value = value_from_field(field_name, content)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise FieldTypeError(field_name, "a list of strings", value)
    return [string_value(v) for v in value]
