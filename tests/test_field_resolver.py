from __future__ import annotations

import pytest
from pydantic import BaseModel, Field

from core.domain.errors import EditorError, FieldNotFoundError, FieldTypeError, MissingTagError
from core.services.field_resolver import (
    list_value,
    string_value,
    tag_name_from_field,
    tag_name_from_field_multi,
    value_from_field,
)


class Article(BaseModel):
    headline: str = Field(default="", alias="head-line")
    summary: str = Field(default="", serialization_alias="summary_text")
    untagged: str = ""
    labels: list[str] | None = Field(default=None, alias="labels")


def test_tag_name_uses_alias(post):
    assert tag_name_from_field("title", post) == "title"
    assert tag_name_from_field("headline", Article()) == "head-line"


def test_tag_name_prefers_serialization_alias():
    assert tag_name_from_field("summary", Article()) == "summary_text"


def test_empty_field_name_has_no_tag(post):
    assert tag_name_from_field("", post) == ""
    assert value_from_field("", post) is None


def test_multi_tag_names_are_indexed(post):
    assert tag_name_from_field_multi("category", 0, post) == "category.0"
    assert tag_name_from_field_multi("headline", 3, Article()) == "head-line.3"


def test_unknown_field_raises(post):
    with pytest.raises(FieldNotFoundError, match="Couldn't get struct field for: Title"):
        tag_name_from_field("Title", post)
    with pytest.raises(FieldNotFoundError):
        value_from_field("missing", post)


def test_field_without_alias_raises():
    with pytest.raises(MissingTagError, match="must have 'json' tags"):
        tag_name_from_field("untagged", Article())


def test_non_model_content_is_rejected():
    with pytest.raises(EditorError):
        tag_name_from_field("title", {"title": "x"})


def test_value_from_field_returns_raw_value(post):
    assert value_from_field("publish_date", post) == 1700000000000
    assert value_from_field("category", post) == ["news", "product"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, ""), ("text", "text"), (42, "42"), (1.5, "1.5")],
)
def test_string_value(value, expected):
    assert string_value(value) == expected


def test_list_value(post):
    assert list_value("tags", post) == ["python", "cms"]
    assert list_value("labels", Article()) == []


def test_list_value_rejects_scalars(post):
    with pytest.raises(FieldTypeError, match="title"):
        list_value("title", post)
