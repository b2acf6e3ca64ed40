"""Formularios de los tipos de contenido incluidos.

Cada formulario implementa `core.interfaces.editable.ContentForm`: declara qué
widget edita cada campo y en qué orden.
"""

from __future__ import annotations

from adapters import widgets
from core.config import AppSettings
from core.domain.content import Item, Post
from core.domain.models import Field
from core.interfaces.editable import ContentForm


POST_STATUSES: dict[str, str] = {
    "draft": "Draft",
    "review": "In Review",
    "published": "Published",
}

POST_CATEGORIES: dict[str, str] = {
    "news": "News",
    "engineering": "Engineering",
    "product": "Product Updates",
}


class PostForm:
    content_type: type[Item] = Post

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings

    def fields(self, content: Item) -> list[Field]:
        settings = self._settings or AppSettings()
        return [
            Field(
                view=widgets.text_input(
                    "title",
                    content,
                    {"label": "Title", "type": "text", "placeholder": "Enter the title here"},
                    settings=settings,
                )
            ),
            Field(
                view=widgets.richtext(
                    "body",
                    content,
                    {"label": "Content", "placeholder": "Write the post..."},
                    settings=settings,
                )
            ),
            Field(view=widgets.file_input("photo", content, {"label": "Photo"}, settings=settings)),
            Field(
                view=widgets.text_input(
                    "author", content, {"label": "Author", "type": "text"}, settings=settings
                )
            ),
            Field(
                view=widgets.checkbox(
                    "category", content, {"label": "Category"}, POST_CATEGORIES, settings=settings
                )
            ),
            Field(view=widgets.tags("tags", content, {"label": "Tags"}, settings=settings)),
            Field(
                view=widgets.select(
                    "status", content, {"label": "Status"}, POST_STATUSES, settings=settings
                )
            ),
            Field(
                view=widgets.timestamp(
                    "publish_date",
                    content,
                    {"label": "Publish Date", "type": "hidden", "class": "timestamp"},
                    settings=settings,
                )
            ),
        ]


def get_form(type_name: str, settings: AppSettings | None = None) -> ContentForm:
    """Formulario registrado para `type_name` (KeyError si no existe)."""

    return FORMS[type_name](settings)


FORMS: dict[str, type[PostForm]] = {
    "Post": PostForm,
}
