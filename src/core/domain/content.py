"""Tipos de contenido gestionados por el panel.

Regla:
- Cada campo editable declara su tag de serialización con `alias`. Un campo
  sin alias no puede representarse en un formulario (ver `field_resolver`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Item(BaseModel):
    """Campos comunes a todo contenido (identidad y marcas de tiempo)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(default=0, ge=0, alias="id", description="ID interno; 0 si aún no existe.")
    uuid: str = Field(default="", alias="uuid", description="UUID estable del contenido.")
    slug: str = Field(default="", alias="slug", description="Slug público.")
    timestamp: int = Field(default=0, ge=0, alias="timestamp", description="Creación (unix ms).")
    updated: int = Field(default=0, ge=0, alias="updated", description="Última edición (unix ms).")


class Post(Item):
    """Tipo de contenido de ejemplo (blog post)."""

    title: str = Field(default="", alias="title", max_length=512)
    body: str = Field(default="", alias="body", description="HTML del editor rich text.")
    photo: str = Field(default="", alias="photo", description="URL de la imagen principal.")
    author: str = Field(default="", alias="author")
    category: list[str] = Field(default_factory=list, alias="category")
    tags: list[str] = Field(default_factory=list, alias="tags")
    status: str = Field(default="", alias="status")
    publish_date: int = Field(default=0, ge=0, alias="publish_date", description="unix ms")


CONTENT_TYPES: dict[str, type[Item]] = {
    "Post": Post,
}
