"""Language utilities for admin-editor.

This module centralizes the language options supported by the widgets.
Keeping it in the domain layer allows both CLI and adapter layers to share a
single source of truth without creating circular imports.
"""

from __future__ import annotations

from enum import Enum


_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "select_cta": "Select an option...",
        "select_reset": "None",
        "upload": "Upload",
        "tags_placeholder": 'Type and press "Enter" to add {name}',
        "save": "Save",
        "delete": "Delete",
    },
    "es": {
        "select_cta": "Selecciona una opción...",
        "select_reset": "Ninguna",
        "upload": "Subir",
        "tags_placeholder": 'Escribe y pulsa "Enter" para añadir {name}',
        "save": "Guardar",
        "delete": "Eliminar",
    },
}


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    @classmethod
    def from_bool(cls, spanish: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.SPANISH if spanish else cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def text(self, key: str, **kwargs: str) -> str:
        """Widget UI string for `key`, formatted with `kwargs`."""

        return _MESSAGES[self.value][key].format(**kwargs)
