"""Errores del dominio.

Los fallos de lookup son errores del programador (nombre de campo mal escrito,
modelo sin alias): se propagan tal cual hasta la CLI o el llamador.
"""

from __future__ import annotations


class EditorError(Exception):
    """Base de todos los errores del editor."""


class FieldNotFoundError(EditorError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Couldn't get struct field for: {field_name}. "
            "Make sure you pass the right field name to editor field elements."
        )


class MissingTagError(EditorError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Couldn't get json struct tag for: {field_name}. "
            "Struct fields for content types must have 'json' tags."
        )


class FieldTypeError(EditorError):
    """El valor del campo no tiene la forma que espera el widget."""

    def __init__(self, field_name: str, expected: str, actual: object) -> None:
        self.field_name = field_name
        super().__init__(
            f"Field {field_name} must hold {expected}, got {type(actual).__name__}."
        )
