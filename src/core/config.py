"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los widgets y exportadores lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "admin-editor"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "admin-editor"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "admin-editor"
    return Path.home() / ".config" / "admin-editor"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# admin-editor user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/widgets.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_EDITOR_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    upload_url: str = Field(
        default="/admin/edit/upload",
        min_length=1,
        description="Endpoint que recibe las imágenes insertadas en el editor rich text.",
    )
    edit_url: str = Field(
        default="/admin/edit",
        min_length=1,
        description="Action del formulario de edición (se añade ?type=<Tipo>).",
    )
    richtext_height: int = Field(
        default=250,
        ge=50,
        le=2000,
        description="Altura inicial (px) del editor rich text.",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Directorio alternativo de templates Jinja2 para los widgets.",
    )
    output_dir: Path = Field(
        default=Path("previews"),
        description="Directorio por defecto para las previsualizaciones HTML/JSON.",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto para los textos de los widgets (en/es).",
    )
