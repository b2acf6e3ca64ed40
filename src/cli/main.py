"""CLI principal (Typer).

Comandos:
- `fields`: lista campo -> nombre de formulario -> valor actual.
- `preview`: genera la previsualización HTML (y opcionalmente JSON) del formulario.
- `doctor`: diagnósticos de entorno y configuración.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.content_loader import load_content
from adapters.html_exporter import export_form_html
from adapters.json_exporter import export_content_json
from cli import doctor
from cli.ui_components import build_fields_table, build_outputs_panel, print_banner
from core.config import AppSettings
from core.domain.content import CONTENT_TYPES, Item
from core.domain.errors import EditorError, MissingTagError
from core.services.field_resolver import string_value, tag_name_from_field, value_from_field

app = typer.Typer(no_args_is_help=True, help="Form widgets for the content admin panel.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(type_name: str, data: Path | None) -> Item:
    content_type = CONTENT_TYPES.get(type_name)
    if content_type is None:
        known = ", ".join(sorted(CONTENT_TYPES))
        raise typer.BadParameter(f"Unknown content type {type_name!r} (known: {known})")
    if data is None:
        return content_type()
    try:
        return load_content(content_type, data)
    except (OSError, ValueError, ValidationError) as exc:
        raise typer.BadParameter(f"Could not load {data}: {exc}") from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    _configure_logging(verbose)
    if banner:
        print_banner(_console)


@app.command()
def fields(
    type_name: str = typer.Argument(..., help="Content type name (e.g. Post)."),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="JSON file with the content."),
) -> None:
    """Show each field, the form name it posts under and its current value."""

    content = _load(type_name, data)
    table = build_fields_table(type_name)
    for name in type(content).model_fields:
        try:
            tag = escape(tag_name_from_field(name, content))
        except MissingTagError:
            tag = "[red]missing alias[/red]"
        table.add_row(name, tag, escape(string_value(value_from_field(name, content))))
    _console.print(table)


@app.command()
def preview(
    type_name: str = typer.Argument(..., help="Content type name (e.g. Post)."),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="JSON file with the content."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="HTML output path."),
    export_json: bool = typer.Option(False, "--json", help="Also write the content as JSON."),
) -> None:
    """Render the editor form for a content item into a standalone HTML page."""

    settings = AppSettings()
    content = _load(type_name, data)

    stem = content.slug or f"new-{type_name.lower()}"
    html_path = out or settings.output_dir / f"{stem}.html"

    try:
        written = [export_form_html(content=content, output_path=html_path, settings=settings)]
    except EditorError as exc:
        _console.print(f"[red]Render failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if export_json:
        written.append(
            export_content_json(content=content, output_path=html_path.with_suffix(".json"))
        )

    logger.debug("preview written: %s", written)
    _console.print(build_outputs_panel(written))


def run() -> None:
    app()
