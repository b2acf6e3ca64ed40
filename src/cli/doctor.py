"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from jinja2 import TemplateError
from rich.console import Console
from rich.table import Table

from adapters.content_forms import FORMS, get_form
from adapters.form_renderer import render_form
from adapters.templating import get_env, template_search_path
from core.config import AppSettings, write_user_env_vars
from core.domain.content import CONTENT_TYPES
from core.domain.errors import EditorError
from core.domain.language import Language

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_templates(settings: AppSettings) -> list[tuple[str, bool, str]]:
    env = get_env(settings)
    results: list[tuple[str, bool, str]] = []
    for name in sorted(env.list_templates(extensions=["html"])):
        try:
            env.get_template(name)
            results.append((name, True, "OK"))
        except TemplateError as exc:
            results.append((name, False, str(exc)))
    return results


def _check_forms(settings: AppSettings) -> list[tuple[str, bool, str]]:
    """Render every registered form against an empty instance of its type."""

    results: list[tuple[str, bool, str]] = []
    for type_name in sorted(FORMS):
        content_type = CONTENT_TYPES.get(type_name)
        if content_type is None:
            results.append((type_name, False, "No content type registered"))
            continue
        try:
            content = content_type()
            fields = get_form(type_name, settings).fields(content)
            render_form(content, fields, settings=settings)
            results.append((type_name, True, f"{len(fields)} fields"))
        except (EditorError, TemplateError) as exc:
            results.append((type_name, False, str(exc)))
    return results


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="admin-editor Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Upload URL", "OK", settings.upload_url)
    table.add_row("Edit URL", "OK", settings.edit_url)
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Templates", "OK", " : ".join(template_search_path(settings)))

    failed = False
    for name, ok, detail in _check_templates(settings):
        failed = failed or not ok
        table.add_row(f"Template {name}", "OK" if ok else "FAIL", detail)

    for name, ok, detail in _check_forms(settings):
        failed = failed or not ok
        table.add_row(f"Form {name}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failed:
        _console.print(
            "\n[yellow]Note:[/yellow] Check ADMIN_EDITOR_TEMPLATES_DIR and the field names used by each form."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    upload_url = typer.prompt("Upload URL", default=current.upload_url, show_default=True).strip()
    edit_url = typer.prompt("Edit URL", default=current.edit_url, show_default=True).strip()
    language = typer.prompt(
        "Language (en/es)",
        default=current.default_language.value,
        show_default=True,
    ).strip().lower()

    if not upload_url or not edit_url:
        raise typer.BadParameter("upload_url and edit_url are required")
    try:
        Language(language)
    except ValueError as exc:
        raise typer.BadParameter(f"Unsupported language: {language}") from exc

    env_path = write_user_env_vars(
        {
            "ADMIN_EDITOR_UPLOAD_URL": upload_url,
            "ADMIN_EDITOR_EDIT_URL": edit_url,
            "ADMIN_EDITOR_DEFAULT_LANGUAGE": language,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
