"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("ADMIN-EDITOR", style="bold cyan")
    subtitle = Text("Widgets de formulario • Contenido • Previsualización", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_fields_table(type_name: str) -> Table:
    """Tabla Rich campo -> nombre de formulario -> valor actual."""

    table = Table(title=f"{type_name} fields")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Form name", style="green", no_wrap=True)
    table.add_column("Value", style="white")
    return table


def build_outputs_panel(paths: list[Path]) -> Panel:
    """Panel con los ficheros generados por `preview`."""

    body = Text()
    for path in paths:
        body.append(f"- {path}\n")
    return Panel(body, title=Text("Preview", style="bold yellow"), border_style="yellow")
