"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Release
from core.domain.validation import Severity, ValidationResult

_SEVERITY_STYLES = {
    Severity.OK: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class ConsoleDeploymentLog:
    """`DeploymentLog` que escribe en la consola Rich.

    Las líneas `info` se imprimen tal cual (el cuerpo de la respuesta del
    deployment incluido); `fatal` va en rojo con prefijo.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def info(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)

    def fatal(self, message: str) -> None:
        self._console.print(f"[bold red]FATAL:[/bold red] {escape(message)}", highlight=False)


def build_releases_table(project_name: str, releases: Iterable[Release]) -> Table:
    """Tabla de releases ordenada por versión (descendente, orden de texto)."""

    table = Table(title=f"Releases: {project_name}")
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Id", style="white")
    table.add_column("Channel", style="dim")
    table.add_column("Notes", style="magenta")
    for release in sorted(releases, key=lambda r: r.version, reverse=True):
        notes = (release.release_notes or "").strip().splitlines()
        table.add_row(
            release.version,
            release.id,
            release.channel_id,
            notes[0] if notes else "",
        )
    return table


def build_validation_panel(result: ValidationResult) -> Panel:
    """Panel con el resultado de `validate`."""

    style = _SEVERITY_STYLES[result.severity]
    title = Text(result.severity.value.upper(), style=f"bold {style}")
    return Panel(Text(result.message or "OK"), title=title, border_style=style)
