"""CLI de octo-dispatch (Typer).

Comandos:
- `deploy`: despliega una versión de un proyecto en un entorno (exit 1 si falla).
- `validate`: comprueba las entradas sin desplegar.
- `releases` / `portal-url`: consultas de lectura.
- `doctor`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.octopus_api import OctopusApi
from cli import doctor
from cli.ui_components import (
    ConsoleDeploymentLog,
    build_releases_table,
    build_validation_panel,
)
from core.config import OctopusSettings
from core.domain.validation import Severity
from core.errors import ConfigurationError, OctopusError
from core.services.deployment_recorder import DeploymentRecorder, DeploymentRequest
from core.services.deployment_validation import DeploymentValidator

app = typer.Typer(
    no_args_is_help=True,
    help="Trigger and inspect Octopus Deploy releases from a CI job.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic (DEBUG)."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _open_api() -> OctopusApi:
    try:
        return OctopusApi.from_settings(OctopusSettings())
    except ConfigurationError as exc:
        _console.print(f"[red]{escape(str(exc))}[/red]")
        _console.print("Run `octo-dispatch doctor setup` to store host and API key.")
        raise typer.Exit(code=2) from exc


@app.command()
def deploy(
    project: str = typer.Option(..., "--project", "-p", help="Project name as defined in Octopus."),
    release_version: str = typer.Option(..., "--release-version", "-r", help="Release version to deploy."),
    environment: str = typer.Option(..., "--environment", "-e", help="Environment to deploy to."),
) -> None:
    """Deploy an existing release to an environment."""

    request = DeploymentRequest(project=project, release_version=release_version, environment=environment)
    with _open_api() as api:
        ok = DeploymentRecorder(api, ConsoleDeploymentLog(_console)).perform(request)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def validate(
    project: str = typer.Option("", "--project", "-p"),
    release_version: str = typer.Option("", "--release-version", "-r"),
    environment: str = typer.Option("", "--environment", "-e"),
) -> None:
    """Check deployment inputs against the server without deploying."""

    request = DeploymentRequest(project=project, release_version=release_version, environment=environment)
    with _open_api() as api:
        result = DeploymentValidator(api).validate_deployment(request)
    _console.print(build_validation_panel(result))
    if result.severity is Severity.ERROR:
        raise typer.Exit(code=1)


@app.command()
def releases(project: str = typer.Argument(..., help="Project name.")) -> None:
    """List the releases of a project."""

    with _open_api() as api:
        try:
            found = api.get_project_by_name(project, ignore_case=True)
            if found is None:
                _console.print(f"[red]Project {escape(repr(project))} was not found.[/red]")
                raise typer.Exit(code=1)
            items = api.get_releases_for_project(found.id)
        except OctopusError as exc:
            _console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=1) from exc

    if not items:
        _console.print("No releases found.")
        return
    _console.print(build_releases_table(found.name, items))


@app.command(name="portal-url")
def portal_url(
    project: str = typer.Argument(..., help="Project name."),
    release_version: Optional[str] = typer.Option(
        None, "--release-version", "-r", help="Version (defaults to the latest release)."
    ),
) -> None:
    """Print the portal link of a release."""

    with _open_api() as api:
        try:
            found = api.get_project_by_name(project, ignore_case=True)
            if found is None:
                _console.print(f"[red]Project {escape(repr(project))} was not found.[/red]")
                raise typer.Exit(code=1)
            if release_version:
                url = api.releases.get_portal_url_for_release(found.id, release_version.strip())
            else:
                url = api.releases.get_portal_url_for_latest_release(found.id)
        except OctopusError as exc:
            _console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=1) from exc

    if url is None:
        _console.print("No releases found.")
        return
    _console.print(url, markup=False, highlight=False)


def run() -> None:
    app()
