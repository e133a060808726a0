"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.octopus_api import OctopusApi
from core.config import OctopusSettings, write_user_env_vars
from core.errors import ConfigurationError, OctopusError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: OctopusSettings) -> tuple[bool, str]:
    """List environments as a cheap authenticated round-trip."""

    try:
        with OctopusApi.from_settings(settings) as api:
            environments = api.environments.get_all()
        return True, f"{len(environments)} environment(s) visible"
    except OctopusError as exc:
        return False, str(exc).splitlines()[0]


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = OctopusSettings()

    table = Table(title="octo-dispatch Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row(
        "Octopus host",
        "OK" if settings.octopus_host else "MISSING",
        settings.octopus_host or "Set OCTO_DISPATCH_OCTOPUS_HOST",
    )
    table.add_row(
        "API key",
        "OK" if settings.api_key else "MISSING",
        "Configured" if settings.api_key else "Set OCTO_DISPATCH_API_KEY",
    )
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    try:
        settings.require_connection()
    except ConfigurationError:
        _console.print(table)
        _console.print("\n[yellow]Note:[/yellow] run `octo-dispatch doctor setup` to store host and API key.")
        raise typer.Exit(code=1)

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    host = typer.prompt("Octopus host (e.g. https://octopus.example.com)").strip()
    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()

    if not host or not api_key:
        raise typer.BadParameter("host and API key are required")

    env_path = write_user_env_vars(
        {
            "OCTO_DISPATCH_OCTOPUS_HOST": host.rstrip("/"),
            "OCTO_DISPATCH_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved Octopus config to:[/green] {env_path}")
