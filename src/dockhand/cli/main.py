"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console

from dockhand.cli.commands import (
    inspect_container,
    list_hosts,
    list_networks,
    list_volumes,
    remove_container,
    start_container,
    stop_container,
)
from dockhand.config import ConfigManager
from dockhand.errors import DockhandError
from dockhand.models.config import DockhandConfig
from dockhand.services.host import HostService
from dockhand.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="dockhand",
    help="Dockhand - typed lifecycle handles for docker containers",
    add_completion=False,
)

# Console for rich output
console = Console()


def _load_config(config_path: Optional[Path]) -> DockhandConfig:
    """Load configuration and set up logging."""
    try:
        config = ConfigManager(config_path).load()
    except (DockhandError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    setup_logging(config.log_level)
    return config


def _run_cli_command(
    handler: Callable[..., Any],
    config_path: Optional[Path],
    host: Optional[str],
    **kwargs: Any,
):
    """Helper to run a CLI command against a host with error handling."""
    config = _load_config(config_path)
    if host:
        config.runtime.host = host

    try:
        handler(HostService.from_config(config), **kwargs)
    except DockhandError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


ConfigOption = typer.Option(None, "--config", "-c", help="Path to config.yaml")
HostOption = typer.Option(None, "--host", "-H", help="Docker daemon address")
QuietOption = typer.Option(False, "--quiet", "-q", help="Hide the progress spinner")


@app.command("hosts")
def hosts_command(config: Optional[Path] = ConfigOption):
    """List reachable docker hosts."""
    list_hosts(_load_config(config))


@app.command("inspect")
def inspect_command(
    container: str = typer.Argument(..., help="Container id or name"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
):
    """Show container details."""
    _run_cli_command(inspect_container, config, host, container=container)


@app.command("start")
def start_command(
    container: str = typer.Argument(..., help="Container id or name"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
    quiet: bool = QuietOption,
):
    """Start a stopped container."""
    _run_cli_command(start_container, config, host, container=container, quiet=quiet)


@app.command("stop")
def stop_command(
    container: str = typer.Argument(..., help="Container id or name"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
    quiet: bool = QuietOption,
):
    """Stop a running container."""
    _run_cli_command(stop_container, config, host, container=container, quiet=quiet)


@app.command("remove")
def remove_command(
    container: str = typer.Argument(..., help="Container id or name"),
    force: bool = typer.Option(False, "--force", "-f", help="Kill a running container and skip confirmation"),
    volumes: bool = typer.Option(False, "--volumes", "-v", help="Remove anonymous volumes"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
    quiet: bool = QuietOption,
):
    """Stop and remove a container."""
    if not force:
        confirm = typer.confirm(f"Remove container {container}?")
        if not confirm:
            raise typer.Abort()
    _run_cli_command(remove_container, config, host, container=container, force=force, volumes=volumes, quiet=quiet)


@app.command("volumes")
def volumes_command(
    container: str = typer.Argument(..., help="Container id or name"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
):
    """List volumes attached to a container."""
    _run_cli_command(list_volumes, config, host, container=container)


@app.command("networks")
def networks_command(
    container: str = typer.Argument(..., help="Container id or name"),
    config: Optional[Path] = ConfigOption,
    host: Optional[str] = HostOption,
):
    """List networks a container is attached to."""
    _run_cli_command(list_networks, config, host, container=container)


def main():
    """Main entry point for CLI."""
    app()
