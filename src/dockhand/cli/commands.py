"""Command implementations for CLI."""

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from dockhand.models.config import DockhandConfig
from dockhand.runtime.machine import DockerMachineClient
from dockhand.runtime.probe import probe_runtime
from dockhand.services.container import ContainerService
from dockhand.services.discovery import Hosts
from dockhand.services.host import HostService
from dockhand.services.state import ServiceState


console = Console()


def _run_transition(service: ContainerService, description: str, action, quiet: bool = False):
    """Run a lifecycle transition with a progress spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        disable=quiet,
    ) as progress:
        task = progress.add_task(description, total=None)
        action(service)
        progress.update(task, completed=True)


def _report(service: ContainerService, expected: ServiceState, success_msg: str):
    """Print the outcome of a transition; exit non-zero when it was not confirmed."""
    if service.state == expected:
        console.print(success_msg)
        return

    transition = service.last_transition
    reason = transition.error if transition and transition.error else "unconfirmed"
    console.print(
        f"[red]Error:[/red] container {service.name} is {service.state.value} ({reason})"
    )
    raise typer.Exit(1)


def list_hosts(config: DockhandConfig):
    """List discovered docker hosts."""
    machine_client = DockerMachineClient(
        binary=config.runtime.machine_binary,
        command_timeout=config.runtime.command_timeout,
    )
    hosts = Hosts(machine_client, probe_runtime(config.runtime.docker_binary)).discover()

    if not hosts:
        console.print("[yellow]No docker hosts found[/yellow]")
        return

    table = Table(title="Hosts")
    table.add_column("Name", style="cyan")
    table.add_column("Native")
    table.add_column("URI", style="dim")
    table.add_column("TLS")
    table.add_column("Certificates", style="dim", max_width=50)

    for host in hosts:
        table.add_row(
            host.name,
            "✓" if host.is_native else "✗",
            host.uri or "(local socket)",
            "✓" if host.requires_tls else "✗",
            host.certificate_path or "",
        )

    console.print(table)


def inspect_container(host: HostService, container: str):
    """Show details of a container."""
    service = host.get_container(container)
    config = service.get_configuration()

    table = Table(title=f"Container {config.display_name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    running = "[green]●[/green] running" if config.state.running else f"[red]○[/red] {config.state.status}"
    table.add_row("ID", config.id)
    table.add_row("Image", config.image)
    table.add_row("Host", host.name)
    table.add_row("Status", running)
    table.add_row("Platform", config.platform)
    table.add_row("Mounts", "\n".join(
        f"{mount.name or mount.source} -> {mount.destination}" for mount in config.mounts
    ) or "-")
    table.add_row("Networks", "\n".join(config.network_settings.networks) or "-")

    console.print(table)


def start_container(host: HostService, container: str, quiet: bool = False):
    """Start a container."""
    service = host.get_container(container)
    _run_transition(service, f"Starting {service.name}...", lambda s: s.start(), quiet)
    _report(service, ServiceState.RUNNING, f"[green]✓[/green] Container {service.name} started")


def stop_container(host: HostService, container: str, quiet: bool = False):
    """Stop a container."""
    service = host.get_container(container)
    _run_transition(service, f"Stopping {service.name}...", lambda s: s.stop(), quiet)
    _report(service, ServiceState.STOPPED, f"[green]✓[/green] Container {service.name} stopped")


def remove_container(
    host: HostService,
    container: str,
    force: bool = False,
    volumes: bool = False,
    quiet: bool = False,
):
    """Stop and remove a container."""
    service = host.get_container(container)
    _run_transition(
        service,
        f"Removing {service.name}...",
        lambda s: s.remove(force=force, remove_volumes=volumes),
        quiet,
    )
    _report(service, ServiceState.REMOVED, f"[green]✓[/green] Container {service.name} removed")


def list_volumes(host: HostService, container: str):
    """List volumes attached to a container."""
    service = host.get_container(container)
    volumes = service.get_volumes()

    table = Table(title=f"Volumes of {service.name}")
    table.add_column("Name", style="cyan")
    for volume in volumes:
        table.add_row(volume.name)
    console.print(table)


def list_networks(host: HostService, container: str):
    """List networks a container is attached to."""
    service = host.get_container(container)
    networks = service.get_networks()

    table = Table(title=f"Networks of {service.name}")
    table.add_column("Name", style="cyan")
    table.add_column("ID", style="dim")
    for network in networks:
        table.add_row(network.name, network.id)
    console.print(table)
