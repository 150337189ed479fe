"""Runtime clients for dockhand."""

from dockhand.runtime.base import CommandResponse, MachineClient, RuntimeClient
from dockhand.runtime.docker import DockerCliClient
from dockhand.runtime.machine import DockerMachineClient
from dockhand.runtime.probe import RuntimeKind, probe_runtime

__all__ = [
    "CommandResponse",
    "MachineClient",
    "RuntimeClient",
    "DockerCliClient",
    "DockerMachineClient",
    "RuntimeKind",
    "probe_runtime",
]
