"""Service handles for containers, volumes, networks and hosts."""

from dockhand.services.container import ContainerService
from dockhand.services.discovery import Hosts
from dockhand.services.hooks import ServiceHooks
from dockhand.services.host import HostService
from dockhand.services.network import NetworkService
from dockhand.services.state import ServiceState, StateChangeEvent, TransitionResult
from dockhand.services.volume import VolumeService

__all__ = [
    "ContainerService",
    "Hosts",
    "ServiceHooks",
    "HostService",
    "NetworkService",
    "ServiceState",
    "StateChangeEvent",
    "TransitionResult",
    "VolumeService",
]
