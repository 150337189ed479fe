"""
Dockhand - typed lifecycle handles for docker containers.

Wraps containers, volumes, networks and hosts of a docker runtime in
stateful Python objects so calling code can start, stop, inspect and
remove resources without driving the docker command line itself.
"""

__version__ = "1.0.0"
__author__ = "Dockhand Development Team"

# Re-export key components for easier access
from dockhand.errors import ContainerQueryError, DockhandError
from dockhand.models.config import DockhandConfig
from dockhand.services.container import ContainerService
from dockhand.services.discovery import Hosts
from dockhand.services.host import HostService
from dockhand.services.state import ServiceState

__all__ = [
    "ContainerQueryError",
    "DockhandError",
    "DockhandConfig",
    "ContainerService",
    "Hosts",
    "HostService",
    "ServiceState",
]
