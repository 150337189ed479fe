"""Pydantic models for configuration and runtime payloads."""

from dockhand.models.config import DockhandConfig, RuntimeConfig, DisposalConfig
from dockhand.models.container import (
    ContainerConfig,
    ContainerState,
    EndpointSettings,
    Mount,
    NetworkSettings,
)
from dockhand.models.host import CertificatePaths, HostDescriptor, MachineInfo, MachineDetail
from dockhand.models.network import NetworkDescriptor
from dockhand.models.volume import VolumeDescriptor

__all__ = [
    "DockhandConfig",
    "RuntimeConfig",
    "DisposalConfig",
    "ContainerConfig",
    "ContainerState",
    "EndpointSettings",
    "Mount",
    "NetworkSettings",
    "CertificatePaths",
    "HostDescriptor",
    "MachineInfo",
    "MachineDetail",
    "NetworkDescriptor",
    "VolumeDescriptor",
]
