"""Runtime client interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, TypeVar

from dockhand.models.container import ContainerConfig
from dockhand.models.host import CertificatePaths, MachineDetail, MachineInfo
from dockhand.models.network import NetworkDescriptor
from dockhand.models.volume import VolumeDescriptor


T = TypeVar("T")


@dataclass
class CommandResponse(Generic[T]):
    """Outcome of one runtime call."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    log: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Optional[T] = None, log: Optional[List[str]] = None) -> "CommandResponse[T]":
        """Build a successful response."""
        return cls(success=True, data=data, log=log or [])

    @classmethod
    def failed(cls, error: str, log: Optional[List[str]] = None) -> "CommandResponse[T]":
        """Build a failed response."""
        return cls(success=False, error=error, log=log or [])


class RuntimeClient(ABC):
    """Operations against the container runtime of one host.

    Implementations report failures through the returned response and
    never raise for an unsuccessful runtime call.
    """

    @abstractmethod
    def inspect_container(
        self, container_id: str, certificates: Optional[CertificatePaths]
    ) -> CommandResponse[ContainerConfig]:
        """Describe a container."""
        pass

    @abstractmethod
    def start(self, container_id: str, certificates: Optional[CertificatePaths]) -> CommandResponse[str]:
        """Start a container."""
        pass

    @abstractmethod
    def stop(
        self,
        container_id: str,
        timeout: Optional[int],
        certificates: Optional[CertificatePaths],
    ) -> CommandResponse[str]:
        """Stop a container, killing it after timeout seconds."""
        pass

    @abstractmethod
    def remove_container(
        self,
        container_id: str,
        force: bool,
        remove_volumes: bool,
        link: Optional[str],
        certificates: Optional[CertificatePaths],
    ) -> CommandResponse[str]:
        """Remove a container, or only the named link when link is set."""
        pass

    @abstractmethod
    def volume_inspect(
        self, certificates: Optional[CertificatePaths], names: Sequence[str]
    ) -> CommandResponse[List[VolumeDescriptor]]:
        """Describe volumes by name."""
        pass

    @abstractmethod
    def volume_remove(
        self, certificates: Optional[CertificatePaths], force: bool, names: Sequence[str]
    ) -> CommandResponse[List[str]]:
        """Remove volumes by name."""
        pass

    @abstractmethod
    def network_list(self, certificates: Optional[CertificatePaths]) -> CommandResponse[List[NetworkDescriptor]]:
        """List all networks on the host."""
        pass


class MachineClient(ABC):
    """Enumeration of remote docker machines."""

    @abstractmethod
    def is_present(self) -> bool:
        """Whether the machine tooling is installed."""
        pass

    @abstractmethod
    def list_machines(self) -> CommandResponse[List[MachineInfo]]:
        """List known machines."""
        pass

    @abstractmethod
    def inspect(self, machine_name: str) -> CommandResponse[MachineDetail]:
        """Describe a machine."""
        pass
