"""Host service binding container handles on one docker endpoint."""

import logging
from typing import Optional

from dockhand.errors import ContainerInspectError
from dockhand.models.config import DisposalConfig, DockhandConfig
from dockhand.models.host import CertificatePaths, HostDescriptor
from dockhand.runtime.base import RuntimeClient
from dockhand.runtime.docker import DockerCliClient
from dockhand.services.container import ContainerService
from dockhand.services.discovery import NATIVE_HOST_NAME
from dockhand.services.state import ServiceState


logger = logging.getLogger(__name__)


class HostService:
    """A docker endpoint together with the client used to reach it."""

    def __init__(
        self,
        descriptor: HostDescriptor,
        client: RuntimeClient,
        disposal: Optional[DisposalConfig] = None,
        stop_timeout: Optional[int] = None,
    ):
        """Initialize host service."""
        self.descriptor = descriptor
        self.client = client
        self.disposal = disposal or DisposalConfig()
        self.stop_timeout = stop_timeout

    @classmethod
    def from_config(cls, config: DockhandConfig, descriptor: Optional[HostDescriptor] = None) -> "HostService":
        """Build a host service using the configured docker binary and disposal flags."""
        if descriptor is None:
            descriptor = HostDescriptor(
                name=NATIVE_HOST_NAME if config.runtime.host is None else config.runtime.host,
                uri=config.runtime.host,
                is_native=config.runtime.host is None,
                certificate_path=config.runtime.cert_path,
            )

        client = DockerCliClient(
            host_uri=descriptor.uri,
            binary=config.runtime.docker_binary,
            command_timeout=config.runtime.command_timeout,
        )
        return cls(descriptor, client, config.disposal, config.runtime.stop_timeout)

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def certificates(self) -> Optional[CertificatePaths]:
        return self.descriptor.certificates

    def get_container(self, id_or_name: str) -> ContainerService:
        """Bind a handle to an existing container.

        The initial state is Running or Stopped depending on what the
        runtime reports.

        Raises:
            ContainerInspectError: The container does not exist or the host
                could not be reached.
        """
        response = self.client.inspect_container(id_or_name, self.certificates)
        if not response.success or response.data is None:
            raise ContainerInspectError(id_or_name, response.error)

        config = response.data
        state = ServiceState.RUNNING if config.state.running else ServiceState.STOPPED
        logger.debug(f"Bound container {config.display_name} ({config.id}) on {self.name} as {state.value}")

        return ContainerService(
            name=config.display_name,
            id=config.id,
            client=self.client,
            host=self.descriptor,
            certificates=self.certificates,
            state=state,
            stop_on_dispose=self.disposal.stop_on_dispose,
            remove_on_dispose=self.disposal.remove_on_dispose,
            remove_mounts_on_dispose=self.disposal.remove_mounts_on_dispose,
            remove_named_mounts_on_dispose=self.disposal.remove_named_mounts_on_dispose,
            is_windows_container=config.is_windows,
            stop_timeout=self.stop_timeout,
        )
