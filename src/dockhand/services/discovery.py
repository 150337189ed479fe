"""Discovery of reachable docker hosts."""

import logging
import os
from typing import List, Mapping, Optional

from dockhand.models.host import HostDescriptor
from dockhand.runtime.base import MachineClient
from dockhand.runtime.probe import RuntimeKind


logger = logging.getLogger(__name__)

DOCKER_CERT_PATH = "DOCKER_CERT_PATH"
NATIVE_HOST_NAME = "native"


class Hosts:
    """Enumerates docker endpoints from docker-machine and the local runtime.

    Only metadata already known to the tooling is inspected; no connection
    to any daemon is made while discovering.
    """

    def __init__(
        self,
        machine_client: MachineClient,
        runtime_kind: RuntimeKind,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize discovery with a runtime kind probed by the caller."""
        self.machine_client = machine_client
        self.runtime_kind = runtime_kind
        self.environ = environ if environ is not None else os.environ

    def discover(self) -> List[HostDescriptor]:
        """Remote machines in listing order, then the native host if any."""
        hosts = self._discover_machines()

        if self.runtime_kind.is_available:
            hosts.append(HostDescriptor(
                name=NATIVE_HOST_NAME,
                is_native=True,
                stop_when_disposed=False,
                uri=None,
                certificate_path=self.environ.get(DOCKER_CERT_PATH),
            ))

        logger.debug(f"Discovered {len(hosts)} docker host(s)")
        return hosts

    def _discover_machines(self) -> List[HostDescriptor]:
        if not self.machine_client.is_present():
            return []

        listing = self.machine_client.list_machines()
        if not listing.success:
            logger.warning(f"Could not list docker machines: {listing.error}")
            return []

        hosts = []
        for machine in listing.data or []:
            inspect = self.machine_client.inspect(machine.name)
            if not inspect.success or inspect.data is None:
                logger.warning(f"Skipping machine {machine.name}: {inspect.error}")
                continue

            hosts.append(HostDescriptor(
                name=machine.name,
                is_native=False,
                stop_when_disposed=False,
                uri=machine.url,
                machine_name=machine.name,
                certificate_path=inspect.data.cert_dir,
            ))
        return hosts
