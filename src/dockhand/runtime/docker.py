"""Runtime client backed by the docker command line."""

import json
import logging
import subprocess
from typing import List, Optional, Sequence

from pydantic import ValidationError

from dockhand.models.container import ContainerConfig
from dockhand.models.host import CertificatePaths
from dockhand.models.network import NetworkDescriptor
from dockhand.models.volume import VolumeDescriptor
from dockhand.runtime.base import CommandResponse, RuntimeClient
from dockhand.runtime.commands import CommandResult, run_command


logger = logging.getLogger(__name__)


class DockerCliClient(RuntimeClient):
    """Runs docker CLI commands against a single daemon."""

    def __init__(self, host_uri: Optional[str] = None, binary: str = "docker", command_timeout: int = 120):
        """Initialize docker client."""
        self.host_uri = host_uri
        self.binary = binary
        self.command_timeout = command_timeout

    def build_command(self, args: Sequence[str], certificates: Optional[CertificatePaths]) -> List[str]:
        """Prefix docker arguments with the binary, host and TLS flags."""
        cmd = [self.binary]
        if self.host_uri:
            cmd.extend(["--host", self.host_uri])
        if certificates is not None and certificates.is_complete:
            cmd.extend([
                "--tlsverify",
                "--tlscacert", str(certificates.ca_certificate),
                "--tlscert", str(certificates.client_certificate),
                "--tlskey", str(certificates.client_key),
            ])
        cmd.extend(args)
        return cmd

    def _execute(self, args: Sequence[str], certificates: Optional[CertificatePaths]) -> CommandResult:
        """Run a docker command, folding process errors into the result."""
        cmd = self.build_command(args, certificates)
        try:
            return run_command(cmd, check=False, timeout=self.command_timeout)
        except subprocess.TimeoutExpired:
            logger.error(f"Command timed out after {self.command_timeout}s: {' '.join(cmd)}")
            return CommandResult(returncode=-1, stderr=f"timed out after {self.command_timeout}s")
        except OSError as e:
            logger.error(f"Failed to run {self.binary}: {e}")
            return CommandResult(returncode=-1, stderr=str(e))

    @staticmethod
    def _failure(result: CommandResult) -> CommandResponse:
        """Turn a failed command into a response."""
        error = result.stderr.strip() or f"exit code {result.returncode}"
        return CommandResponse.failed(error, log=result.stderr.splitlines())

    def _simple(self, args: Sequence[str], certificates: Optional[CertificatePaths]) -> CommandResponse[str]:
        """Run a command whose only output is an identifier."""
        result = self._execute(args, certificates)
        if result.returncode != 0:
            return self._failure(result)
        return CommandResponse.ok(result.stdout.strip(), log=result.lines)

    def inspect_container(
        self, container_id: str, certificates: Optional[CertificatePaths]
    ) -> CommandResponse[ContainerConfig]:
        """Describe a container."""
        result = self._execute(["container", "inspect", container_id], certificates)
        if result.returncode != 0:
            return self._failure(result)

        try:
            payload = json.loads(result.stdout)
            if not payload:
                return CommandResponse.failed(f"No such container: {container_id}")
            return CommandResponse.ok(ContainerConfig.model_validate(payload[0]))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Unreadable inspect output for container {container_id}: {e}")
            return CommandResponse.failed(f"Unreadable inspect output: {e}")

    def start(self, container_id: str, certificates: Optional[CertificatePaths]) -> CommandResponse[str]:
        """Start a container."""
        return self._simple(["container", "start", container_id], certificates)

    def stop(
        self,
        container_id: str,
        timeout: Optional[int],
        certificates: Optional[CertificatePaths],
    ) -> CommandResponse[str]:
        """Stop a container."""
        args = ["container", "stop"]
        if timeout is not None:
            args.extend(["-t", str(timeout)])
        args.append(container_id)
        return self._simple(args, certificates)

    def remove_container(
        self,
        container_id: str,
        force: bool,
        remove_volumes: bool,
        link: Optional[str],
        certificates: Optional[CertificatePaths],
    ) -> CommandResponse[str]:
        """Remove a container, or only the given link."""
        args = ["container", "rm"]
        if force:
            args.append("--force")
        if remove_volumes:
            args.append("--volumes")
        if link:
            args.extend(["--link", link])
        else:
            args.append(container_id)
        return self._simple(args, certificates)

    def volume_inspect(
        self, certificates: Optional[CertificatePaths], names: Sequence[str]
    ) -> CommandResponse[List[VolumeDescriptor]]:
        """Describe volumes by name."""
        result = self._execute(["volume", "inspect", *names], certificates)
        if result.returncode != 0:
            return self._failure(result)

        try:
            payload = json.loads(result.stdout or "[]")
            return CommandResponse.ok([VolumeDescriptor.model_validate(item) for item in payload])
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Unreadable volume inspect output: {e}")
            return CommandResponse.failed(f"Unreadable volume inspect output: {e}")

    def volume_remove(
        self, certificates: Optional[CertificatePaths], force: bool, names: Sequence[str]
    ) -> CommandResponse[List[str]]:
        """Remove volumes by name."""
        args = ["volume", "rm"]
        if force:
            args.append("--force")
        args.extend(names)

        result = self._execute(args, certificates)
        if result.returncode != 0:
            return self._failure(result)
        return CommandResponse.ok(result.lines, log=result.lines)

    def network_list(self, certificates: Optional[CertificatePaths]) -> CommandResponse[List[NetworkDescriptor]]:
        """List all networks on the host."""
        result = self._execute(["network", "ls", "--no-trunc", "--format", "{{json .}}"], certificates)
        if result.returncode != 0:
            return self._failure(result)

        try:
            networks = [NetworkDescriptor.model_validate(json.loads(line)) for line in result.lines]
            return CommandResponse.ok(networks)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Unreadable network listing: {e}")
            return CommandResponse.failed(f"Unreadable network listing: {e}")
