"""Machine enumeration backed by the docker-machine command line."""

import json
import logging
import shutil
import subprocess
from typing import List

from pydantic import ValidationError

from dockhand.models.host import MachineDetail, MachineInfo
from dockhand.runtime.base import CommandResponse, MachineClient
from dockhand.runtime.commands import run_command


logger = logging.getLogger(__name__)

LS_FORMAT = "{{.Name}}\t{{.State}}\t{{.URL}}\t{{.DriverName}}"


class DockerMachineClient(MachineClient):
    """Lists and inspects machines managed by docker-machine."""

    def __init__(self, binary: str = "docker-machine", command_timeout: int = 120):
        """Initialize machine client."""
        self.binary = binary
        self.command_timeout = command_timeout

    def is_present(self) -> bool:
        """Whether docker-machine is on the PATH."""
        return shutil.which(self.binary) is not None

    def _run(self, args: List[str]):
        """Run docker-machine and return (result, error)."""
        cmd = [self.binary, *args]
        try:
            result = run_command(cmd, check=False, timeout=self.command_timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error(f"Failed to run {' '.join(cmd)}: {e}")
            return None, str(e)

        if result.returncode != 0:
            return None, result.stderr.strip() or f"exit code {result.returncode}"
        return result, ""

    def list_machines(self) -> CommandResponse[List[MachineInfo]]:
        """List known machines in listing order."""
        result, error = self._run(["ls", "--format", LS_FORMAT])
        if result is None:
            return CommandResponse.failed(error)

        machines = []
        for line in result.lines:
            fields = line.split("\t")
            fields += [""] * (4 - len(fields))
            name, state, url, driver = (value.strip() for value in fields[:4])
            machines.append(MachineInfo(name=name, state=state, url=url or None, driver=driver))

        return CommandResponse.ok(machines, log=result.lines)

    def inspect(self, machine_name: str) -> CommandResponse[MachineDetail]:
        """Describe a machine."""
        result, error = self._run(["inspect", machine_name])
        if result is None:
            return CommandResponse.failed(error)

        try:
            return CommandResponse.ok(MachineDetail.model_validate(json.loads(result.stdout)))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Unreadable inspect output for machine {machine_name}: {e}")
            return CommandResponse.failed(f"Unreadable inspect output: {e}")
