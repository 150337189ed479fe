"""Blocking command execution for runtime clients."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from running a command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def lines(self) -> List[str]:
        """Non-empty stdout lines."""
        return [line for line in self.stdout.splitlines() if line.strip()]


def run_command(
    cmd: List[str],
    check: bool = True,
    timeout: Optional[int] = None,
    env: Optional[Dict[str, str]] = None,
) -> CommandResult:
    """Run a command and wait for it to finish."""
    logger.debug(f"Running command: {' '.join(cmd)}")

    completed = subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        timeout=timeout,
        env=env,
        text=True,
        errors="replace",
    )

    result = CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )

    if check and completed.returncode != 0:
        error = subprocess.CalledProcessError(completed.returncode, cmd)
        error.stdout = result.stdout
        error.stderr = result.stderr
        raise error

    return result
