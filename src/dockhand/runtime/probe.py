"""Detection of a local docker runtime."""

import logging
import shutil
import sys
from enum import Enum
from typing import Optional


logger = logging.getLogger(__name__)


class RuntimeKind(Enum):
    """Kind of local docker runtime."""
    NATIVE = "native"
    EMULATED = "emulated"
    ABSENT = "absent"

    @property
    def is_available(self) -> bool:
        """Whether a local runtime can be used."""
        return self is not RuntimeKind.ABSENT


def probe_runtime(docker_binary: str = "docker", platform: Optional[str] = None) -> RuntimeKind:
    """Probe once for a local runtime.

    A docker client on Linux talks to a native daemon. On macOS and Windows
    the daemon runs inside a VM managed by Docker Desktop and is reported as
    emulated.
    """
    platform = platform or sys.platform

    if shutil.which(docker_binary) is None:
        logger.debug(f"No {docker_binary} binary found on PATH")
        return RuntimeKind.ABSENT

    if platform.startswith("linux"):
        kind = RuntimeKind.NATIVE
    elif platform in ("darwin", "win32", "cygwin"):
        kind = RuntimeKind.EMULATED
    else:
        kind = RuntimeKind.ABSENT

    logger.debug(f"Detected local runtime: {kind.value}")
    return kind
