"""Service lifecycle states and transition records."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ServiceState(Enum):
    """Lifecycle state of a service handle."""
    UNKNOWN = "unknown"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"
    REMOVING = "removing"
    REMOVED = "removed"

    @property
    def is_pending(self) -> bool:
        """Whether this is an intermediate state of an unconfirmed transition."""
        return self in (ServiceState.STARTING, ServiceState.STOPPING, ServiceState.REMOVING)


@dataclass(frozen=True)
class StateChangeEvent:
    """Notification that a service reached a new state."""
    service: Any
    state: ServiceState


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of the most recent start, stop or remove."""
    operation: str
    target: ServiceState
    success: bool
    error: Optional[str] = None
