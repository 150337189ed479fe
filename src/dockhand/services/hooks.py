"""Per-state lifecycle hooks."""

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable, Tuple

from dockhand.services.state import ServiceState


logger = logging.getLogger(__name__)

Hook = Callable[[Any, ServiceState], None]


class ServiceHooks:
    """Ordered registry of callbacks keyed by a unique name.

    Each entry targets a single state and runs only when a service enters
    exactly that state. Callbacks run in insertion order on the thread that
    performed the transition.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._hooks: "OrderedDict[str, Tuple[ServiceState, Hook]]" = OrderedDict()
        self._lock = threading.Lock()

    def add_hook(self, key: str, state: ServiceState, hook: Hook) -> None:
        """Register a hook; an existing key keeps its position."""
        with self._lock:
            self._hooks[key] = (state, hook)

    def remove_hook(self, key: str) -> None:
        """Deregister a hook, ignoring unknown keys."""
        with self._lock:
            self._hooks.pop(key, None)

    def execute(self, service: Any, state: ServiceState) -> None:
        """Run every hook registered for state."""
        with self._lock:
            matching = [(key, hook) for key, (target, hook) in self._hooks.items() if target == state]

        for key, hook in matching:
            try:
                hook(service, state)
            except Exception as e:
                logger.error(f"Hook {key} failed on transition to {state.value}: {e}", exc_info=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._hooks)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._hooks
