"""Container service managing the lifecycle of a single docker container."""

import logging
import threading
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from dockhand.errors import ContainerInspectError, ContainerQueryError, DockhandError
from dockhand.models.container import ContainerConfig
from dockhand.models.host import CertificatePaths, HostDescriptor
from dockhand.runtime.base import RuntimeClient
from dockhand.services.hooks import Hook, ServiceHooks
from dockhand.services.network import NetworkService
from dockhand.services.state import ServiceState, StateChangeEvent, TransitionResult
from dockhand.services.volume import VolumeService


logger = logging.getLogger(__name__)

StateListener = Callable[[StateChangeEvent], None]


class CacheStatus(Enum):
    """Whether the configuration has been fetched."""
    UNFETCHED = "unfetched"
    FETCHED = "fetched"


@dataclass(frozen=True)
class ConfigCache:
    """Cached configuration; replaced as a whole, never mutated."""
    status: CacheStatus
    snapshot: Optional[ContainerConfig] = None

    @classmethod
    def unfetched(cls) -> "ConfigCache":
        return cls(CacheStatus.UNFETCHED)

    @classmethod
    def fetched(cls, snapshot: ContainerConfig) -> "ConfigCache":
        return cls(CacheStatus.FETCHED, snapshot)

    @property
    def is_fetched(self) -> bool:
        return self.status is CacheStatus.FETCHED


class ContainerService:
    """Stateful handle for one existing docker container.

    The handle is bound to a container id the runtime already knows about.
    It drives the container through start, stop and remove, keeps track of
    the lifecycle state it observed, and tears the container down on
    dispose according to the flags given at construction.

    Failures are reported on two channels. Transitions (start, stop,
    remove) never raise on a runtime failure: the state stays at the
    intermediate value and ``last_transition`` describes what happened.
    Queries (get_configuration, get_volumes, get_networks) raise
    ContainerQueryError.

    Every state change notifies the state listeners first and then runs
    the hooks registered for the new state. Transitions on one instance are
    serialized by a re-entrant lock, so a hook may call back into the
    service from the same thread.
    """

    def __init__(
        self,
        name: str,
        id: str,
        client: RuntimeClient,
        host: Optional[HostDescriptor] = None,
        certificates: Optional[CertificatePaths] = None,
        state: ServiceState = ServiceState.UNKNOWN,
        stop_on_dispose: bool = True,
        remove_on_dispose: bool = True,
        remove_mounts_on_dispose: bool = False,
        remove_named_mounts_on_dispose: bool = False,
        is_windows_container: bool = False,
        stop_timeout: Optional[int] = None,
    ):
        """Initialize container service."""
        self._lock = threading.RLock()
        self._hooks = ServiceHooks()
        self._listeners: List[StateListener] = []
        self._cache = ConfigCache.unfetched()
        self._last_transition: Optional[TransitionResult] = None

        self._client = client
        self._name = name
        self._host = host
        self._certificates = certificates
        self._state = state
        self._stop_on_dispose = stop_on_dispose
        self._remove_on_dispose = remove_on_dispose
        self._remove_mounts_on_dispose = remove_mounts_on_dispose
        self._remove_named_mounts_on_dispose = remove_named_mounts_on_dispose
        self._is_windows_container = is_windows_container
        self._stop_timeout = stop_timeout

        # Assigned last: dispose() treats a missing id as nothing to act on.
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def host(self) -> Optional[HostDescriptor]:
        return self._host

    @property
    def certificates(self) -> Optional[CertificatePaths]:
        return self._certificates

    @property
    def is_windows_container(self) -> bool:
        return self._is_windows_container

    @property
    def state(self) -> ServiceState:
        """Last observed lifecycle state."""
        return self._state

    @property
    def last_transition(self) -> Optional[TransitionResult]:
        """Outcome of the most recent start, stop or remove."""
        return self._last_transition

    def _set_state(self, state: ServiceState) -> bool:
        """Move to a new state, notifying listeners and then hooks."""
        with self._lock:
            if self._state == state:
                return False

            previous = self._state
            self._state = state
            logger.debug(f"Container {self._id}: {previous.value} -> {state.value}")

            event = StateChangeEvent(self, state)
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception as e:
                    logger.error(f"State listener failed for container {self._id}: {e}", exc_info=True)

            self._hooks.execute(self, state)
            return True

    def _record(self, operation: str, target: ServiceState, success: bool, error: Optional[str] = None) -> None:
        self._last_transition = TransitionResult(operation, target, success, error)

    def get_configuration(self, fresh: bool = False) -> ContainerConfig:
        """Return the cached configuration, inspecting the container when needed.

        Args:
            fresh: Always query the runtime and replace the cache.

        Raises:
            ContainerInspectError: The runtime could not describe the container.
        """
        cache = self._cache
        if not fresh and cache.is_fetched:
            return cache.snapshot

        response = self._client.inspect_container(self._id, self._certificates)
        if not response.success or response.data is None:
            raise ContainerInspectError(self._id, response.error)

        self._cache = ConfigCache.fetched(response.data)
        return response.data

    def start(self) -> "ContainerService":
        """Start the container and confirm that it runs."""
        with self._lock:
            if self._state == ServiceState.REMOVED:
                logger.debug(f"Container {self._id} already removed, not starting")
                return self

            logger.info(f"Starting container {self._name} ({self._id})")
            self._set_state(ServiceState.STARTING)

            response = self._client.start(self._id, self._certificates)
            if not response.success:
                logger.warning(f"Failed to start container {self._id}: {response.error}")
                self._record("start", ServiceState.RUNNING, False, response.error)
                return self

            try:
                config = self.get_configuration(fresh=True)
            except ContainerQueryError as e:
                logger.warning(f"Could not confirm start of container {self._id}: {e}")
                self._record("start", ServiceState.RUNNING, False, str(e))
                return self

            if config.state.running:
                self._set_state(ServiceState.RUNNING)
                self._record("start", ServiceState.RUNNING, True)
            else:
                logger.warning(f"Container {self._id} is not running after start ({config.state.status})")
                self._record("start", ServiceState.RUNNING, False, f"container status is {config.state.status}")
            return self

    def stop(self) -> "ContainerService":
        """Stop the container."""
        with self._lock:
            if not self._id:
                return self
            if self._state == ServiceState.REMOVED:
                logger.debug(f"Container {self._id} already removed, not stopping")
                return self

            logger.info(f"Stopping container {self._name} ({self._id})")
            self._set_state(ServiceState.STOPPING)

            response = self._client.stop(self._id, self._stop_timeout, self._certificates)
            if response.success:
                self._set_state(ServiceState.STOPPED)
                self._record("stop", ServiceState.STOPPED, True)
            else:
                logger.warning(f"Failed to stop container {self._id}: {response.error}")
                self._record("stop", ServiceState.STOPPED, False, response.error)
            return self

    def remove(self, force: bool = False, remove_volumes: bool = False) -> "ContainerService":
        """Remove the container, stopping it first when it is not stopped.

        Args:
            force: Kill a running container instead of failing.
            remove_volumes: Also remove anonymous volumes of the container.
        """
        return self._remove(force, remove_volumes, disposing=False)

    def _remove(self, force: bool, remove_volumes: bool, disposing: bool) -> "ContainerService":
        with self._lock:
            if not self._id:
                return self
            if self._state == ServiceState.REMOVED:
                logger.debug(f"Container {self._id} already removed")
                return self

            if self._state != ServiceState.STOPPED:
                self.stop()

            self._set_state(ServiceState.REMOVING)

            named_mounts: List[str] = []
            if disposing and self._remove_named_mounts_on_dispose:
                # Resolved up front: a removed container cannot be inspected.
                named_mounts = self._resolve_named_mounts()

            logger.info(f"Removing container {self._name} ({self._id})")
            response = self._client.remove_container(self._id, force, remove_volumes, None, self._certificates)

            if named_mounts:
                self._remove_named_mounts(named_mounts)

            if response.success:
                self._set_state(ServiceState.REMOVED)
                self._record("remove", ServiceState.REMOVED, True)
            else:
                logger.warning(f"Failed to remove container {self._id}: {response.error}")
                self._record("remove", ServiceState.REMOVED, False, response.error)
            return self

    def _resolve_named_mounts(self) -> List[str]:
        try:
            return self.get_configuration().named_mounts
        except DockhandError as e:
            logger.warning(f"Cannot resolve named mounts of container {self._id}: {e}")
            return []

    def _remove_named_mounts(self, names: List[str]) -> None:
        response = self._client.volume_remove(self._certificates, True, names)
        if response.success:
            logger.debug(f"Removed named mounts {', '.join(names)} of container {self._id}")
        else:
            logger.warning(f"Failed to remove named mounts {', '.join(names)}: {response.error}")

    def dispose(self) -> None:
        """Tear the container down according to the disposal flags.

        Safe to call repeatedly; never raises.
        """
        container_id = getattr(self, "_id", None)
        if not container_id:
            return

        with self._lock:
            if self._state == ServiceState.REMOVED:
                return

            try:
                if self._stop_on_dispose and self._state != ServiceState.STOPPED:
                    self.stop()
                if self._remove_on_dispose:
                    self._remove(True, self._remove_mounts_on_dispose, disposing=True)
            except DockhandError as e:
                logger.error(f"Failed to dispose container {container_id}: {e}")

    def __enter__(self) -> "ContainerService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.dispose()
        return False

    def get_volumes(self) -> List[VolumeService]:
        """Volumes mounted into the container by name.

        Raises:
            ContainerQueryError: The volumes could not be inspected.
        """
        config = self.get_configuration()
        names = config.named_mounts
        if not names:
            return []

        response = self._client.volume_inspect(self._certificates, names)
        if not response.success:
            raise ContainerQueryError(
                self._id, f"Failed to get attached volumes on docker container {self._id}"
            )

        return [
            VolumeService(volume.name, self._host, self._certificates, remove_on_dispose=False)
            for volume in response.data or []
        ]

    def get_networks(self) -> List[NetworkService]:
        """Networks the container is attached to.

        Raises:
            ContainerQueryError: The host's networks could not be listed.
        """
        config = self.get_configuration()
        response = self._client.network_list(self._certificates)
        if not response.success:
            raise ContainerQueryError(
                self._id, f"Failed to get networks that container id = {self._id} is attached to"
            )

        return [
            NetworkService(endpoint.network_id, name, self._host, self._certificates)
            for name, endpoint in config.network_settings.networks.items()
        ]

    def add_hook(self, state: ServiceState, hook: Hook, key: Optional[str] = None) -> "ContainerService":
        """Run hook(service, state) whenever the service enters state."""
        self._hooks.add_hook(key or str(uuid.uuid4()), state, hook)
        return self

    def remove_hook(self, key: str) -> "ContainerService":
        """Deregister a hook by key."""
        self._hooks.remove_hook(key)
        return self

    def add_state_listener(self, listener: StateListener) -> "ContainerService":
        """Call listener(event) on every state change, before hooks run."""
        with self._lock:
            self._listeners.append(listener)
        return self

    def remove_state_listener(self, listener: StateListener) -> "ContainerService":
        """Stop notifying listener."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return self

    def __repr__(self):
        return f"ContainerService(name={self._name!r}, id={self._id!r}, state={self._state.value})"
