"""Custom exceptions for dockhand."""


class DockhandError(Exception):
    """Base exception for all dockhand errors."""
    pass


class ConfigError(DockhandError):
    """Configuration could not be read or validated."""
    pass


class ContainerQueryError(DockhandError):
    """A query against a container failed on the runtime."""

    def __init__(self, container_id: str, message: str):
        self.container_id = container_id
        self.message = message
        super().__init__(message)


class ContainerInspectError(ContainerQueryError):
    """The runtime could not describe the container."""

    def __init__(self, container_id: str, reason: str = ""):
        message = f"Failed to inspect docker container {container_id}"
        if reason:
            message = f"{message}: {reason}"
        self.reason = reason
        super().__init__(container_id, message)
