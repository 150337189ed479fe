"""Volume handles."""

from typing import Optional

from dockhand.models.host import CertificatePaths, HostDescriptor


class VolumeService:
    """A volume on a docker host.

    Handles returned from container queries are plain values: they never
    remove the volume when they go away.
    """

    def __init__(
        self,
        name: str,
        host: Optional[HostDescriptor],
        certificates: Optional[CertificatePaths],
        remove_on_dispose: bool = False,
    ):
        self._name = name
        self._host = host
        self._certificates = certificates
        self._remove_on_dispose = remove_on_dispose

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
    def remove_on_dispose(self) -> bool:
        return self._remove_on_dispose

    def __eq__(self, other):
        if not isinstance(other, VolumeService):
            return NotImplemented
        return (self._name, self._host) == (other._name, other._host)

    def __hash__(self):
        return hash((self._name, self._host))

    def __repr__(self):
        return f"VolumeService(name={self._name!r})"
