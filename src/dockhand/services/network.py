"""Network handles."""

from typing import Optional

from dockhand.models.host import CertificatePaths, HostDescriptor


class NetworkService:
    """A network a container is attached to."""

    def __init__(
        self,
        id: str,
        name: str,
        host: Optional[HostDescriptor],
        certificates: Optional[CertificatePaths],
    ):
        self._id = id
        self._name = name
        self._host = host
        self._certificates = certificates

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

    def __eq__(self, other):
        if not isinstance(other, NetworkService):
            return NotImplemented
        return (self._id, self._name, self._host) == (other._id, other._name, other._host)

    def __hash__(self):
        return hash((self._id, self._name, self._host))

    def __repr__(self):
        return f"NetworkService(id={self._id!r}, name={self._name!r})"
