"""Host, certificate and machine models."""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class CertificatePaths(BaseModel):
    """TLS material used to talk to a docker endpoint."""
    ca_certificate: Optional[Path] = None
    client_certificate: Optional[Path] = None
    client_key: Optional[Path] = None

    class Config:
        """Pydantic config."""
        frozen = True

    @classmethod
    def from_directory(cls, cert_dir: Optional[str]) -> Optional["CertificatePaths"]:
        """Resolve the conventional ca.pem, cert.pem and key.pem in a directory."""
        if not cert_dir:
            return None
        base = Path(cert_dir).expanduser()
        return cls(
            ca_certificate=base / "ca.pem",
            client_certificate=base / "cert.pem",
            client_key=base / "key.pem",
        )

    @property
    def is_complete(self) -> bool:
        """Whether CA, certificate and key are all set."""
        return all((self.ca_certificate, self.client_certificate, self.client_key))


class HostDescriptor(BaseModel):
    """How to reach one docker endpoint."""
    name: str = Field(..., description="Machine name, or 'native' for the local runtime")
    uri: Optional[str] = Field(None, description="Daemon address, None for the default local socket")
    is_native: bool = Field(default=False)
    stop_when_disposed: bool = Field(default=False)
    machine_name: Optional[str] = None
    certificate_path: Optional[str] = None

    class Config:
        """Pydantic config."""
        frozen = True

    @property
    def certificates(self) -> Optional[CertificatePaths]:
        """Certificates found under the certificate directory."""
        return CertificatePaths.from_directory(self.certificate_path)

    @property
    def requires_tls(self) -> bool:
        """Whether calls to this host carry TLS flags."""
        certificates = self.certificates
        return certificates is not None and certificates.is_complete


class MachineInfo(BaseModel):
    """One row of the machine listing."""
    name: str
    state: str = ""
    url: Optional[str] = None
    driver: str = ""

    @property
    def is_running(self) -> bool:
        """Whether the machine reports itself as running."""
        return self.state.lower() == "running"


class AuthOptions(BaseModel):
    """Authentication block of a machine inspect payload."""
    cert_dir: Optional[str] = Field(None, alias="CertDir")
    ca_cert_path: Optional[str] = Field(None, alias="CaCertPath")
    client_cert_path: Optional[str] = Field(None, alias="ClientCertPath")
    client_key_path: Optional[str] = Field(None, alias="ClientKeyPath")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        populate_by_name = True


class HostOptions(BaseModel):
    """Host options block of a machine inspect payload."""
    auth_options: AuthOptions = Field(default_factory=AuthOptions, alias="AuthOptions")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        populate_by_name = True


class MachineDriver(BaseModel):
    """Driver block of a machine inspect payload."""
    ip_address: Optional[str] = Field(None, alias="IPAddress")
    machine_name: Optional[str] = Field(None, alias="MachineName")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        populate_by_name = True


class MachineDetail(BaseModel):
    """Output of ``docker-machine inspect``."""
    name: str = Field(..., alias="Name")
    driver_name: str = Field(default="", alias="DriverName")
    driver: MachineDriver = Field(default_factory=MachineDriver, alias="Driver")
    host_options: HostOptions = Field(default_factory=HostOptions, alias="HostOptions")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        populate_by_name = True

    @property
    def cert_dir(self) -> Optional[str]:
        """Directory holding the machine's client certificates."""
        return self.host_options.auth_options.cert_dir

    @property
    def ip_address(self) -> Optional[str]:
        """Address the machine driver reports."""
        return self.driver.ip_address
