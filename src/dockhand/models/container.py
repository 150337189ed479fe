"""Container configuration snapshot models."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class ContainerState(BaseModel):
    """Runtime state block of an inspected container."""
    status: str = Field(default="", alias="Status")
    running: bool = Field(default=False, alias="Running")
    paused: bool = Field(default=False, alias="Paused")
    restarting: bool = Field(default=False, alias="Restarting")
    exit_code: int = Field(default=0, alias="ExitCode")
    pid: int = Field(default=0, alias="Pid")
    error: str = Field(default="", alias="Error")
    started_at: Optional[str] = Field(None, alias="StartedAt")
    finished_at: Optional[str] = Field(None, alias="FinishedAt")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True


class Mount(BaseModel):
    """A mount attached to a container."""
    type: str = Field(default="volume", alias="Type")
    name: str = Field(default="", alias="Name", description="Empty for bind and anonymous mounts")
    source: str = Field(default="", alias="Source")
    destination: str = Field(default="", alias="Destination")
    driver: str = Field(default="", alias="Driver")
    mode: str = Field(default="", alias="Mode")
    rw: bool = Field(default=True, alias="RW")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True


class EndpointSettings(BaseModel):
    """Settings of one network attachment."""
    network_id: str = Field(default="", alias="NetworkID")
    endpoint_id: str = Field(default="", alias="EndpointID")
    gateway: str = Field(default="", alias="Gateway")
    ip_address: str = Field(default="", alias="IPAddress")
    mac_address: str = Field(default="", alias="MacAddress")
    aliases: Optional[List[str]] = Field(None, alias="Aliases")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True


class NetworkSettings(BaseModel):
    """Network attachments keyed by network name."""
    networks: Dict[str, EndpointSettings] = Field(default_factory=dict, alias="Networks")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True


class ContainerConfig(BaseModel):
    """Snapshot of the runtime's description of a container.

    Built from the output of ``docker container inspect``. Instances are
    frozen so a cached snapshot can be shared between threads and replaced
    as a whole.
    """
    id: str = Field(..., alias="Id")
    name: str = Field(default="", alias="Name")
    image: str = Field(default="", alias="Image")
    created: Optional[str] = Field(None, alias="Created")
    platform: str = Field(default="linux", alias="Platform")
    state: ContainerState = Field(default_factory=ContainerState, alias="State")
    mounts: List[Mount] = Field(default_factory=list, alias="Mounts")
    network_settings: NetworkSettings = Field(default_factory=NetworkSettings, alias="NetworkSettings")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True

    @property
    def display_name(self) -> str:
        """Container name without the leading slash docker reports."""
        return self.name.lstrip("/")

    @property
    def named_mounts(self) -> List[str]:
        """Names of mounts that refer to named volumes."""
        return [mount.name for mount in self.mounts if mount.name]

    @property
    def is_windows(self) -> bool:
        """Whether the container runs on the Windows platform."""
        return self.platform.lower() == "windows"
