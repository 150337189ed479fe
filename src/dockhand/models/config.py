"""Configuration models."""

from typing import Optional
from pydantic import BaseModel, Field, validator


class RuntimeConfig(BaseModel):
    """Runtime client configuration."""
    docker_binary: str = Field(default="docker")
    machine_binary: str = Field(default="docker-machine")
    host: Optional[str] = Field(None, description="Daemon address, None for the local socket")
    cert_path: Optional[str] = Field(None, description="Directory with ca.pem, cert.pem and key.pem")
    command_timeout: int = Field(default=120, ge=1)
    stop_timeout: Optional[int] = Field(None, ge=0)


class DisposalConfig(BaseModel):
    """What a container handle does when it is disposed."""
    stop_on_dispose: bool = Field(default=True)
    remove_on_dispose: bool = Field(default=True)
    remove_mounts_on_dispose: bool = Field(default=False)
    remove_named_mounts_on_dispose: bool = Field(default=False)


class DockhandConfig(BaseModel):
    """Main configuration model."""
    log_level: str = Field(default="INFO")
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    disposal: DisposalConfig = Field(default_factory=DisposalConfig)

    class Config:
        """Pydantic config."""
        extra = "ignore"

    @validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
