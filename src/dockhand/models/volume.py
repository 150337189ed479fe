"""Volume descriptor models."""

from typing import Dict, Optional
from pydantic import BaseModel, Field


class VolumeDescriptor(BaseModel):
    """Volume as reported by ``docker volume inspect``."""
    name: str = Field(..., alias="Name")
    driver: str = Field(default="local", alias="Driver")
    mountpoint: str = Field(default="", alias="Mountpoint")
    scope: str = Field(default="local", alias="Scope")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True
