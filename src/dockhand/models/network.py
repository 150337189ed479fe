"""Network descriptor models."""

from typing import Optional
from pydantic import BaseModel, Field


class NetworkDescriptor(BaseModel):
    """One row of ``docker network ls`` output."""
    id: str = Field(..., alias="ID")
    name: str = Field(..., alias="Name")
    driver: str = Field(default="", alias="Driver")
    scope: str = Field(default="local", alias="Scope")
    internal: Optional[str] = Field(None, alias="Internal")
    labels: Optional[str] = Field(None, alias="Labels")

    class Config:
        """Pydantic config."""
        extra = "ignore"
        frozen = True
        populate_by_name = True
