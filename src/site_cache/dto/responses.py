"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConfigEntryResponse(BaseModel):
    """A stored config entry."""

    key: str = Field(..., description="Config key")
    value: Any = Field(None, description="Config payload")


class OrderedEntityResponse(BaseModel):
    """A record of an ordered collection.

    Domain fields differ per collection and pass through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int = Field(..., description="Server-assigned id")
    order: int = Field(0, description="Display position (ascending)")
    is_active: bool = Field(True, alias="isActive", description="Shown on public pages")


class StatusResponse(BaseModel):
    """Generic confirmation payload."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field("", description="Human-readable status message")
