"""
Pydantic models for stored pastes and request/response validation.
"""
from typing import Optional
from pydantic import BaseModel, Field


class Paste(BaseModel):
    """A stored paste row."""
    id: str = Field(..., description="Short generated paste ID")
    content: str = Field(..., description="Text content, stored verbatim")
    creator_address: str = Field(..., description="Network address of the creating client")


class PasteSummary(BaseModel):
    """A paste as listed in a client's history."""
    id: str
    content: str


class PasteCreate(BaseModel):
    """Schema for creating a new paste."""
    content: Optional[str] = Field(None, description="Text content (required, non-blank)")


class PasteSaved(BaseModel):
    """Schema for a successful save response."""
    success: bool = Field(True)
    url: str = Field(..., description="Path of the rendered view")
    raw_url: str = Field(..., alias="rawUrl", description="Path of the raw view")
    user_id: str = Field(..., alias="userId", description="Client identity value")


class ErrorResponse(BaseModel):
    """Schema for a failed API call."""
    success: bool = Field(False)
    message: str


class HealthCheck(BaseModel):
    """Schema for health check response."""
    ok: bool = Field(..., description="Is the application healthy?")
