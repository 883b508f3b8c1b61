"""
Response models for the relay API.

Defines the response DTOs used by the chat and contact endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error envelope; extra keys (status, type, method) are allowed."""

    model_config = ConfigDict(extra="allow")

    error: str = Field(..., description="Error message")


class ChatStatusResponse(BaseModel):
    """Liveness response for GET /api/chat."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="Human readable status")
    method: str = Field(default="GET", description="Request method echoed back")
    has_api_key: bool = Field(
        ..., alias="hasApiKey", description="Whether the upstream credential is configured"
    )
    timestamp: str = Field(..., description="ISO-8601 timestamp")


class RelayStatusResponse(BaseModel):
    """Liveness response for GET /."""

    status: str = Field(..., description="Human readable status")
    method: str = Field(default="GET", description="Request method echoed back")
    url: str = Field(..., description="Requested URL")
    endpoints: List[str] = Field(..., description="Available API endpoints")
    timestamp: str = Field(..., description="ISO-8601 timestamp")


class ContactResponse(BaseModel):
    """Response model for a contact submission."""

    success: bool = Field(..., description="Whether the submission was accepted")
    message: Optional[str] = Field(default=None, description="Outcome description")
