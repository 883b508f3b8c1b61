"""
Application models package.

Contains the request and response DTOs for the relay API.
"""

from application.models.request_models import CONTACT_REQUIRED_FIELDS, ContactRequest
from application.models.response_models import (
    ChatStatusResponse,
    ContactResponse,
    ErrorResponse,
    RelayStatusResponse,
)

__all__ = [
    # Request models
    "CONTACT_REQUIRED_FIELDS",
    "ContactRequest",
    # Response models
    "ChatStatusResponse",
    "ContactResponse",
    "ErrorResponse",
    "RelayStatusResponse",
]
