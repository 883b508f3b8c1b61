"""
Application services package.

Contains the business logic behind the relay routes and the chat client.
"""

from application.services.config_service import ConfigService, get_config_service
from application.services.contact_service import ContactResult, ContactService
from application.services.relay_service import ChatRelayService, RelayResult

__all__ = [
    "ChatRelayService",
    "ConfigService",
    "ContactResult",
    "ContactService",
    "RelayResult",
    "get_config_service",
]
