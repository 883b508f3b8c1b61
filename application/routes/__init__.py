"""
Application routes package.

Contains the API endpoint blueprints for the relay.
"""

from application.routes.chat import chat_bp
from application.routes.contact import contact_bp
from application.routes.status import status_bp

__all__ = ["chat_bp", "contact_bp", "status_bp"]
