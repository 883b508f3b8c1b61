"""
Configuration Service for centralized environment variable management.

Provides validated configuration objects for the chat relay and the
contact-form relay (Turnstile verification, Resend email).
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from common.config import config as settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatRelayConfig:
    """Upstream chat API configuration."""

    upstream_url: str
    timeout_seconds: float
    api_key: Optional[str] = None

    def __post_init__(self):
        """Validate required fields."""
        if not self.upstream_url:
            raise ValueError("CHAT_UPSTREAM_URL must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be positive")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class ContactConfig:
    """Contact form relay configuration."""

    verify_url: str
    email_api_url: str
    recipient: str
    sender: str
    site_name: str
    timeout_seconds: float
    verification_secret: Optional[str] = None
    email_api_key: Optional[str] = None

    def __post_init__(self):
        """Validate required fields."""
        if not self.recipient:
            raise ValueError("CONTACT_EMAIL must not be empty")


class ConfigService:
    """
    Service for loading and managing relay configuration.

    Reads from the given environ mapping (``os.environ`` by default) and
    caches configuration objects after first load.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration service with empty cache.

        Args:
            environ: Mapping to read variables from (default: os.environ)
        """
        self._environ = environ if environ is not None else os.environ
        self._chat_relay_config: Optional[ChatRelayConfig] = None
        self._contact_config: Optional[ContactConfig] = None

    def _get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._environ.get(key)
        if value is None or not str(value).strip():
            return default
        return str(value).strip()

    def _get_float(self, key: str, default: float) -> float:
        raw = self._get(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Ignoring non-numeric {key}={raw!r}, using {default}")
            return default

    def get_chat_relay_config(self) -> ChatRelayConfig:
        """
        Get chat relay configuration.

        A missing COHERE_API_KEY is not an error here; the relay reports it
        per request so the service can still answer health checks.

        Returns:
            ChatRelayConfig: Validated chat relay configuration

        Example:
            >>> config_service = ConfigService({"COHERE_API_KEY": "key"})
            >>> config_service.get_chat_relay_config().has_api_key
            True
        """
        if self._chat_relay_config is None:
            self._chat_relay_config = ChatRelayConfig(
                upstream_url=self._get("CHAT_UPSTREAM_URL", settings.CHAT_UPSTREAM_URL),
                timeout_seconds=self._get_float(
                    "UPSTREAM_TIMEOUT_SECONDS", settings.UPSTREAM_TIMEOUT_SECONDS
                ),
                api_key=self._get("COHERE_API_KEY"),
            )
            logger.debug(
                f"Loaded chat relay configuration for upstream: "
                f"{self._chat_relay_config.upstream_url}"
            )

        return self._chat_relay_config

    def get_contact_config(self) -> ContactConfig:
        """
        Get contact form configuration.

        Returns:
            ContactConfig: Validated contact form configuration
        """
        if self._contact_config is None:
            self._contact_config = ContactConfig(
                verify_url=self._get("TURNSTILE_VERIFY_URL", settings.TURNSTILE_VERIFY_URL),
                email_api_url=self._get("RESEND_API_URL", settings.RESEND_API_URL),
                recipient=self._get("CONTACT_EMAIL", settings.CONTACT_EMAIL),
                sender=self._get("CONTACT_FROM_EMAIL", settings.CONTACT_FROM_EMAIL),
                site_name=self._get("CONTACT_SITE_NAME", settings.CONTACT_SITE_NAME),
                timeout_seconds=self._get_float(
                    "UPSTREAM_TIMEOUT_SECONDS", settings.UPSTREAM_TIMEOUT_SECONDS
                ),
                verification_secret=self._get("TURNSTILE_SECRET_KEY"),
                email_api_key=self._get("RESEND_API_KEY"),
            )
            logger.debug(
                f"Loaded contact configuration for recipient: {self._contact_config.recipient}"
            )

        return self._contact_config


# Global instance
_config_service: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """
    Get global configuration service instance.

    Returns:
        ConfigService: Singleton configuration service
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
