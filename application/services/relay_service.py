"""
Chat Relay Service.

Forwards chat payloads verbatim to the upstream chat API, attaching the
server-held credential so callers never see it.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from application.services.config_service import ChatRelayConfig, ConfigService
from common.exception import ConfigurationError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayResult:
    """Upstream answer passed back to the caller unchanged."""

    status_code: int
    body: Any


class ChatRelayService:
    """
    Service for relaying chat requests to the upstream provider.

    Stateless per request; configuration is read through the config service.
    """

    def __init__(self, config_service: ConfigService):
        """
        Initialize chat relay service.

        Args:
            config_service: Configuration service holding the upstream credential
        """
        self.config_service = config_service

    @property
    def config(self) -> ChatRelayConfig:
        return self.config_service.get_chat_relay_config()

    def has_api_key(self) -> bool:
        """Return True when the upstream credential is configured."""
        return self.config.has_api_key

    def require_api_key(self) -> str:
        """
        Return the upstream credential.

        Raises:
            ConfigurationError: If the credential is not configured
        """
        api_key = self.config.api_key
        if not api_key:
            raise ConfigurationError("API key not configured")
        return api_key

    async def forward(self, payload: Any) -> RelayResult:
        """
        Forward a parsed JSON payload to the upstream chat API.

        Args:
            payload: Parsed request body, sent as-is

        Returns:
            RelayResult with the upstream status code and JSON body

        Raises:
            ConfigurationError: If the credential is not configured
            UpstreamUnavailableError: If upstream is unreachable or answers
                with a body that is not JSON

        Example:
            >>> result = await service.forward({"message": "Hi", "model": "command-r-08-2024"})
            >>> result.status_code
            200
        """
        api_key = self.require_api_key()
        config = self.config

        try:
            async with httpx.AsyncClient(timeout=config.timeout_seconds) as client:
                response = await client.post(
                    config.upstream_url,
                    headers={
                        "Authorization": f"Bearer {api_key}",
                        "Content-Type": "application/json",
                        "Accept": "application/json",
                    },
                    json=payload,
                )
        except httpx.TransportError as e:
            logger.error(f"Upstream chat API unreachable: {type(e).__name__}: {e}")
            raise UpstreamUnavailableError(
                str(e) or "Upstream request failed",
                extra={"type": type(e).__name__},
            ) from e

        try:
            body = response.json()
        except ValueError:
            logger.warning(
                f"Upstream chat API returned non-JSON body (status {response.status_code})"
            )
            raise UpstreamUnavailableError(
                "Invalid response from upstream", upstream_status=response.status_code
            )

        logger.info(f"Relayed chat request, upstream status {response.status_code}")
        return RelayResult(status_code=response.status_code, body=body)
