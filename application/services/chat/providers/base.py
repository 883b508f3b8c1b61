"""
Base interface for AI provider adapters.

An adapter owns everything provider specific: the request payload, the
auth header, where the generated text lives in the response and what
counts as a failure. Transport is left to the chat client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from application.services.chat.context import ConversationContext

DEFAULT_TEMPERATURE = 0.7


class ProviderId(str, Enum):
    """Supported upstream AI providers."""

    HUGGINGFACE = "huggingface"
    COHERE = "cohere"
    OPENAI = "openai"


class DispatchMode(str, Enum):
    """How the chat client reaches the AI provider."""

    DIRECT = "direct"
    RELAYED = "relayed"


@dataclass(frozen=True)
class ProviderConfig:
    """The provider chosen for a client's lifetime."""

    provider_id: ProviderId
    endpoint: str
    auth_mode: DispatchMode
    secret: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class ProviderRequest:
    """An outbound provider call, ready to be POSTed."""

    url: str
    headers: Dict[str, str]
    json: Dict[str, Any] = field(default_factory=dict)


class ProviderAdapter(ABC):
    """
    Abstract base class for provider adapters.

    Subclasses declare their direct endpoint and model cascade and
    implement payload building and response extraction.
    """

    provider_id: ProviderId
    display_name: str
    direct_endpoint: str
    models: Tuple[str, ...]

    def url_for(self, provider_config: ProviderConfig, model: str) -> str:
        """Return the URL to POST to for ``model``."""
        return provider_config.endpoint

    def headers_for(self, provider_config: ProviderConfig) -> Dict[str, str]:
        """
        Return request headers.

        The bearer token is only attached when the config carries a secret,
        which is the case in direct mode. The relay adds its own.
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if provider_config.secret:
            headers["Authorization"] = f"Bearer {provider_config.secret}"
        return headers

    def build_request(
        self, context: "ConversationContext", model: str, provider_config: ProviderConfig
    ) -> ProviderRequest:
        """Build the complete outbound request for one cascade attempt."""
        return ProviderRequest(
            url=self.url_for(provider_config, model),
            headers=self.headers_for(provider_config),
            json=self.build_payload(context, model),
        )

    @abstractmethod
    def build_payload(self, context: "ConversationContext", model: str) -> Dict[str, Any]:
        """Map the conversation context to the provider's JSON body."""
        pass

    @abstractmethod
    def extract_text(self, status_code: int, payload: Any) -> str:
        """
        Pull the generated text out of a provider response.

        Args:
            status_code: HTTP status of the response
            payload: Parsed JSON body, or None if the body was not JSON

        Returns:
            The generated text, stripped

        Raises:
            ProviderResponseError: On non-2xx status or malformed payload
        """
        pass


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300
