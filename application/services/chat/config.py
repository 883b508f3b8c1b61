"""
Chat client configuration.

Built once at startup and handed to the client factory; the client never
reads credentials from the environment on its own.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence

from application.services.chat.context import SYSTEM_PREAMBLE
from application.services.chat.dispatch import is_trusted_host
from application.services.chat.providers.base import ProviderId
from common.constants import CHAT_REQUEST_TIMEOUT_SECONDS, CONVERSATION_WINDOW_SIZE

DEFAULT_RELAY_URL = "http://127.0.0.1:8000/api/chat"

# Environment variable holding each provider's credential
CREDENTIAL_ENV_VARS = {
    ProviderId.HUGGINGFACE: "HUGGINGFACE_API_KEY",
    ProviderId.COHERE: "COHERE_API_KEY",
    ProviderId.OPENAI: "OPENAI_API_KEY",
}


@dataclass(frozen=True)
class ChatClientConfig:
    """
    Explicit configuration for a ChatClient.

    Attributes:
        credentials: Locally held provider credentials
        relay_url: Relay endpoint used in relayed mode
        origin_host: Host the client runs on; loopback/empty counts as trusted
        ai_enabled: When False every reply comes from the keyword responder
        request_timeout: Per-attempt timeout for provider calls (seconds)
        window_size: Number of prior messages sent as context
        preamble: Persona system prompt
        models: Optional per-provider override of the model cascade
    """

    credentials: Mapping[ProviderId, str] = field(default_factory=dict, repr=False)
    relay_url: str = DEFAULT_RELAY_URL
    origin_host: Optional[str] = None
    ai_enabled: bool = True
    request_timeout: float = CHAT_REQUEST_TIMEOUT_SECONDS
    window_size: int = CONVERSATION_WINDOW_SIZE
    preamble: str = SYSTEM_PREAMBLE
    models: Mapping[ProviderId, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Validate and normalize fields."""
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.window_size < 0:
            raise ValueError("window_size must be >= 0")
        normalized = {ProviderId(key): value for key, value in self.credentials.items() if value}
        object.__setattr__(self, "credentials", normalized)

    @property
    def trusted_context(self) -> bool:
        return is_trusted_host(self.origin_host)

    def models_for(self, provider_id: ProviderId) -> Optional[Sequence[str]]:
        return self.models.get(provider_id)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ChatClientConfig":
        """
        Build a config from environment variables.

        Reads HUGGINGFACE_API_KEY, COHERE_API_KEY, OPENAI_API_KEY,
        CHAT_RELAY_URL and CHAT_ORIGIN_HOST. Keyword overrides win.
        """
        environ = environ if environ is not None else os.environ
        credentials: Dict[ProviderId, str] = {}
        for provider_id, var in CREDENTIAL_ENV_VARS.items():
            value = (environ.get(var) or "").strip()
            if value:
                credentials[provider_id] = value

        values = {
            "credentials": credentials,
            "relay_url": (environ.get("CHAT_RELAY_URL") or "").strip() or DEFAULT_RELAY_URL,
            "origin_host": environ.get("CHAT_ORIGIN_HOST"),
        }
        values.update(overrides)
        return cls(**values)
