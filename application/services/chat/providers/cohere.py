"""Cohere chat adapter."""

from typing import Any, Dict

from application.services.chat.context import ConversationContext, Role
from application.services.chat.providers.base import (
    DEFAULT_TEMPERATURE,
    ProviderAdapter,
    ProviderId,
    is_success_status,
)
from common.constants import COHERE_MODELS
from common.exception import ProviderResponseError

COHERE_ROLES = {Role.USER: "USER", Role.ASSISTANT: "CHATBOT"}


class CohereAdapter(ProviderAdapter):
    """Adapter for the Cohere v1 chat API, the provider behind the relay."""

    provider_id = ProviderId.COHERE
    display_name = "Cohere"
    direct_endpoint = "https://api.cohere.ai/v1/chat"
    models = COHERE_MODELS

    def __init__(self, max_tokens: int = 150, temperature: float = DEFAULT_TEMPERATURE):
        self.max_tokens = max_tokens
        self.temperature = temperature

    def build_payload(self, context: ConversationContext, model: str) -> Dict[str, Any]:
        return {
            "message": context.message,
            "chat_history": [
                {"role": COHERE_ROLES[entry.role], "message": entry.content}
                for entry in context.window
            ],
            "preamble": context.preamble,
            "model": model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def extract_text(self, status_code: int, payload: Any) -> str:
        if not is_success_status(status_code):
            detail = payload.get("message") if isinstance(payload, dict) else None
            raise ProviderResponseError(
                f"Cohere API error: {detail or f'HTTP {status_code}'}", status_code
            )

        text = payload.get("text") if isinstance(payload, dict) else None
        if not text or not isinstance(text, str):
            raise ProviderResponseError(
                "Unexpected response format from Cohere API", status_code
            )
        return text.strip()
