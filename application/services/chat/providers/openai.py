"""OpenAI chat completions adapter."""

from typing import Any, Dict

from application.services.chat.context import ConversationContext
from application.services.chat.providers.base import (
    DEFAULT_TEMPERATURE,
    ProviderAdapter,
    ProviderId,
    is_success_status,
)
from common.constants import OPENAI_MODELS
from common.exception import ProviderResponseError


class OpenAIAdapter(ProviderAdapter):
    """Adapter for the OpenAI chat completions API."""

    provider_id = ProviderId.OPENAI
    display_name = "OpenAI"
    direct_endpoint = "https://api.openai.com/v1/chat/completions"
    models = OPENAI_MODELS

    def __init__(self, max_tokens: int = 150, temperature: float = DEFAULT_TEMPERATURE):
        self.max_tokens = max_tokens
        self.temperature = temperature

    def build_payload(self, context: ConversationContext, model: str) -> Dict[str, Any]:
        messages = [{"role": "system", "content": context.preamble}]
        messages.extend(context.window_dicts())
        messages.append({"role": "user", "content": context.message})
        return {
            "model": model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def extract_text(self, status_code: int, payload: Any) -> str:
        if not is_success_status(status_code):
            raise ProviderResponseError(f"OpenAI API error: {status_code}", status_code)

        try:
            content = payload["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise ProviderResponseError(
                "Unexpected response format from OpenAI API", status_code
            )
        if not isinstance(content, str):
            raise ProviderResponseError(
                "Unexpected response format from OpenAI API", status_code
            )
        return content.strip()
