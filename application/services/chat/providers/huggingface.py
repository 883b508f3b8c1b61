"""Hugging Face Inference API adapter."""

import json
from typing import Any, Dict

from application.services.chat.context import ConversationContext, Role
from application.services.chat.providers.base import (
    DEFAULT_TEMPERATURE,
    DispatchMode,
    ProviderAdapter,
    ProviderConfig,
    ProviderId,
    is_success_status,
)
from common.constants import HUGGINGFACE_MODELS
from common.exception import ProviderResponseError

# Length of the raw-payload excerpt returned when no generated text is found
RAW_EXCERPT_LENGTH = 150


class HuggingFaceAdapter(ProviderAdapter):
    """
    Adapter for the Hugging Face Inference API.

    Conversational models there take a single prompt string, so the window
    is flattened into a speaker-labelled transcript.
    """

    provider_id = ProviderId.HUGGINGFACE
    display_name = "Hugging Face"
    direct_endpoint = "https://api-inference.huggingface.co/models"
    models = HUGGINGFACE_MODELS

    def __init__(
        self,
        persona_name: str = "Nandu",
        max_new_tokens: int = 100,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self.persona_name = persona_name
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature

    def url_for(self, provider_config: ProviderConfig, model: str) -> str:
        # Model id is part of the path on the direct API
        if provider_config.auth_mode is DispatchMode.DIRECT:
            return f"{provider_config.endpoint.rstrip('/')}/{model}"
        return provider_config.endpoint

    def build_prompt(self, context: ConversationContext) -> str:
        lines = [context.preamble, ""]
        for entry in context.window:
            speaker = "User" if entry.role is Role.USER else self.persona_name
            lines.append(f"{speaker}: {entry.content}")
        lines.append(f"User: {context.message}")
        lines.append(f"{self.persona_name}:")
        return "\n".join(lines)

    def build_payload(self, context: ConversationContext, model: str) -> Dict[str, Any]:
        return {
            "inputs": self.build_prompt(context),
            "parameters": {
                "max_new_tokens": self.max_new_tokens,
                "temperature": self.temperature,
                "return_full_text": False,
            },
        }

    def extract_text(self, status_code: int, payload: Any) -> str:
        if not is_success_status(status_code):
            raise ProviderResponseError(f"Hugging Face API error: {status_code}", status_code)

        if isinstance(payload, list) and payload and isinstance(payload[0], dict):
            generated = payload[0].get("generated_text")
            if generated:
                if not isinstance(generated, str):
                    raise ProviderResponseError(
                        "Unexpected response format from Hugging Face API", status_code
                    )
                return generated.strip()

        if isinstance(payload, dict) and payload.get("error"):
            raise ProviderResponseError(str(payload["error"]), status_code)

        if payload is None:
            raise ProviderResponseError(
                "Unexpected response format from Hugging Face API", status_code
            )

        return json.dumps(payload, separators=(",", ":"))[:RAW_EXCERPT_LENGTH]
