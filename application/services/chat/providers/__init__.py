"""AI provider adapters for the chat client."""

from .base import DispatchMode, ProviderAdapter, ProviderConfig, ProviderId, ProviderRequest
from .cohere import CohereAdapter
from .factory import create_provider_adapter
from .huggingface import HuggingFaceAdapter
from .openai import OpenAIAdapter

__all__ = [
    "CohereAdapter",
    "DispatchMode",
    "HuggingFaceAdapter",
    "OpenAIAdapter",
    "ProviderAdapter",
    "ProviderConfig",
    "ProviderId",
    "ProviderRequest",
    "create_provider_adapter",
]
