from typing import Any, Union

from .base import ProviderAdapter, ProviderId
from .cohere import CohereAdapter
from .huggingface import HuggingFaceAdapter
from .openai import OpenAIAdapter

_ADAPTERS = {
    ProviderId.HUGGINGFACE: HuggingFaceAdapter,
    ProviderId.COHERE: CohereAdapter,
    ProviderId.OPENAI: OpenAIAdapter,
}


def create_provider_adapter(provider: Union[ProviderId, str], **config: Any) -> ProviderAdapter:
    """Create a provider adapter instance.

    Args:
        provider: Provider id ('huggingface', 'cohere', 'openai')
        **config: Adapter-specific options (max_tokens, temperature, ...)

    Returns:
        Initialized provider adapter

    Raises:
        ValueError: If provider is not supported

    Examples:
        >>> adapter = create_provider_adapter("cohere")
        >>> adapter.models[0]
        'command-r-08-2024'
    """
    try:
        provider_id = ProviderId(provider.lower())
    except ValueError:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(p.value for p in ProviderId)}"
        ) from None

    return _ADAPTERS[provider_id](**config)
