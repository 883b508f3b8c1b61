"""
Dispatch mode and provider selection for the chat client.

The choice is made once, when the client is constructed, from the
credentials it was given and whether it runs in a trusted local context.
"""

import logging
from typing import Mapping, Optional

from application.services.chat.providers.base import DispatchMode, ProviderConfig, ProviderId

logger = logging.getLogger(__name__)

TRUSTED_HOSTS = frozenset({"localhost", "127.0.0.1", "::1", ""})

# Credentials are checked in this order; free tiers first
PROVIDER_PRIORITY = (ProviderId.HUGGINGFACE, ProviderId.COHERE, ProviderId.OPENAI)


def is_trusted_host(hostname: Optional[str]) -> bool:
    """Return True for loopback or empty hosts (local development)."""
    if hostname is None:
        return True
    return hostname.strip().lower().strip("[]") in TRUSTED_HOSTS


def select_dispatch_mode(has_credential: bool, trusted_context: bool) -> DispatchMode:
    """
    Decide between calling the provider directly and going through the relay.

    Direct mode needs both a local credential and a trusted context; every
    other combination is relayed.

    Example:
        >>> select_dispatch_mode(True, False)
        <DispatchMode.RELAYED: 'relayed'>
    """
    if has_credential and trusted_context:
        return DispatchMode.DIRECT
    return DispatchMode.RELAYED


def first_credential(credentials: Mapping[ProviderId, str]) -> Optional[ProviderId]:
    """Return the highest-priority provider that has a non-empty credential."""
    for provider_id in PROVIDER_PRIORITY:
        if credentials.get(provider_id):
            return provider_id
    return None


def select_provider_config(
    credentials: Mapping[ProviderId, str],
    trusted_context: bool,
    relay_url: str,
    direct_endpoints: Mapping[ProviderId, str],
    relay_provider: ProviderId = ProviderId.COHERE,
) -> ProviderConfig:
    """
    Select the provider, endpoint and auth mode for a client.

    Args:
        credentials: Locally held credentials keyed by provider
        trusted_context: Whether the client runs in a trusted/local context
        relay_url: URL of the relay endpoint
        direct_endpoints: Direct API endpoint per provider
        relay_provider: Provider the relay forwards to

    Returns:
        ProviderConfig
    """
    provider_id = first_credential(credentials)
    mode = select_dispatch_mode(provider_id is not None, trusted_context)

    if mode is DispatchMode.DIRECT:
        selected = ProviderConfig(
            provider_id=provider_id,
            endpoint=direct_endpoints[provider_id],
            auth_mode=mode,
            secret=credentials[provider_id],
        )
    else:
        selected = ProviderConfig(
            provider_id=relay_provider,
            endpoint=relay_url,
            auth_mode=mode,
        )

    logger.info(
        f"Selected chat provider {selected.provider_id.value} ({selected.auth_mode.value})"
    )
    return selected
