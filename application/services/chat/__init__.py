"""
Chat client package.

Builds conversation context, selects direct or relayed dispatch, adapts
requests per provider and falls back to keyword replies on failure.
"""

from application.services.chat.context import (
    SYSTEM_PREAMBLE,
    ConversationContext,
    Message,
    Role,
    build_context,
)
from application.services.chat.dispatch import (
    is_trusted_host,
    select_dispatch_mode,
    select_provider_config,
)
from application.services.chat.providers import DispatchMode, ProviderConfig, ProviderId
from application.services.chat.cascade import try_in_order
from application.services.chat.fallback import KeywordResponder
from application.services.chat.config import ChatClientConfig
from application.services.chat.client import (
    ChatClient,
    ChatReply,
    ChatSession,
    ReplySource,
    create_chat_client,
)

__all__ = [
    "SYSTEM_PREAMBLE",
    "ChatClient",
    "ChatClientConfig",
    "ChatReply",
    "ChatSession",
    "ConversationContext",
    "DispatchMode",
    "KeywordResponder",
    "Message",
    "ProviderConfig",
    "ProviderId",
    "ReplySource",
    "Role",
    "build_context",
    "create_chat_client",
    "is_trusted_host",
    "select_dispatch_mode",
    "select_provider_config",
    "try_in_order",
]
