"""
Chat client: context, dispatch, provider cascade and keyword fallback.

One client is created per configuration; each conversation gets its own
ChatSession holding the message history.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import httpx

from application.services.chat.cascade import try_in_order
from application.services.chat.config import ChatClientConfig
from application.services.chat.context import (
    ConversationContext,
    Message,
    Role,
    build_context,
)
from application.services.chat.dispatch import select_provider_config
from application.services.chat.fallback import KeywordResponder
from application.services.chat.providers import (
    ProviderAdapter,
    ProviderConfig,
    ProviderId,
    create_provider_adapter,
)
from common.exception import ConversationBusyError

logger = logging.getLogger(__name__)


class ReplySource(str, Enum):
    """Where a reply came from."""

    AI = "ai"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ChatReply:
    """Assistant reply returned to the caller."""

    text: str
    source: ReplySource
    model: Optional[str] = None


class ChatSession:
    """
    Message history for one conversation.

    Allows a single reply in flight at a time.
    """

    def __init__(self):
        self._history: List[Message] = []
        self._pending = False

    @property
    def history(self) -> Tuple[Message, ...]:
        return tuple(self._history)

    @property
    def is_pending(self) -> bool:
        return self._pending

    def append(self, message: Message) -> None:
        self._history.append(message)

    def reset(self) -> None:
        """Clear the history."""
        if self._pending:
            raise ConversationBusyError("Cannot reset while a reply is pending")
        self._history.clear()

    @contextmanager
    def reply_guard(self):
        """Mark the session busy for the duration of one reply."""
        if self._pending:
            raise ConversationBusyError("A reply is already in progress for this conversation")
        self._pending = True
        try:
            yield
        finally:
            self._pending = False


class ChatClient:
    """
    Chat client for the portfolio assistant.

    The provider, endpoint and dispatch mode are selected once here and
    stay fixed for the client's lifetime.
    """

    def __init__(
        self,
        config: ChatClientConfig,
        responder: Optional[KeywordResponder] = None,
    ):
        """
        Initialize chat client.

        Args:
            config: Explicit client configuration
            responder: Keyword responder used for fallback replies
        """
        self.config = config
        self.responder = responder or KeywordResponder()
        self.provider_config: ProviderConfig = select_provider_config(
            credentials=config.credentials,
            trusted_context=config.trusted_context,
            relay_url=config.relay_url,
            direct_endpoints={
                provider_id: create_provider_adapter(provider_id).direct_endpoint
                for provider_id in ProviderId
            },
        )
        self.adapter: ProviderAdapter = create_provider_adapter(self.provider_config.provider_id)
        self.models: Tuple[str, ...] = tuple(
            config.models_for(self.provider_config.provider_id) or self.adapter.models
        )

    def new_session(self) -> ChatSession:
        return ChatSession()

    async def _call_model(self, context: ConversationContext, model: str) -> Tuple[str, str]:
        """Run one provider call for ``model`` and return (text, model)."""
        request = self.adapter.build_request(context, model, self.provider_config)
        async with httpx.AsyncClient(timeout=self.config.request_timeout) as client:
            response = await client.post(request.url, headers=request.headers, json=request.json)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        return self.adapter.extract_text(response.status_code, payload), model

    async def generate(self, context: ConversationContext) -> Tuple[str, str]:
        """
        Generate an AI reply, walking the model cascade.

        Returns:
            Tuple of (reply text, model that produced it)

        Raises:
            Exception: The last model's error if every model failed
        """
        logger.debug(
            f"Calling {self.adapter.display_name} ({self.provider_config.auth_mode.value}) "
            f"with models {list(self.models)}"
        )
        return await try_in_order(
            self.models, lambda model: self._call_model(context, model)
        )

    async def send(self, session: ChatSession, text: str) -> ChatReply:
        """
        Send a user message and return the assistant reply.

        AI failures never surface here; the keyword responder answers
        instead.

        Args:
            session: Conversation to append to
            text: User message

        Returns:
            ChatReply

        Raises:
            ValueError: If ``text`` is empty after trimming
            ConversationBusyError: If the session already has a reply pending
        """
        with session.reply_guard():
            context = build_context(
                session.history,
                text,
                preamble=self.config.preamble,
                window_size=self.config.window_size,
            )
            session.append(Message(role=Role.USER, text=context.message))

            if not self.config.ai_enabled:
                reply = ChatReply(
                    text=self.responder.respond(context.message), source=ReplySource.FALLBACK
                )
            else:
                try:
                    reply_text, model = await self.generate(context)
                    reply = ChatReply(text=reply_text, source=ReplySource.AI, model=model)
                except Exception as e:
                    logger.warning(
                        f"{self.adapter.display_name} API error, "
                        f"falling back to keyword-based responses: {e}"
                    )
                    reply = ChatReply(
                        text=self.responder.respond(context.message),
                        source=ReplySource.FALLBACK,
                    )

            session.append(Message(role=Role.ASSISTANT, text=reply.text))
            return reply


def create_chat_client(
    config: Optional[ChatClientConfig] = None, responder: Optional[KeywordResponder] = None
) -> ChatClient:
    """
    Create a chat client.

    Args:
        config: Client configuration (default: built from the environment)
        responder: Keyword responder for fallback replies

    Returns:
        ChatClient

    Example:
        >>> client = create_chat_client(ChatClientConfig(origin_host="example.com"))
        >>> client.provider_config.auth_mode.value
        'relayed'
    """
    return ChatClient(config or ChatClientConfig.from_env(), responder=responder)
