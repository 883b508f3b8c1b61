"""
Conversation context for AI provider calls.

Turns the session's message history into the bounded, provider-neutral
window each adapter maps into its own request shape.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Sequence, Tuple

from common.constants import CONVERSATION_WINDOW_SIZE

SYSTEM_PREAMBLE = """You are Nandu, a product designer specializing in human-computer interaction, user experience design, and AI-powered products. You're passionate about creating useful, usable, and desirable products.

Key facts about you:
- You've worked on projects for companies like LivePerson, First American Title, and Terradatum
- Your portfolio includes AI chat builders, real estate analytics platforms, and mobile applications
- Notable projects: AI Chat Analytics, AI Chat Builder, Aergo Real Estate Analytics Platform
- You specialize in UI/UX design, prototyping, user research, and work with tools like Figma
- You're interested in how AI can enhance the design process while maintaining a human-centered approach

Always respond in first person (I, me, my). Be conversational, helpful, and authentic. Keep responses concise (2-3 sentences typically)."""


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message. Immutable once created."""

    role: Role
    text: str
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class WindowMessage:
    """A history entry as sent to a provider."""

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class ConversationContext:
    """Everything an adapter needs to build a request."""

    window: Tuple[WindowMessage, ...]
    preamble: str
    message: str

    def window_dicts(self):
        return [entry.to_dict() for entry in self.window]


def build_window(
    history: Sequence[Message], window_size: int = CONVERSATION_WINDOW_SIZE
) -> Tuple[WindowMessage, ...]:
    """
    Map the last ``window_size`` messages of ``history`` to window entries.

    Args:
        history: Ordered message history, oldest first
        window_size: Maximum number of messages to keep

    Returns:
        Tuple of WindowMessage in history order; empty for empty history
    """
    if window_size < 0:
        raise ValueError(f"window_size must be >= 0, got {window_size}")
    if window_size == 0:
        return ()
    return tuple(
        WindowMessage(role=Role(message.role), content=message.text)
        for message in list(history)[-window_size:]
    )


def build_context(
    history: Sequence[Message],
    new_message: str,
    preamble: str = SYSTEM_PREAMBLE,
    window_size: int = CONVERSATION_WINDOW_SIZE,
) -> ConversationContext:
    """
    Build the context for one outbound AI call.

    Pure function: ``history`` is not modified.

    Args:
        history: Messages exchanged before ``new_message``
        new_message: The user's new message
        preamble: Persona instructions sent as the system prompt
        window_size: Number of prior messages to include

    Returns:
        ConversationContext

    Raises:
        ValueError: If ``new_message`` is empty after trimming

    Example:
        >>> context = build_context([], "  Hello  ")
        >>> context.message, context.window
        ('Hello', ())
    """
    message = (new_message or "").strip()
    if not message:
        raise ValueError("Message cannot be empty")

    return ConversationContext(
        window=build_window(history, window_size),
        preamble=preamble,
        message=message,
    )
