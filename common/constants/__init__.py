"""Service and business logic constants."""

# ============================================================================
# Conversation Configuration
# ============================================================================

# Number of prior messages sent to the AI provider as context
CONVERSATION_WINDOW_SIZE = 6

# Default per-attempt timeout for AI provider calls (seconds)
CHAT_REQUEST_TIMEOUT_SECONDS = 10.0

# ============================================================================
# Model Cascades
# ============================================================================

# Ordered model identifiers per provider; earlier entries are tried first
COHERE_MODELS = ("command-r-08-2024", "command-r-plus-08-2024", "command-a-03-2025")
HUGGINGFACE_MODELS = ("microsoft/DialoGPT-medium",)
OPENAI_MODELS = ("gpt-3.5-turbo",)

# ============================================================================
# Contact Form
# ============================================================================

# Minimum message length after trimming, enforced before submission
CONTACT_MESSAGE_MIN_LENGTH = 10

__all__ = [
    'CHAT_REQUEST_TIMEOUT_SECONDS',
    'COHERE_MODELS',
    'CONTACT_MESSAGE_MIN_LENGTH',
    'CONVERSATION_WINDOW_SIZE',
    'HUGGINGFACE_MODELS',
    'OPENAI_MODELS',
]
