"""Error taxonomy shared by the relay routes and the chat client."""

from common.exception.exceptions import (
    ConfigurationError,
    ConversationBusyError,
    EmailDeliveryError,
    ModelExhaustedError,
    ProviderResponseError,
    RelayError,
    RequestValidationError,
    UpstreamUnavailableError,
    VerificationRejectedError,
)

__all__ = [
    "ConfigurationError",
    "ConversationBusyError",
    "EmailDeliveryError",
    "ModelExhaustedError",
    "ProviderResponseError",
    "RelayError",
    "RequestValidationError",
    "UpstreamUnavailableError",
    "VerificationRejectedError",
]
