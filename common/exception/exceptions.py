"""
Exception taxonomy for the relay service and the chat client.

Every relay-side error carries the HTTP status it maps to and any extra
fields that belong in the JSON error envelope.
"""

from typing import Any, Dict, Optional


class RelayError(Exception):
    """Base class for errors that map onto an HTTP error envelope."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra: Dict[str, Any] = dict(extra or {})

    def to_envelope(self) -> Dict[str, Any]:
        """Return the JSON body for this error."""
        envelope: Dict[str, Any] = {"error": self.message}
        envelope.update(self.extra)
        return envelope


class ConfigurationError(RelayError):
    """A server-held secret or setting is missing. Not retryable."""

    status_code = 500


class RequestValidationError(RelayError):
    """The caller sent malformed JSON or left out a required field."""

    status_code = 400


class VerificationRejectedError(RelayError):
    """The bot-verification service rejected the submitted token."""

    status_code = 403


class UpstreamUnavailableError(RelayError):
    """Upstream could not be reached or answered with something other than JSON."""

    status_code = 502

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        envelope_extra = dict(extra or {})
        if upstream_status is not None:
            envelope_extra["status"] = upstream_status
        super().__init__(message, extra=envelope_extra)
        self.upstream_status = upstream_status


class EmailDeliveryError(RelayError):
    """The transactional email API refused the notification."""

    status_code = 500


class ProviderResponseError(Exception):
    """An AI provider answered with an error status or an unexpected payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ModelExhaustedError(Exception):
    """Every model in a cascade failed."""


class ConversationBusyError(Exception):
    """A chat session already has a reply in flight."""
