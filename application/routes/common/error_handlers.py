"""
Centralized error handling.

Turns relay errors, routing errors and uncaught exceptions into JSON
envelopes. Stack traces are logged, never returned.
"""

import logging

from quart import Quart, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from application.routes.common.constants import REJECTED_METHODS
from application.routes.common.response import APIResponse
from common.exception import RelayError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Quart) -> None:
    """
    Register centralized error handlers for the application.

    Handles:
    - RelayError → its own status and envelope
    - NotFound → 404 {"error": "Not found"}
    - MethodNotAllowed → 405 with allowed methods
    - HTTPException (Werkzeug) → Appropriate status
    - Exception (Generic) → 500 {"error": message, "type": kind}

    Args:
        app: Quart application instance

    Example:
        >>> from quart import Quart
        >>> app = Quart(__name__)
        >>> register_error_handlers(app)
    """

    @app.errorhandler(RelayError)
    async def handle_relay_error(error: RelayError):
        """Return the envelope carried by the error."""
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message}")
        else:
            logger.warning(f"{type(error).__name__}: {error.message}")
        return APIResponse.from_exception(error)

    @app.errorhandler(NotFound)
    async def handle_not_found(error: NotFound):
        """Return standardized 404 response."""
        return APIResponse.not_found()

    @app.errorhandler(MethodNotAllowed)
    async def handle_method_not_allowed(error: MethodNotAllowed):
        """Return standardized 405 response naming the allowed methods."""
        allowed = sorted(
            m for m in (error.valid_methods or []) if m not in ("HEAD", *REJECTED_METHODS)
        )
        if allowed == ["OPTIONS"]:
            # Only the catch-all preflight route matched the path
            return APIResponse.not_found()
        return APIResponse.method_not_allowed(request.method, allowed)

    @app.errorhandler(HTTPException)
    async def handle_http_exception(error: HTTPException):
        """Preserve the original HTTP status code."""
        logger.info(f"HTTP exception: {error.code} - {error.description}")
        return APIResponse.error(error.name, error.code or 500)

    @app.errorhandler(Exception)
    async def handle_generic_exception(error: Exception):
        """
        Handle all uncaught exceptions.

        Logs the stack trace; the response carries only message and kind.
        """
        logger.exception(f"Unhandled exception: {error}")
        return APIResponse.internal_error(
            str(error) or "Internal server error", type(error).__name__
        )
