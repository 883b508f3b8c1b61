"""
Chat Relay Routes

Relays chat requests to the upstream AI provider so the browser never
holds the provider credential:
- OPTIONS: CORS preflight
- GET: liveness check, never touches upstream
- POST: authenticated pass-through of the JSON body
"""

import logging
from datetime import datetime, timedelta, timezone

from quart import Blueprint, request
from quart_rate_limiter import rate_limit

from application.models.response_models import ChatStatusResponse
from application.routes.common.constants import (
    CHAT_ALLOWED_METHODS,
    RATE_LIMIT_CHAT,
    REJECTED_METHODS,
)
from application.routes.common.cors import preflight_response
from application.routes.common.rate_limiting import default_rate_limit_key
from application.routes.common.response import APIResponse
from application.routes.common.validation import read_json_body
from application.services.config_service import get_config_service
from application.services.relay_service import ChatRelayService
from common.exception import RelayError

logger = logging.getLogger(__name__)

chat_bp = Blueprint("chat", __name__)

# Initialize services
config_service = get_config_service()
relay_service = ChatRelayService(config_service)


@chat_bp.route("/chat", methods=["OPTIONS"])
async def chat_preflight():
    """Answer CORS preflight with 204 and no body."""
    return preflight_response()


@chat_bp.route("/chat", methods=["GET"])
async def chat_status():
    """
    Liveness check for the chat relay.

    Returns:
        200: {"status", "method", "hasApiKey", "timestamp"}
    """
    status = ChatStatusResponse(
        status="Chat API is running!",
        has_api_key=relay_service.has_api_key(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return APIResponse.success(status.model_dump(by_alias=True))


@chat_bp.route("/chat", methods=["POST"])
@rate_limit(RATE_LIMIT_CHAT, timedelta(minutes=1), key_function=default_rate_limit_key)
async def relay_chat():
    """
    Forward a chat request to the upstream provider.

    Request body:
        Any JSON; forwarded verbatim. For Cohere:
        {
            "message": "Hi",
            "chat_history": [{"role": "USER", "message": "..."}],
            "preamble": "...",
            "model": "command-r-08-2024"
        }

    Returns:
        <upstream status>: Upstream JSON body, unchanged
        400: {"error": "Invalid JSON in request body"}
        500: {"error": "API key not configured"} or {"error", "type"}
        502: {"error": "Invalid response from upstream", "status": <upstream status>}
    """
    try:
        # Missing credential is reported before the body is even read
        relay_service.require_api_key()

        payload = await read_json_body()
        result = await relay_service.forward(payload)

        return APIResponse.passthrough(result.body, result.status_code)

    except RelayError as e:
        if e.status_code >= 500:
            logger.error(f"Chat relay failed: {e.message}")
        return APIResponse.from_exception(e)
    except Exception as e:
        logger.exception(f"Error relaying chat request: {e}")
        return APIResponse.internal_error(str(e) or "Internal server error", type(e).__name__)


@chat_bp.route("/chat", methods=REJECTED_METHODS)
async def chat_method_not_allowed():
    """Reject methods the relay does not serve."""
    return APIResponse.method_not_allowed(request.method, CHAT_ALLOWED_METHODS)
