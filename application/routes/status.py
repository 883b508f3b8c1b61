"""
Status Routes

Root liveness endpoint and catch-all CORS preflight.
"""

from datetime import datetime, timezone

from quart import Blueprint, request

from application.models.response_models import RelayStatusResponse
from application.routes.common.constants import API_ENDPOINTS
from application.routes.common.cors import preflight_response
from application.routes.common.response import APIResponse

status_bp = Blueprint("status", __name__)


@status_bp.route("/", methods=["OPTIONS"])
@status_bp.route("/<path:path>", methods=["OPTIONS"])
async def handle_options(path: str = ""):
    """Handle CORS preflight OPTIONS requests for any path."""
    return preflight_response()


@status_bp.route("/", methods=["GET"])
async def relay_status():
    """
    Report that the relay is up and list its endpoints.

    Returns:
        200: {"status", "method", "url", "endpoints", "timestamp"}
    """
    status = RelayStatusResponse(
        status="Relay is running!",
        url=request.url,
        endpoints=API_ENDPOINTS,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return APIResponse.success(status.model_dump())
