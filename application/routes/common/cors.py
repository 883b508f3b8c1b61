"""
CORS helpers.

Every relay response, errors included, echoes the caller's Origin and
allows a day-long preflight cache.
"""

from typing import Dict, Optional

from quart import Response, request

from application.routes.common.constants import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_MAX_AGE_SECONDS,
)


def build_cors_headers(origin: Optional[str]) -> Dict[str, str]:
    """
    Build CORS headers for a response.

    Args:
        origin: Value of the request's Origin header, if any

    Returns:
        dict: Header name to value

    Example:
        >>> build_cors_headers("https://example.com")["Access-Control-Allow-Origin"]
        'https://example.com'
    """
    return {
        "Access-Control-Allow-Origin": origin or "*",
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Max-Age": str(CORS_MAX_AGE_SECONDS),
    }


async def apply_cors(response: Response) -> Response:
    """after_request hook attaching CORS headers to every response."""
    origin = request.headers.get("Origin")
    response.headers.update(build_cors_headers(origin))
    if origin:
        response.vary.add("Origin")
    return response


def preflight_response() -> Response:
    """Empty 204 response for OPTIONS preflight requests."""
    return Response("", status=204)
