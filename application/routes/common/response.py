"""
Response utilities for standardized API responses.

Provides consistent response formatting across all routes.
"""

from typing import Any, List, Tuple

from quart import Response, jsonify

from application.models.response_models import ErrorResponse
from common.exception import RelayError


class APIResponse:
    """
    Standardized API response helper.

    Every error body carries at least {"error": message}.
    """

    @staticmethod
    def success(data: Any, status: int = 200) -> Tuple[Response, int]:
        """
        Create a successful response.

        Args:
            data: Response data (dict, list, or serializable object)
            status: HTTP status code (default: 200)

        Returns:
            tuple: (Response object, status code)

        Example:
            >>> return APIResponse.success({"success": True})
        """
        return jsonify(data), status

    @staticmethod
    def passthrough(data: Any, status: int) -> Tuple[Response, int]:
        """
        Return an upstream JSON body with the upstream status, unchanged.

        Args:
            data: Parsed upstream JSON (any JSON value)
            status: Upstream HTTP status code

        Returns:
            tuple: (Response object, status code)
        """
        return jsonify(data), status

    @staticmethod
    def error(message: str, status: int = 400, **extra: Any) -> Tuple[Response, int]:
        """
        Create an error response.

        Args:
            message: Error message
            status: HTTP status code (default: 400)
            **extra: Additional envelope fields (status, type, details, ...)

        Returns:
            tuple: (Response object, status code)

        Example:
            >>> return APIResponse.error("Invalid JSON in request body", 400)
            >>> return APIResponse.error("Invalid response from upstream", 502, status=503)
        """
        error_data = ErrorResponse(
            error=message, **{key: value for key, value in extra.items() if value is not None}
        )
        return jsonify(error_data.model_dump()), status

    @staticmethod
    def from_exception(error: RelayError) -> Tuple[Response, int]:
        """Create an error response from a RelayError."""
        return jsonify(error.to_envelope()), error.status_code

    @staticmethod
    def not_found(message: str = "Not found") -> Tuple[Response, int]:
        """
        Create a 404 Not Found response.

        Example:
            >>> return APIResponse.not_found()
        """
        return APIResponse.error(message, 404)

    @staticmethod
    def method_not_allowed(method: str, allowed: List[str]) -> Tuple[Response, int]:
        """
        Create a 405 response naming the allowed methods.

        Example:
            >>> return APIResponse.method_not_allowed("PUT", ["GET", "POST", "OPTIONS"])
        """
        return APIResponse.error(
            "Method not allowed", 405, method=method, allowedMethods=list(allowed)
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error", error_type: str = None
    ) -> Tuple[Response, int]:
        """
        Create a 500 Internal Server Error response.

        Args:
            message: Error message
            error_type: Exception class name, reported as "type"

        Example:
            >>> return APIResponse.internal_error(str(e), type(e).__name__)
        """
        return APIResponse.error(message, 500, type=error_type)
