"""
Validation utilities for route handlers.

Provides JSON body parsing and a decorator for request validation using
Pydantic models.
"""

import json
import logging
from functools import wraps
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError
from quart import request

from application.routes.common.response import APIResponse
from common.exception import RequestValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


async def read_json_body() -> Any:
    """
    Parse the request body as JSON regardless of Content-Type.

    Returns:
        The parsed JSON value

    Raises:
        RequestValidationError: If the body is empty or not valid JSON
    """
    raw = await request.get_data(as_text=True)
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise RequestValidationError("Invalid JSON in request body") from None


def validate_json(model: Type[T]):
    """
    Decorator to validate JSON request body against Pydantic model.

    Parses the body, validates it, and makes the result available via the
    request.validated_data attribute.

    Args:
        model: Pydantic model class for validation

    Returns:
        Decorated function with automatic validation

    Example:
        >>> @validate_json(ContactRequest)
        >>> async def submit_contact():
        >>>     data = request.validated_data

    Malformed JSON and validation errors are both returned as 400 Bad
    Request, the latter with per-field details.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                json_data = await read_json_body()
            except RequestValidationError as e:
                logger.warning(f"Rejected body in {func.__name__}: {e.message}")
                return APIResponse.from_exception(e)

            try:
                validated = model.model_validate(json_data)
            except ValidationError as e:
                errors = []
                for error in e.errors():
                    field = " -> ".join(str(loc) for loc in error["loc"])
                    errors.append(
                        {"field": field, "message": error["msg"], "type": error["type"]}
                    )

                logger.warning(f"Validation error in {func.__name__}: {errors}")

                return APIResponse.error(
                    "Validation failed", 400, details={"errors": errors}
                )

            request.validated_data = validated
            return await func(*args, **kwargs)

        return wrapper

    return decorator
