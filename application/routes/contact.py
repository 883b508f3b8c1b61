"""
Contact Form Routes

Accepts contact-form submissions, verifies the bot-check token and
notifies the site owner by email.
"""

import logging
from datetime import timedelta

from quart import Blueprint, request
from quart_rate_limiter import rate_limit

from application.models.request_models import ContactRequest
from application.models.response_models import ContactResponse
from application.routes.common.constants import (
    CONTACT_ALLOWED_METHODS,
    RATE_LIMIT_CONTACT,
    REJECTED_METHODS,
)
from application.routes.common.cors import preflight_response
from application.routes.common.rate_limiting import client_ip, default_rate_limit_key
from application.routes.common.response import APIResponse
from application.routes.common.validation import validate_json
from application.services.config_service import get_config_service
from application.services.contact_service import ContactService
from common.exception import RelayError

logger = logging.getLogger(__name__)

contact_bp = Blueprint("contact", __name__)

# Initialize services
config_service = get_config_service()
contact_service = ContactService(config_service)


@contact_bp.route("/contact", methods=["OPTIONS"])
async def contact_preflight():
    """Answer CORS preflight with 204 and no body."""
    return preflight_response()


@contact_bp.route("/contact", methods=["POST"])
@rate_limit(RATE_LIMIT_CONTACT, timedelta(minutes=10), key_function=default_rate_limit_key)
@validate_json(ContactRequest)
async def submit_contact():
    """
    Submit the contact form.

    Request body:
        {
            "name": "Ada",
            "email": "ada@example.com",
            "subject": "Hello",
            "message": "I enjoyed your portfolio.",
            "verificationToken": "<turnstile token>"
        }

    Returns:
        200: {"success": true, "message": "..."}
        400: Invalid JSON, missing fields or missing verification token
        403: {"error": "Security verification failed"}
        500: {"error": "Failed to send email. Please try again later."}
    """
    data: ContactRequest = request.validated_data

    missing = data.missing_fields()
    if missing:
        return APIResponse.error("Missing required fields", 400, details={"missing": missing})

    if not data.verification_token:
        return APIResponse.error("Security verification required", 400)

    try:
        result = await contact_service.submit(data, remote_ip=client_ip())
        response = ContactResponse(success=result.success, message=result.message)
        return APIResponse.success(response.model_dump())

    except RelayError as e:
        return APIResponse.from_exception(e)
    except Exception as e:
        logger.exception(f"Contact form error: {e}")
        return APIResponse.internal_error(str(e) or "Internal server error", type(e).__name__)


@contact_bp.route("/contact", methods=["GET", *REJECTED_METHODS])
async def contact_method_not_allowed():
    """Reject methods other than POST and OPTIONS."""
    return APIResponse.method_not_allowed(request.method, CONTACT_ALLOWED_METHODS)
