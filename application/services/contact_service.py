"""
Contact Service for contact-form submissions.

Verifies the bot-check token with Turnstile and notifies the site owner
through the Resend email API.
"""

import logging
from dataclasses import dataclass

import httpx

from application.models.request_models import ContactRequest
from application.services.config_service import ConfigService, ContactConfig
from common.exception import EmailDeliveryError, VerificationRejectedError
from common.utils.html_utils import escape_html, escape_multiline_html

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContactResult:
    """Outcome of a contact submission."""

    success: bool
    message: str
    delivered: bool


class ContactService:
    """
    Service for relaying contact-form submissions.

    Handles bot verification and email notification.
    """

    def __init__(self, config_service: ConfigService):
        """
        Initialize contact service.

        Args:
            config_service: Configuration service for Turnstile and Resend
        """
        self.config_service = config_service

    @property
    def config(self) -> ContactConfig:
        return self.config_service.get_contact_config()

    async def verify_token(self, token: str, remote_ip: str = None) -> None:
        """
        Verify a Turnstile token.

        Verification is skipped, with a warning, when no secret is configured.

        Args:
            token: Token issued to the browser by the challenge widget
            remote_ip: Submitter address forwarded to Turnstile (optional)

        Raises:
            VerificationRejectedError: If Turnstile does not report success
        """
        config = self.config
        if not config.verification_secret:
            logger.warning("TURNSTILE_SECRET_KEY not configured, skipping bot verification")
            return

        body = {"secret": config.verification_secret, "response": token}
        if remote_ip:
            body["remoteip"] = remote_ip

        async with httpx.AsyncClient(timeout=config.timeout_seconds) as client:
            response = await client.post(
                config.verify_url,
                headers={"Content-Type": "application/json"},
                json=body,
            )

        try:
            result = response.json()
        except ValueError:
            result = {}

        if not isinstance(result, dict) or not result.get("success"):
            error_codes = result.get("error-codes") if isinstance(result, dict) else None
            logger.warning(f"Turnstile verification failed: {error_codes}")
            raise VerificationRejectedError("Security verification failed")

    def build_email(self, request: ContactRequest) -> dict:
        """
        Build the Resend payload for a submission.

        Every user-supplied field is HTML-escaped in the HTML body.
        """
        config = self.config
        html = (
            "<h2>New Contact Form Submission</h2>\n"
            f"<p><strong>Name:</strong> {escape_html(request.name)}</p>\n"
            f"<p><strong>Email:</strong> {escape_html(request.email)}</p>\n"
            f"<p><strong>Subject:</strong> {escape_html(request.subject)}</p>\n"
            "<p><strong>Message:</strong></p>\n"
            f"<p>{escape_multiline_html(request.message)}</p>\n"
            "<hr>\n"
            f"<p><small>Sent from {escape_html(config.site_name)} contact form</small></p>\n"
        )
        text = (
            "New Contact Form Submission\n\n"
            f"Name: {request.name}\n"
            f"Email: {request.email}\n"
            f"Subject: {request.subject}\n\n"
            f"Message:\n{request.message}\n\n"
            "---\n"
            f"Sent from {config.site_name} contact form\n"
        )
        return {
            "from": config.sender,
            "to": [config.recipient],
            "subject": f"Contact Form: {request.subject}",
            "html": html,
            "text": text,
        }

    async def send_notification(self, request: ContactRequest) -> bool:
        """
        Email the submission to the site owner.

        Returns:
            True if the email was sent, False in degraded mode (no email
            credential configured, submission logged instead)

        Raises:
            EmailDeliveryError: If the email API rejects the request
        """
        config = self.config
        if not config.email_api_key:
            logger.info(
                "Contact form submission (email not configured): "
                f"name={request.name!r} email={request.email!r} "
                f"subject={request.subject!r} message={request.message!r}"
            )
            return False

        async with httpx.AsyncClient(timeout=config.timeout_seconds) as client:
            response = await client.post(
                config.email_api_url,
                headers={
                    "Authorization": f"Bearer {config.email_api_key}",
                    "Content-Type": "application/json",
                },
                json=self.build_email(request),
            )

        if not 200 <= response.status_code < 300:
            logger.error(f"Email sending failed ({response.status_code}): {response.text}")
            raise EmailDeliveryError("Failed to send email. Please try again later.")

        logger.info(f"Contact notification sent to {config.recipient}")
        return True

    async def submit(self, request: ContactRequest, remote_ip: str = None) -> ContactResult:
        """
        Verify and deliver a contact submission.

        Args:
            request: Validated contact request
            remote_ip: Submitter address (optional)

        Returns:
            ContactResult describing the outcome

        Raises:
            VerificationRejectedError: Bot verification failed
            EmailDeliveryError: Email API rejected the notification
        """
        await self.verify_token(request.verification_token, remote_ip)

        delivered = await self.send_notification(request)
        if not delivered:
            return ContactResult(
                success=True,
                message="Form submitted (email not configured)",
                delivered=False,
            )

        return ContactResult(
            success=True,
            message="Your message has been sent successfully!",
            delivered=True,
        )
