"""
Contact form client.

Validates a contact form locally and only then submits it to the relay's
/api/contact endpoint. Invalid forms never reach the network.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from common.constants import CONTACT_MESSAGE_MIN_LENGTH

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactForm(BaseModel):
    """Contact form as filled in by a visitor."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Visitor name")
    email: str = Field(..., description="Visitor email address")
    subject: str = Field(..., description="Message subject")
    message: str = Field(..., description="Message body")
    verification_token: str = Field(
        ..., alias="verificationToken", description="Bot-verification token"
    )

    @field_validator("name", "subject", "verification_token")
    @classmethod
    def required(cls, v: str, info: ValidationInfo) -> str:
        """Validate the field is not empty or whitespace."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        """Validate the email looks like an address."""
        v = (v or "").strip()
        if not v:
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email address")
        return v

    @field_validator("message")
    @classmethod
    def long_enough(cls, v: str) -> str:
        """Validate the trimmed message has the minimum length."""
        v = (v or "").strip()
        if not v:
            raise ValueError("Message is required")
        if len(v) < CONTACT_MESSAGE_MIN_LENGTH:
            raise ValueError(f"Message must be at least {CONTACT_MESSAGE_MIN_LENGTH} characters")
        return v

    def to_payload(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ContactSubmissionResult:
    """What the visitor should be told after submitting."""

    success: bool
    message: str


class ContactClient:
    """
    Client for the relay's contact endpoint.

    Example:
        >>> client = ContactClient("https://example.com/api/contact")
        >>> result = await client.submit({"name": "Ada", ...})
    """

    def __init__(self, endpoint: str, timeout: float = 10.0):
        """
        Initialize contact client.

        Args:
            endpoint: Full URL of the relay's /api/contact endpoint
            timeout: Request timeout in seconds
        """
        self.endpoint = endpoint
        self.timeout = timeout

    async def submit(self, form: Union[ContactForm, Dict[str, Any]]) -> ContactSubmissionResult:
        """
        Validate and submit a contact form.

        Args:
            form: ContactForm or raw form data

        Returns:
            ContactSubmissionResult

        Raises:
            pydantic.ValidationError: If the form is invalid (no request is made)
        """
        if not isinstance(form, ContactForm):
            form = ContactForm.model_validate(form)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    headers={"Content-Type": "application/json"},
                    json=form.to_payload(),
                )
        except httpx.TransportError as e:
            logger.error(f"Form submission error: {e}")
            return ContactSubmissionResult(
                success=False,
                message="Network error. Please check your connection and try again.",
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if 200 <= response.status_code < 300 and data.get("success"):
            return ContactSubmissionResult(
                success=True,
                message="Thank you! Your message has been sent successfully.",
            )

        return ContactSubmissionResult(
            success=False,
            message=data.get("error") or "Something went wrong. Please try again.",
        )
