"""
Request models for the relay API.

Defines the request DTOs used by the contact endpoint. The chat relay
forwards arbitrary JSON and has no request model.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

CONTACT_REQUIRED_FIELDS = ("name", "email", "subject", "message")


class ContactRequest(BaseModel):
    """
    Request model for contact-form submissions.

    Fields are optional at parse time so the route can report which ones
    are missing; blank strings count as missing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, description="Submitter name")
    email: Optional[str] = Field(default=None, description="Submitter email address")
    subject: Optional[str] = Field(default=None, description="Message subject")
    message: Optional[str] = Field(default=None, description="Message body")
    verification_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("verificationToken", "turnstileToken", "verification_token"),
        description="Bot-verification token issued by the challenge widget",
    )

    @field_validator("name", "email", "subject", "message", "verification_token")
    @classmethod
    def blank_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat whitespace-only values as absent."""
        if v is None or not v.strip():
            return None
        return v

    def missing_fields(self) -> List[str]:
        """Return the names of required form fields that were not supplied."""
        return [field for field in CONTACT_REQUIRED_FIELDS if getattr(self, field) is None]
