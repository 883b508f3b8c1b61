"""Tests for the contact form client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from pydantic import ValidationError

from application.services.contact_client import ContactClient, ContactForm

FORM = {
    "name": "Ada",
    "email": "ada@example.com",
    "subject": "Hello",
    "message": "0123456789",
    "verificationToken": "tok",
}


class TestContactForm:
    """Validation rules of ContactForm."""

    def test_ten_character_message_passes(self):
        form = ContactForm.model_validate({**FORM, "message": "  0123456789  "})

        assert form.message == "0123456789"

    def test_nine_character_message_fails(self):
        with pytest.raises(ValidationError, match="at least 10 characters"):
            ContactForm.model_validate({**FORM, "message": "012345678"})

    @pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.d", "@c.d"])
    def test_invalid_email_fails(self, email):
        with pytest.raises(ValidationError):
            ContactForm.model_validate({**FORM, "email": email})

    @pytest.mark.parametrize("field", ["name", "subject", "verificationToken"])
    def test_blank_required_field_fails(self, field):
        with pytest.raises(ValidationError):
            ContactForm.model_validate({**FORM, field: "   "})

    def test_payload_uses_wire_names(self):
        payload = ContactForm.model_validate(FORM).to_payload()

        assert payload["verificationToken"] == "tok"
        assert "verification_token" not in payload


class TestContactClient:
    """Test ContactClient.submit."""

    @pytest.mark.asyncio
    async def test_invalid_form_makes_no_request(self):
        client = ContactClient("https://relay.test/api/contact")

        with patch("application.services.contact_client.httpx.AsyncClient") as mock_client_class:
            with pytest.raises(ValidationError):
                await client.submit({**FORM, "message": "short"})

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self, make_response):
        client = ContactClient("https://relay.test/api/contact")

        with patch("application.services.contact_client.httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(
                return_value=make_response(200, {"success": True, "message": "ok"})
            )

            result = await client.submit(FORM)

        assert result.success is True
        assert result.message == "Thank you! Your message has been sent successfully."
        assert mock_client.post.call_args.args[0] == "https://relay.test/api/contact"

    @pytest.mark.asyncio
    async def test_relay_error_message_is_shown(self, make_response):
        client = ContactClient("https://relay.test/api/contact")

        with patch("application.services.contact_client.httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(
                return_value=make_response(403, {"error": "Security verification failed"})
            )

            result = await client.submit(FORM)

        assert result.success is False
        assert result.message == "Security verification failed"

    @pytest.mark.asyncio
    async def test_network_error(self):
        client = ContactClient("https://relay.test/api/contact")

        with patch("application.services.contact_client.httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post = AsyncMock(side_effect=httpx.ConnectError("offline"))

            result = await client.submit(FORM)

        assert result.success is False
        assert result.message.startswith("Network error")
