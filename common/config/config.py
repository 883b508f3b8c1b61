"""
Environment-backed settings for the relay service.

Values are read once at import time after loading an optional .env file.
Validated configuration objects are built from the same variables by
application.services.config_service.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def get_env(key: str, default: str = "") -> str:
    """Get an environment variable, stripped, falling back to ``default`` when blank."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_float_env(key: str, default: float) -> float:
    """Get a float environment variable, ignoring unparsable values."""
    raw = get_env(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Upstream chat API
CHAT_UPSTREAM_URL = get_env("CHAT_UPSTREAM_URL", "https://api.cohere.ai/v1/chat")
UPSTREAM_TIMEOUT_SECONDS = get_float_env("UPSTREAM_TIMEOUT_SECONDS", 10.0)

# Bot verification (Cloudflare Turnstile)
TURNSTILE_VERIFY_URL = get_env(
    "TURNSTILE_VERIFY_URL", "https://challenges.cloudflare.com/turnstile/v0/siteverify"
)

# Transactional email (Resend)
RESEND_API_URL = get_env("RESEND_API_URL", "https://api.resend.com/emails")
CONTACT_EMAIL = get_env("CONTACT_EMAIL", "me@nandutangella.com")
CONTACT_FROM_EMAIL = get_env("CONTACT_FROM_EMAIL", "Contact Form <onboarding@resend.dev>")
CONTACT_SITE_NAME = get_env("CONTACT_SITE_NAME", "nandutangella.com")

# Server
APP_HOST = get_env("APP_HOST", "127.0.0.1")
APP_PORT = int(get_env("APP_PORT", "8000"))
APP_DEBUG = get_env("APP_DEBUG", "false").lower() == "true"
APP_LOG_FILE = get_env("APP_LOG_FILE", "app-log.log")
APP_LOG_LEVEL = get_env("APP_LOG_LEVEL", "INFO").upper()
