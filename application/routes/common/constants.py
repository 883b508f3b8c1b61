"""
Constants used across route handlers.

Centralizes magic numbers and configuration values to improve maintainability.
"""

# ============================================================================
# CORS Configuration
# ============================================================================

# Methods advertised to browsers on every response
CORS_ALLOW_METHODS = "POST, OPTIONS, GET"

# Request headers browsers may send
CORS_ALLOW_HEADERS = "Content-Type, Accept, Authorization"

# Preflight cache lifetime (seconds)
CORS_MAX_AGE_SECONDS = 86400

# ============================================================================
# Allowed Methods per Endpoint
# ============================================================================

CHAT_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]

CONTACT_ALLOWED_METHODS = ["POST", "OPTIONS"]

# Methods that get an explicit 405 envelope instead of the router's default
REJECTED_METHODS = ["PUT", "PATCH", "DELETE"]

# ============================================================================
# Rate Limiting Defaults
# ============================================================================

# Chat relay requests per client IP per minute
RATE_LIMIT_CHAT = 30

# Contact form submissions per client IP per 10 minutes
RATE_LIMIT_CONTACT = 5

# ============================================================================
# Published Endpoints
# ============================================================================

API_ENDPOINTS = ["/api/chat", "/api/contact"]
