"""
Rate limiting utilities for route handlers.

Provides standardized rate limit key functions.
"""

from quart import request

# Headers set by edge proxies carrying the original client address
CLIENT_IP_HEADERS = ("CF-Connecting-IP", "X-Forwarded-For")


def client_ip() -> str:
    """Return the best guess at the calling client's IP address."""
    for header in CLIENT_IP_HEADERS:
        value = request.headers.get(header)
        if value:
            return value.split(",")[0].strip()
    return request.remote_addr or "unknown"


async def default_rate_limit_key() -> str:
    """
    Generate rate limit key based on client IP address.

    Prefers the address reported by an edge proxy, then the socket peer.

    Returns:
        str: Client IP address or "unknown" if not available

    Example:
        >>> @rate_limit(30, timedelta(minutes=1), key_function=default_rate_limit_key)
        >>> async def my_endpoint():
        >>>     pass
    """
    return client_ip()
