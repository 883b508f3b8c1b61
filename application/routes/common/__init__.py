"""
Common utilities for route handlers.

Provides shared functionality to reduce code duplication:
- CORS headers
- Rate limiting utilities
- Response formatting
- Error handlers
- Constants
"""
