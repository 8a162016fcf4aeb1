"""
Site middleware.

Provides cross-cutting concerns:
- Request ID tracking
- Security headers with per-request CSP nonce
- POST rate limiting
"""

from .rate_limit import RateLimitMiddleware, get_client_id
from .request_id import RequestIDMiddleware
from .security import SecurityHeadersMiddleware

__all__ = [
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "get_client_id",
]
