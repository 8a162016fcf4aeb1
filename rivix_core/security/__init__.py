"""
Security module for the Rivix site.

Provides:
- Per-request CSP nonces and hardening headers
- Fixed-window POST rate limiting
"""

from .headers import (
    apply_security_headers,
    build_content_security_policy,
    build_security_headers,
    generate_nonce,
    prepare,
)
from .rate_limiter import (
    RATE_LIMIT_MESSAGE,
    FixedWindowRateLimiter,
    RateLimitDecision,
    RateWindow,
)

__all__ = [
    "apply_security_headers",
    "build_content_security_policy",
    "build_security_headers",
    "generate_nonce",
    "prepare",
    "RATE_LIMIT_MESSAGE",
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    "RateWindow",
]
