"""
Rivix Servers Core Library.

Shared building blocks for the marketing site: settings, structured logging,
and the request security primitives (CSP nonces, hardening headers, the POST
rate limiter).

Usage:
    # Config
    from rivix_core.config import get_settings, Settings

    # Logging
    from rivix_core.logging import get_logger, configure_logging

    # Security
    from rivix_core.security import FixedWindowRateLimiter, prepare
"""

__version__ = "1.0.0"

# Users should import directly from submodules:
#   from rivix_core.config import get_settings
#   from rivix_core.logging import get_logger
