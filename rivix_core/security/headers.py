"""
Response hardening headers with a per-request CSP nonce.

Every response gets the same fixed header set. The only per-request part is
the nonce spliced into the ``script-src`` directive, which lets templates
mark their own inline ``<script>`` blocks as trusted for that response only.
"""

import base64
import secrets
from typing import Any, Dict, Tuple

# Minimum entropy for a CSP nonce (CSP3 recommends at least 128 bits)
NONCE_BYTES = 16

HSTS_VALUE = "max-age=31536000; includeSubDomains; preload"

# Third-party origins the site pages load from
STYLE_SOURCES = ("https://cdn.tailwindcss.com", "https://fonts.googleapis.com")
FONT_SOURCES = ("https://fonts.gstatic.com",)
SCRIPT_SOURCES = (
    "https://cdn.tailwindcss.com",
    "https://unpkg.com/aos@2.3.1/dist/aos.js",
    "https://cdn.jsdelivr.net/npm/particles.js@2.0.0/particles.min.js",
    "https://tawk.to/",
)
CONNECT_SOURCES = ("wss://*.tawk.to",)
FRAME_SOURCES = ("https://tawk.to/",)

STATIC_HEADERS = {
    "X-Frame-Options": "SAMEORIGIN",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def generate_nonce(num_bytes: int = NONCE_BYTES) -> str:
    """
    Generate a fresh base64-encoded nonce.

    Args:
        num_bytes: Number of random bytes; must be at least 16.

    Returns:
        Standard base64 text of ``num_bytes`` bytes from the OS CSPRNG.
    """
    if num_bytes < NONCE_BYTES:
        raise ValueError(f"CSP nonce needs at least {NONCE_BYTES} random bytes (got {num_bytes})")
    return base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii")


def _directive(name: str, *sources: str) -> str:
    return " ".join((name,) + sources)


def build_content_security_policy(nonce: str) -> str:
    """Render the site CSP with ``nonce`` allowed in ``script-src``."""
    directives = [
        _directive("default-src", "'self'"),
        _directive("style-src", "'self'", "'unsafe-inline'", *STYLE_SOURCES),
        _directive("font-src", "'self'", *FONT_SOURCES),
        _directive("script-src", "'self'", f"'nonce-{nonce}'", *SCRIPT_SOURCES),
        _directive("connect-src", "'self'", *CONNECT_SOURCES),
        _directive("img-src", "'self'", "data:", "https:"),
        _directive("frame-src", "'self'", *FRAME_SOURCES),
    ]
    return "; ".join(directives)


def build_security_headers(nonce: str) -> Dict[str, str]:
    """
    Build the full hardening header set for one response.

    The result is deterministic for a given nonce.
    """
    headers = {
        "Strict-Transport-Security": HSTS_VALUE,
        "Content-Security-Policy": build_content_security_policy(nonce),
    }
    headers.update(STATIC_HEADERS)
    return headers


def prepare(request: Any = None) -> Tuple[str, Dict[str, str]]:
    """
    Issue a nonce and the matching header set for an incoming request.

    The request is accepted for symmetry with the middleware call site; its
    contents do not influence the result.
    """
    nonce = generate_nonce()
    return nonce, build_security_headers(nonce)


def apply_security_headers(response, nonce: str) -> None:
    """Write the header set for ``nonce`` onto ``response`` in place."""
    for name, value in build_security_headers(nonce).items():
        response.headers[name] = value
