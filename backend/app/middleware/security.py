from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from rivix_core.security import prepare


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to issue a CSP nonce and add security headers to all responses.

    Headers added:
    - Strict-Transport-Security: max-age=31536000; includeSubDomains; preload
    - Content-Security-Policy: site policy, script-src allows this request's nonce
    - X-Frame-Options: SAMEORIGIN
    - X-Content-Type-Options: nosniff
    - X-XSS-Protection: 1; mode=block
    - Referrer-Policy: strict-origin-when-cross-origin

    The nonce is stored on ``request.state.csp_nonce`` so templates (and the
    server error handler) can reuse it for the same response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        nonce, headers = prepare(request)
        request.state.csp_nonce = nonce

        response = await call_next(request)

        for name, value in headers.items():
            response.headers[name] = value

        return response
