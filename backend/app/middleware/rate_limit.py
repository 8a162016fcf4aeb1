"""
Rate limiting middleware for state-changing requests.

Wraps a FixedWindowRateLimiter owned by the application. POST requests from
a client share one budget across every route; other methods pass straight
through.
"""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from rivix_core.logging import get_logger
from rivix_core.security import RATE_LIMIT_MESSAGE, FixedWindowRateLimiter

logger = get_logger("api.rate_limit")


def get_client_id(request: Request, trust_forwarded_for: bool = False) -> str:
    """
    Get the identifier a client is counted under.

    Uses the peer address. The first ``X-Forwarded-For`` hop is only honoured
    when the deployment sits behind a proxy that sets it.
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware for per-client POST rate limiting.

    Rejected requests get a 429 with a JSON body and never reach a route
    handler. Allowed requests are passed through unchanged.
    """

    def __init__(
        self,
        app,
        limiter: FixedWindowRateLimiter,
        trust_forwarded_for: bool = False,
    ):
        super().__init__(app)
        self.limiter = limiter
        self.trust_forwarded_for = trust_forwarded_for

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self.limiter.is_gated(request.method):
            return await call_next(request)

        client_id = get_client_id(request, self.trust_forwarded_for)
        decision = self.limiter.admit(client_id, method=request.method)

        if not decision.allowed:
            logger.warning("rate_limit_exceeded", client_id=client_id)
            return JSONResponse(
                status_code=429,
                content={"success": False, "message": RATE_LIMIT_MESSAGE},
                headers=decision.to_headers(),
            )

        return await call_next(request)
