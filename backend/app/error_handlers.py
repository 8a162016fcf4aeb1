"""
Custom exception handlers for FastAPI.

Security:
- Request IDs are logged server-side and echoed in X-Request-ID, never in bodies
- Generic error page for 500 errors outside development
- Security headers are applied here too, because unhandled exceptions are
  answered by the outermost server error middleware and never pass back
  through SecurityHeadersMiddleware
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import structlog

from rivix_core.logging import get_logger
from rivix_core.security import apply_security_headers, generate_nonce

from .rendering import get_nonce, render_page

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(detail: str, status_code: int) -> dict:
    """
    Create error response payload.

    Security: Does NOT include request_id to prevent information disclosure.
    """
    return {
        "detail": detail,
        "status_code": status_code,
    }


def _wants_json(request: Request) -> bool:
    return request.url.path.startswith("/api")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            path=request.url.path,
            request_id=_get_request_id(),
        )
        if exc.status_code == 404 and not _wants_json(request):
            return render_page(
                request,
                "404.html",
                status_code=404,
                title="404 - Page Not Found | Rivix Servers",
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422),
                "errors": jsonable_errors(exc),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Log full details server-side (including request_id for tracing)
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            request_id=_get_request_id(),
        )
        settings = request.app.state.settings
        nonce = get_nonce(request) or generate_nonce()

        if _wants_json(request):
            response = JSONResponse(
                status_code=500,
                content=_response_payload("Internal server error", 500),
            )
        else:
            response = render_page(
                request,
                "error.html",
                status_code=500,
                title="Server Error - Rivix Servers",
                error=str(exc) if settings.is_development else "An error occurred",
                nonce=nonce,
            )
        apply_security_headers(response, nonce)
        # Server errors are answered outside RequestIDMiddleware
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serialisable context (e.g. raw exceptions) from validation errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
