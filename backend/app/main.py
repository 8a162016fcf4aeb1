"""
FastAPI application entry point.

Uses structured logging from rivix_core.logging.
Every request passes, outermost first, through request logging, request ID,
security headers (with a per-request CSP nonce) and POST rate limiting.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from rivix_core.logging import RequestLoggingMiddleware, configure_logging, get_logger
from rivix_core.security import FixedWindowRateLimiter

from .config import Settings, get_settings
from .content import build_site_data
from .error_handlers import register_exception_handlers
from .middleware import RateLimitMiddleware, RequestIDMiddleware, SecurityHeadersMiddleware
from .routers import api as api_router
from .routers import pages as pages_router
from .scheduler import build_scheduler, list_jobs, shutdown_scheduler, start_scheduler

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings

    logger.info(
        "app_startup",
        app_name=settings.app_name,
        env=settings.env,
        port=settings.port,
        base_url=settings.base_url,
        routes=pages_router.PAGE_PATHS,
    )

    if settings.rate_limit_sweep_enabled:
        start_scheduler(app.state.scheduler)
        logger.info(
            "scheduler_started",
            sweep_interval_seconds=settings.rate_limit_sweep_interval_seconds,
        )

    yield

    logger.info("app_shutdown")
    shutdown_scheduler(app.state.scheduler)
    app.state.rate_limiter.clear()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level="DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
    )

    # The limiter and its sweep live exactly as long as this app
    rate_limiter = FixedWindowRateLimiter(
        window_seconds=settings.rate_limit_window_seconds,
        max_requests=settings.rate_limit_max_requests,
    )
    app.state.settings = settings
    app.state.site_data = build_site_data(settings)
    app.state.rate_limiter = rate_limiter
    app.state.scheduler = build_scheduler(
        rate_limiter,
        interval_seconds=settings.rate_limit_sweep_interval_seconds,
    )

    # Starlette runs the last-added middleware first
    app.add_middleware(
        RateLimitMiddleware,
        limiter=rate_limiter,
        trust_forwarded_for=settings.trust_forwarded_for,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """
        Health check endpoint (liveness probe).

        Returns minimal information to avoid exposing infrastructure details.
        """
        return {"status": "ok"}

    @app.get("/health/detailed", tags=["health"])
    def health_check_detailed(request: Request):
        """
        Rate limiter and scheduler status.

        Only available in debug mode outside production.
        """
        if settings.is_production or not settings.debug:
            return {"error": "Detailed health info only available in debug mode"}

        limiter: FixedWindowRateLimiter = request.app.state.rate_limiter
        return {
            "status": "ok",
            "rate_limiter": {
                "tracked_clients": len(limiter),
                "window_seconds": limiter.window_seconds,
                "max_requests": limiter.max_requests,
            },
            "jobs": list_jobs(request.app.state.scheduler),
        }

    app.include_router(api_router.router)
    app.include_router(pages_router.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the site with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("backend.app.main:app", host="0.0.0.0", port=settings.port, log_config=None)
