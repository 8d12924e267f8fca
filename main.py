"""
EdTech Platform Backend API Server

FastAPI application for the multi-tenant education platform demo.
Serves tenant catalogs, mock login, enrollment progress, live sessions
and announcements from in-memory state.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.errors import ApiError
from app.api.middleware import (
    CorsPolicy,
    OriginRejectionMiddleware,
    PolicyCORSMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
    internal_error_response,
    log_requests,
)
from app.api.routes import admin, announcements, auth, courses, live, root, tenants
from app.config import Settings, load_settings
from app.services.scheduler import configure_scheduler, start_scheduler, stop_scheduler
from app.state import build_platform_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application with its own in-memory state.

    Args:
        settings: Runtime configuration; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()
    logging.getLogger().setLevel(settings.log_level)

    platform = build_platform_state(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Handles startup and shutdown events.
        """
        logger.info(
            f"Starting EdTech Platform API (environment: {settings.environment}, port: {settings.port})"
        )

        scheduler = configure_scheduler(platform.rate_limiter, settings.rate_limit_sweep_seconds)
        start_scheduler(scheduler)

        yield

        logger.info("Shutting down EdTech Platform API...")
        stop_scheduler(scheduler)

    app = FastAPI(
        title="EdTech Platform API",
        description="Multi-tenant education platform demo API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.platform = platform

    # Middleware: the last one added runs first, so the request passes
    # logging -> security headers -> origin check -> CORS -> rate limit
    # -> error capture.
    policy = CorsPolicy.from_settings(settings)
    app.add_middleware(UnhandledErrorMiddleware, debug=settings.debug)
    app.add_middleware(RateLimitMiddleware, limiter=platform.rate_limiter)
    app.add_middleware(
        PolicyCORSMiddleware,
        policy=policy,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginRejectionMiddleware, policy=policy)
    app.add_middleware(SecurityHeadersMiddleware)
    app.middleware("http")(log_requests)

    # API error handler (validation / not found)
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    # Routing misses
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    # Validation error handler (typed path / query parameters)
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Request validation failed") if errors else "Request validation failed"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    # Last resort for errors raised by the middleware layers themselves
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all uncaught exceptions"""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return internal_error_response(exc, settings.debug)

    # Include routers
    app.include_router(root.router)
    app.include_router(tenants.router)
    app.include_router(auth.router)
    app.include_router(announcements.router)
    app.include_router(courses.router)
    app.include_router(live.router)
    app.include_router(admin.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.platform.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
