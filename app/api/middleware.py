"""
HTTP middleware: request logging, security headers, CORS origin policy,
/api/* rate limiting and the JSON 500 for uncaught errors.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import FrozenSet, Optional
from urllib.parse import urlparse

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from app.config import Settings
from app.services.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)

CORS_REJECTION_MESSAGE = "Not allowed by CORS"
RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
RATE_LIMITED_PREFIX = "/api/"

SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


@dataclass(frozen=True)
class CorsPolicy:
    """
    Origin allow-list.

    An origin passes if it is missing (when allow_no_origin), matches an
    exact origin, or its hostname ends with one of wildcard_suffixes.
    An empty wildcard_suffixes gives the allow-list-only variant.
    """
    exact_origins: FrozenSet[str] = field(default_factory=frozenset)
    wildcard_suffixes: FrozenSet[str] = field(default_factory=frozenset)
    allow_no_origin: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "CorsPolicy":
        return cls(
            exact_origins=frozenset(settings.cors_exact_origins),
            wildcard_suffixes=frozenset(settings.cors_wildcard_suffixes),
            allow_no_origin=settings.cors_allow_no_origin,
        )

    def allows(self, origin: Optional[str]) -> bool:
        if not origin:
            return self.allow_no_origin
        if origin.rstrip("/") in self.exact_origins:
            return True
        hostname = (urlparse(origin).hostname or "").lower()
        return bool(hostname) and any(hostname.endswith(suffix) for suffix in self.wildcard_suffixes)


class PolicyCORSMiddleware(CORSMiddleware):
    """Starlette CORS middleware whose origin check is delegated to a CorsPolicy"""

    def __init__(self, app, policy: CorsPolicy, **kwargs):
        super().__init__(app, **kwargs)
        self.policy = policy

    def is_allowed_origin(self, origin: str) -> bool:
        return self.policy.allows(origin)


class OriginRejectionMiddleware(BaseHTTPMiddleware):
    """Refuse requests from disallowed origins before any handler runs"""

    def __init__(self, app, policy: CorsPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if not self.policy.allows(origin):
            logger.warning(f"Rejected request from origin {origin!r} to {request.url.path}")
            return PlainTextResponse(CORS_REJECTION_MESSAGE, status_code=403)
        return await call_next(request)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Fixed-window limit per client address, applied to /api/* only"""

    def __init__(self, app, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(RATE_LIMITED_PREFIX):
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        decision = self.limiter.hit(client)
        headers = {
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
            "X-RateLimit-Reset": str(decision.reset_after),
        }

        if not decision.allowed:
            logger.warning(f"Rate limit exceeded for {client} on {request.url.path}")
            headers["Retry-After"] = str(decision.reset_after)
            return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response


def internal_error_response(exc: Exception, debug: bool) -> JSONResponse:
    """500 body; the exception text is only exposed in development"""
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) if debug else "Something went wrong",
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn uncaught handler exceptions into a JSON 500.

    Registered innermost, so the response still passes back through the
    CORS, security header and rate limit layers.
    """

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
            return internal_error_response(exc, self.debug)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach a fixed set of hardening headers to every response"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


async def log_requests(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Duration: {duration_ms:.2f}ms"
    )

    return response
