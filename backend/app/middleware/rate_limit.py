"""
Rate Limiting Middleware

Protects the scan-heavy dashboard and analytics endpoints using SlowAPI.

Usage:
    from app.middleware.rate_limit import limit_analytics

    @router.get("/summary")
    @limit_analytics
    async def get_summary(request: Request, ...):
        ...

Rate limit configurations (from settings):
- DEFAULT: General API endpoints (RATE_LIMIT_DEFAULT, 100/minute)
- ANALYTICS: Dashboard and analytics endpoints (RATE_LIMIT_ANALYTICS, 30/minute)

Set RATE_LIMIT_ENABLED=false to turn limiting off (tests, local dev).
"""

import logging

from fastapi import FastAPI, Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.config import settings
from app.enums import RateLimitType

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """
    Get client identifier for rate limiting.

    Uses X-Forwarded-For header if behind a proxy,
    otherwise falls back to direct IP address.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address or identifier
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # First IP in the chain is the client
        return forwarded_for.split(",")[0].strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[settings.get_rate_limit(RateLimitType.DEFAULT)],
    enabled=settings.RATE_LIMIT_ENABLED,
)


def setup_rate_limiting(app: FastAPI, enabled: bool = True) -> None:
    """
    Configure rate limiting on the FastAPI app.

    Args:
        app: FastAPI application instance
        enabled: Whether to enable rate limiting
    """
    if not enabled:
        logger.info("Rate limiting disabled")
        return

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info("Rate limiting enabled")


def get_rate_limit(rate_limit_type: RateLimitType) -> str:
    """
    Get rate limit string for an endpoint type.

    Args:
        rate_limit_type: RateLimitType enum value

    Returns:
        Rate limit string (e.g., "30/minute")
    """
    return settings.get_rate_limit(rate_limit_type)


def limit_analytics(func):
    """Decorator for dashboard and analytics endpoints."""
    return limiter.limit(get_rate_limit(RateLimitType.ANALYTICS))(func)
