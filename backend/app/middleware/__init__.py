"""
Middleware Package

Provides FastAPI middleware for:
- Rate limiting
- Error handling

Rate limiting usage:
    from app.middleware import limit_analytics

    @router.get("/summary")
    @limit_analytics
    async def my_endpoint(request: Request):
        ...
"""

from app.middleware.rate_limit import (
    get_rate_limit,
    limit_analytics,
    limiter,
    setup_rate_limiting,
)
from app.middleware.error_handling import (
    ConflictError,
    ErrorHandlingMiddleware,
    NotFoundError,
    ServiceError,
    ValidationError,
    fallback_on_error,
    handle_endpoint_errors,
    setup_error_handling,
)

__all__ = [
    "setup_rate_limiting",
    "limiter",
    "get_rate_limit",
    "limit_analytics",
    "ErrorHandlingMiddleware",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "fallback_on_error",
    "handle_endpoint_errors",
    "setup_error_handling",
]
