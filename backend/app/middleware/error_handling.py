"""
Error Handling Middleware

Provides consistent, informative error responses across the API.

Features:
- Standardized error response format (always carries ``message``)
- Correlation IDs for log tracking
- Sanitized responses (hides internal details unless debug is on)
- Custom exception classes for different error types
- Endpoint decorator mapping unexpected failures to a fixed 500 message
- Fallback decorator for best-effort values that must never fail a request

Usage:
    from app.middleware.error_handling import NotFoundError, handle_endpoint_errors

    @router.get("/items/{item_id}")
    @handle_endpoint_errors("Get item", "Failed to fetch item")
    async def get_item(item_id: int):
        raise NotFoundError("Item not found")

How Exception Interception Works:
    ErrorHandlingMiddleware wraps ``call_next(request)`` in a try/except
    block. Any exception raised by a route handler, dependency or service
    propagates up through ``call_next`` and is caught here.

    Exception handling hierarchy:
        - HTTPException: Re-raised for FastAPI's built-in handler
        - ServiceError: Custom exceptions → structured JSON response
        - Exception: Catch-all for unexpected errors → sanitized 500

    Request body/query validation happens before the handler runs and is
    answered by ``request_validation_handler`` with a generic 400.
"""

import functools
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional, TypeVar
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.models.base import ErrorDetail

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Custom Exceptions
# =============================================================================


class ServiceError(Exception):
    """
    Base exception for service errors.

    Provides consistent error handling with:
    - HTTP status code
    - Error code for categorization
    - Optional details for debugging

    Example:
        raise ServiceError("Failed to fetch dashboard stats", status_code=500)
    """

    status_code: int = 500
    error_code: str = "service_error"

    def __init__(
        self,
        message: str,
        status_code: int = None,
        error_code: str = None,
        details: dict = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code:
            self.status_code = status_code
        if error_code:
            self.error_code = error_code
        self.details = details


class ValidationError(ServiceError):
    """
    Data validation error.

    Raised when input data is well-formed JSON but not acceptable
    (unknown subject, mismatched goal date, empty setting value).
    """

    status_code = 400
    error_code = "validation_error"


class NotFoundError(ServiceError):
    """
    Resource not found error.

    Raised when a requested resource doesn't exist.
    """

    status_code = 404
    error_code = "not_found"


class ConflictError(ServiceError):
    """
    Uniqueness conflict.

    Raised when creating a resource whose unique key already exists.
    """

    status_code = 409
    error_code = "conflict"


# =============================================================================
# Error Handling Middleware
# =============================================================================


def _error_content(
    error_code: str,
    message: str,
    error_id: str,
    details: Optional[dict] = None,
) -> dict[str, Any]:
    """Build a JSON-serializable error body."""
    return ErrorDetail(
        error=error_code,
        message=message,
        error_id=error_id,
        details=details,
        timestamp=datetime.now(timezone.utc),
    ).model_dump(mode="json")


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    - Catches unhandled exceptions
    - Logs with correlation ID
    - Returns consistent error format
    - Hides internal details in production
    """

    def __init__(self, app, debug: bool = False):
        """
        Initialize middleware.

        Args:
            app: FastAPI/Starlette application
            debug: Whether to include stack traces in responses
        """
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        """Process request and handle any errors."""
        error_id = str(uuid4())[:8]

        try:
            response = await call_next(request)
            return response

        except HTTPException:
            # Let FastAPI handle HTTP exceptions
            raise

        except ServiceError as e:
            log = logger.error if e.status_code >= 500 else logger.info
            log(
                f"[{error_id}] {e.error_code}: {e.message}",
                extra={
                    "error_id": error_id,
                    "error_code": e.error_code,
                    "path": request.url.path,
                    "method": request.method,
                    "details": e.details,
                },
            )

            return JSONResponse(
                status_code=e.status_code,
                content=_error_content(
                    e.error_code,
                    e.message,
                    error_id,
                    e.details if self.debug else None,
                ),
            )

        except Exception as e:
            # Log full traceback for unexpected errors
            logger.error(
                f"[{error_id}] Unhandled error: {type(e).__name__}: {e}",
                extra={
                    "error_id": error_id,
                    "path": request.url.path,
                    "method": request.method,
                    "traceback": traceback.format_exc(),
                },
            )

            details = None
            if self.debug:
                details = {
                    "exception": type(e).__name__,
                    "message": str(e),
                    "traceback": traceback.format_exc(),
                }

            return JSONResponse(
                status_code=500,
                content=_error_content(
                    "internal_server_error",
                    "An unexpected error occurred",
                    error_id,
                    details,
                ),
            )


# Client-facing message per resource, keyed by the path segment after /api/
INVALID_DATA_MESSAGES = {
    "subjects": "Invalid subject data",
    "study-sessions": "Invalid study session data",
    "daily-goals": "Invalid daily goal data",
    "todos": "Invalid todo data",
    "playlists": "Invalid playlist data",
    "settings": "Invalid setting data",
}


def invalid_data_message(path: str) -> str:
    """Message for a request that failed validation on ``path``."""
    parts = path.strip("/").split("/")
    if len(parts) > 1 and parts[0] == "api":
        return INVALID_DATA_MESSAGES.get(parts[1], "Invalid request data")
    return "Invalid request data"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies and query strings with a 400."""
    error_id = str(uuid4())[:8]
    logger.info(
        f"[{error_id}] Invalid request to {request.method} {request.url.path}: "
        f"{len(exc.errors())} validation error(s)"
    )
    return JSONResponse(
        status_code=400,
        content=_error_content(
            "validation_error", invalid_data_message(request.url.path), error_id
        ),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException in the standard error format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content("http_error", str(exc.detail), str(uuid4())[:8]),
        headers=getattr(exc, "headers", None),
    )


# =============================================================================
# Setup Function
# =============================================================================


def setup_error_handling(app: FastAPI, debug: bool = False) -> None:
    """
    Configure error handling on the FastAPI app.

    Args:
        app: FastAPI application instance
        debug: Whether to include stack traces in responses
    """
    app.add_middleware(ErrorHandlingMiddleware, debug=debug)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    logger.info(f"Error handling middleware enabled (debug={debug})")


# =============================================================================
# Decorators
# =============================================================================


def handle_endpoint_errors(operation: str, message: Optional[str] = None):
    """
    Map unexpected endpoint failures to a single 500 ServiceError.

    ServiceError and HTTPException pass through untouched. Anything else
    is logged with the operation name and replaced by a ServiceError
    carrying ``message``, so the client sees one fixed message and never a
    partial result.

    Args:
        operation: Operation name used in logs (e.g. "Get dashboard stats")
        message: Client-facing message (defaults to "Failed to <operation>")
    """
    client_message = message or f"Failed to {operation[0].lower()}{operation[1:]}"

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except (ServiceError, HTTPException):
                raise
            except Exception as e:
                logger.exception(f"{operation} failed: {type(e).__name__}: {e}")
                raise ServiceError(client_message, error_code="internal_server_error") from e

        return wrapper

    return decorator


def fallback_on_error(default: T, operation: Optional[str] = None):
    """
    Return ``default`` instead of raising when the wrapped coroutine fails.

    For best-effort values that must not fail the surrounding request
    (e.g. the dashboard streak). The failure is still logged.

    Args:
        default: Value returned on any exception
        operation: Name used in the log message (defaults to the function name)
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        name = operation or func.__qualname__

        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"{name} failed, falling back to {default!r}: {type(e).__name__}: {e}"
                )
                return default

        return wrapper

    return decorator
