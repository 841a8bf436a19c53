"""
API-related enums.

Defines enums for rate limiting and other API concerns.
"""

from enum import Enum


class RateLimitType(str, Enum):
    """
    Rate limit categories for different endpoint types.

    Each category has a corresponding rate limit configured in settings.
    Usage:
        from app.enums import RateLimitType
        from app.config import settings

        limit = settings.get_rate_limit(RateLimitType.ANALYTICS)
    """

    # General API endpoints
    DEFAULT = "default"

    # Analytics and dashboard endpoints (full scans of the session table)
    ANALYTICS = "analytics"
