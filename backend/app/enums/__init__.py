"""
Centralized enum definitions for the application.

All enums are organized by domain:
- study.py: To-do status, analytics time periods
- api.py: Rate limit categories

Usage:
    from app.enums import TodoStatus, TimePeriod

    # Or import from specific module
    from app.enums.study import TodoStatus
"""

from app.enums.study import (
    TodoStatus,
    TimePeriod,
)
from app.enums.api import (
    RateLimitType,
)

__all__ = [
    # Study enums
    "TodoStatus",
    "TimePeriod",
    # API enums
    "RateLimitType",
]
