"""Services package for study data access and analytics."""

from app.services.storage import (
    DuplicateSettingError,
    StudyStorage,
    UnknownSubjectError,
)

__all__ = [
    "DuplicateSettingError",
    "StudyStorage",
    "UnknownSubjectError",
]
