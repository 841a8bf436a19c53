"""
Strict Base Models for API Request/Response Validation

The web client speaks camelCase JSON (``subjectId``, ``durationMinutes``,
``todayProgress``) while Python code uses snake_case attributes. Every API
model therefore carries a camelCase alias generator; requests accept either
spelling, responses are always serialized with the camelCase aliases.

Usage:
    # For request bodies (strictest validation)
    class SubjectCreate(StrictRequest):
        name: str
        color: str = "#2563eb"

    # For response bodies (reads ORM attributes)
    class SubjectResponse(StrictResponse):
        id: int
        name: str

Architecture:
    API Request → StrictRequest (extra="forbid") → Route Handler
    DB Model → StrictResponse (extra="ignore") → API Response
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class StrictRequest(BaseModel):
    """
    Base model for API request bodies with strict validation.

    Rejects any fields not explicitly declared in the model, catching
    client typos and mismatches at request time rather than runtime.

    Features:
        - extra="forbid": Unknown fields are rejected
        - str_strip_whitespace=True: Trims whitespace from strings
        - alias_generator=to_camel: ``subjectId`` maps to ``subject_id``
        - populate_by_name=True: snake_case names are accepted as well

    Example:
        >>> class TodoCreate(StrictRequest):
        ...     subject_id: int
        ...     task: str
        >>>
        >>> TodoCreate(subjectId=1, task="Read chapter 3")  # OK
        >>> TodoCreate(subjectId=1, tsk="Read")  # Raises ValidationError
    """

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        validate_default=True,  # Validate defaults
        str_strip_whitespace=True,  # Clean string inputs
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PartialUpdate(StrictRequest):
    """
    Base model for partial-update (PUT) bodies.

    Omitted fields are left unchanged. An explicit ``null`` is accepted only
    for fields listed in ``nullable_fields``; for any other field it fails
    validation, so the request is answered with a 400 instead of reaching
    a NOT NULL column.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        nulled = sorted(
            name
            for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class StrictResponse(BaseModel):
    """
    Base model for API response bodies.

    More lenient than StrictRequest to allow flexibility in response data.
    Still enforces type validation but allows extra fields.

    Features:
        - extra="ignore": Silently ignores extra fields (DB may have more columns)
        - from_attributes=True: Allows ORM model conversion
        - alias_generator=to_camel: Serialized with camelCase keys

    Example:
        >>> SubjectResponse.model_validate(db_subject)
    """

    model_config = ConfigDict(
        extra="ignore",  # Allow extra fields in responses
        validate_default=True,  # Validate defaults
        from_attributes=True,  # Enable ORM conversion
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Common Response Patterns
# =============================================================================


class ErrorDetail(BaseModel):
    """
    Standardized error response body.

    Built by the error_handling middleware for every error response.
    Clients only need ``message``; the rest is for log correlation.
    Keys stay snake_case.
    """

    error: str  # Error code (e.g., "validation_error")
    message: str  # Human-readable message
    error_id: str  # Correlation ID for log lookup
    details: Optional[dict] = None  # Additional context (debug only)
    timestamp: datetime
