"""Validation exceptions for ragchat."""

from .base import RagChatError


class ValidationError(RagChatError):
    """Input validation failed."""

    error_code = "RC_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "RC_VAL_002"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "RC_VAL_003"


class MissingFieldError(ValidationError):
    """A required request field is missing."""

    error_code = "RC_VAL_004"
