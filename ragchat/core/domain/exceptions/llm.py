"""LLM exceptions for ragchat.

These are raised by LLM adapters and caught by the answer composer, which
turns them into fallback answers. They never reach the HTTP layer.
"""

from .base import RagChatError


class LLMError(RagChatError):
    """Base error for LLM operations."""

    error_code = "RC_LLM_001"


class LLMNotConfiguredError(LLMError):
    """No API key is configured for the generation provider."""

    error_code = "RC_LLM_002"


class ModelInitializationError(LLMError):
    """A model was selected but could not be initialized."""

    error_code = "RC_LLM_004"


class LLMGenerationError(LLMError):
    """The generation call itself failed.

    Common causes:
    - Network issues
    - Quota exceeded
    - Content filtered by safety settings
    """

    error_code = "RC_LLM_005"
