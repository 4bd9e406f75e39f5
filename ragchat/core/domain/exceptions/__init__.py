"""Custom exception hierarchy for ragchat.

Each exception carries an error code, the location it was raised from, an
optional cause and a JSON rendering. Import from this package directly:

    from ragchat.core.domain.exceptions import RagChatError, VectorStoreCorruptError
"""

# Base classes
from .base import ExceptionContext, RagChatError

# Embedding exceptions
from .embedding import EmbeddingError

# LLM exceptions
from .llm import (
    LLMError,
    LLMGenerationError,
    LLMNotConfiguredError,
    ModelInitializationError,
)

# Validation exceptions
from .validation import (
    EmptyQueryError,
    MissingFieldError,
    QueryTooLongError,
    ValidationError,
)

# Vector store exceptions
from .vector_store import (
    VectorStoreCorruptError,
    VectorStoreError,
    VectorStoreNotInitializedError,
    VectorStorePersistenceError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "RagChatError",
    # Vector Store
    "VectorStoreError",
    "VectorStoreNotInitializedError",
    "VectorStoreCorruptError",
    "VectorStorePersistenceError",
    # Embedding
    "EmbeddingError",
    # LLM
    "LLMError",
    "LLMNotConfiguredError",
    "ModelInitializationError",
    "LLMGenerationError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "QueryTooLongError",
    "MissingFieldError",
]
