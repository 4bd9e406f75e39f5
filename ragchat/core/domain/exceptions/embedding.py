"""Embedding exceptions for ragchat."""

from .base import RagChatError


class EmbeddingError(RagChatError):
    """Failed to generate embeddings."""

    error_code = "RC_EMB_001"
