"""Embedding providers."""

from .cached_embedder import CachedEmbeddingProvider
from .mock_embedder import MockEmbeddingProvider

__all__ = ["CachedEmbeddingProvider", "MockEmbeddingProvider"]
