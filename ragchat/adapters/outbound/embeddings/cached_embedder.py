"""Embedding provider wrapper that caches vectors in the session/cache store."""

import hashlib
import logging

from ....core.ports.embedding_port import EmbeddingPort
from ....core.ports.session_store_port import SessionStorePort

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = 7 * 24 * 60 * 60


def cache_key(text: str) -> str:
    """Cache key for a text: ``embedding:<sha256>``."""
    return f"embedding:{hashlib.sha256(text.encode('utf-8')).hexdigest()}"


class CachedEmbeddingProvider(EmbeddingPort):
    """Looks up query embeddings in the cache before computing them.

    Cache misses and cache outages both fall through to the wrapped provider.
    """

    def __init__(
        self,
        provider: EmbeddingPort,
        cache: SessionStorePort,
        ttl: int = DEFAULT_CACHE_TTL,
    ) -> None:
        self.provider = provider
        self.cache = cache
        self.ttl = ttl
        self.dimension = provider.dimension

    async def embed_query(self, text: str) -> list[float]:
        key = cache_key(text)
        cached = await self.cache.get_json(key)
        if isinstance(cached, list) and len(cached) == self.dimension:
            logger.debug("Embedding cache hit for %s", key)
            return [float(x) for x in cached]

        embedding = await self.provider.embed_query(text)
        await self.cache.set_json(key, embedding, self.ttl)
        return embedding

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [await self.embed_query(text) for text in texts]
