"""Deterministic hash-seeded embeddings.

Stand-in for a hosted embedding model. The vectors carry no semantics, but
they are stable across processes, so a seeded store and later queries agree.
"""

import logging
import math

from ....core.ports.embedding_port import EmbeddingPort

logger = logging.getLogger(__name__)

DEFAULT_DIMENSION = 384


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def text_hash(text: str) -> int:
    """32-bit signed rolling hash (``h * 31 + unit``) over UTF-16 code units."""
    h = 0
    data = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return h


def _seeded_random(seed: int) -> float:
    x = math.sin(seed) * 10000
    return x - math.floor(x)


class MockEmbeddingProvider(EmbeddingPort):
    """Embeds text as ``frac(sin(hash + i) * 10000)`` for each component ``i``."""

    def __init__(self, dimension: int = DEFAULT_DIMENSION) -> None:
        self.dimension = dimension

    def embed_text(self, text: str) -> list[float]:
        """Synchronous embedding of a single text."""
        seed = text_hash(text or "")
        return [_seeded_random(seed + i) for i in range(self.dimension)]

    async def embed_query(self, text: str) -> list[float]:
        logger.debug("Generating embeddings for 1 text(s)")
        return self.embed_text(text)

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        logger.debug("Generating embeddings for %d text(s)", len(texts))
        return [self.embed_text(text) for text in texts]
