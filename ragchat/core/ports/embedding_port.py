"""Embedding Port Interface."""

from abc import ABC, abstractmethod


class EmbeddingPort(ABC):
    """Abstract interface for embedding providers."""

    dimension: int

    @abstractmethod
    async def embed_query(self, text: str) -> list[float]: ...

    @abstractmethod
    async def embed_documents(self, texts: list[str]) -> list[list[float]]: ...

    async def embed(self, texts: str | list[str]) -> list[float] | list[list[float]]:
        """Embed one text or a batch, mirroring the input shape."""
        if isinstance(texts, str):
            return await self.embed_query(texts)
        return await self.embed_documents(texts)
