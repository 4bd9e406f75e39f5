"""Vector Store Port Interface."""

from abc import ABC, abstractmethod
from typing import Any

from ..domain import Document, SearchResult


class VectorStorePort(ABC):
    """Abstract interface for document vector stores."""

    @abstractmethod
    def initialize(self) -> None:
        """Load persisted state."""
        ...

    @abstractmethod
    def add_documents(self, documents: list[Document]) -> int:
        """Append documents (no dedupe) and persist."""
        ...

    @abstractmethod
    def upsert_documents(self, documents: list[Document]) -> int:
        """Replace documents with matching ids, append the rest, and persist."""
        ...

    @abstractmethod
    def search(self, query_embedding: list[float], top_k: int = 5) -> list[SearchResult]:
        """Return the top_k most similar documents, best first."""
        ...

    @abstractmethod
    def get_document(self, doc_id: str) -> Document | None: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def stats(self) -> dict[str, Any]: ...
