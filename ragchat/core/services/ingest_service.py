"""Turning raw articles into embedded documents and loading them into the store."""

import logging
from typing import Any

from ..domain import Document
from ..ports.embedding_port import EmbeddingPort
from ..ports.vector_store_port import VectorStorePort

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 5


def embedding_text(article: dict[str, Any]) -> str:
    """Text embedded for an article: title and body on separate lines."""
    title = article.get("title") or ""
    content = article.get("content") or article.get("text") or ""
    return f"{title}\n{content}" if title else content


class IngestService:
    """Embeds articles and writes them to the vector store."""

    def __init__(self, embedder: EmbeddingPort, vector_store: VectorStorePort) -> None:
        self.embedder = embedder
        self.vector_store = vector_store

    async def build_documents(self, articles: list[dict[str, Any]]) -> list[Document]:
        """Embed each article into a Document.

        Args:
            articles: Dicts with ``content`` (or ``text``) and optional ``id``,
                ``title``, ``source`` and any extra metadata keys.

        Returns:
            Documents in input order.
        """
        documents = []
        for i, article in enumerate(articles, start=1):
            embedding = await self.embedder.embed_query(embedding_text(article))
            metadata = {
                key: value
                for key, value in article.items()
                if key not in ("id", "title", "source", "content", "text", "embedding")
            }
            documents.append(
                Document(
                    content=article.get("content") or article.get("text") or "",
                    source=article.get("source") or "Unknown",
                    title=article.get("title"),
                    doc_id=article.get("id"),
                    metadata=metadata,
                    embedding=embedding,
                )
            )
            if i % PROGRESS_EVERY == 0:
                logger.info("Processed %d/%d articles", i, len(articles))
        return documents

    async def ingest(
        self,
        articles: list[dict[str, Any]],
        reset: bool = False,
        upsert: bool = False,
    ) -> int:
        """Embed and store articles.

        Args:
            articles: Raw articles.
            reset: Clear the store first.
            upsert: Replace documents with matching ids instead of appending duplicates.

        Returns:
            Number of documents written.
        """
        documents = await self.build_documents(articles)
        if reset:
            self.vector_store.clear()
        if upsert:
            return self.vector_store.upsert_documents(documents)
        return self.vector_store.add_documents(documents)
