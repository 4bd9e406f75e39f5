"""In-memory document vector store with full-snapshot persistence.

Search is a linear cosine-similarity scan (O(n*d)), which is fine for the
hundreds to low thousands of documents this backend is meant for.

Every mutation rewrites the whole snapshot before returning. Mutations are
not serialized against each other: two concurrent writers can interleave and
the last snapshot written wins. Seeding is expected to be infrequent and
administrative.
"""

import logging
import secrets
import time
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from ....core.domain import Document, SearchResult
from ....core.domain.exceptions import (
    VectorStoreCorruptError,
    VectorStoreNotInitializedError,
    VectorStorePersistenceError,
)
from ....core.ports.vector_store_port import VectorStorePort
from ....core.services.similarity import cosine_similarity
from .backends import Snapshot, SnapshotBackend

logger = logging.getLogger(__name__)


def generate_doc_id() -> str:
    """Identifier for documents added without one."""
    return f"doc_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


class JsonVectorStore(VectorStorePort):
    """Document store owning an ordered in-memory collection and its snapshot."""

    def __init__(self, backend: SnapshotBackend) -> None:
        """Initialize the store.

        Args:
            backend: Snapshot backend (JSON file in production, memory in tests).
        """
        self.backend = backend
        self._documents: list[Document] = []
        self._initialized = False
        self._saved_at: str | None = None

    def initialize(self) -> None:
        """Load the persisted collection, or start empty if none exists.

        Raises:
            VectorStoreCorruptError: If the snapshot exists but cannot be parsed.
        """
        snapshot = self.backend.load()
        documents: list[Document] = []

        if snapshot is not None:
            try:
                documents = [Document.from_record(record) for record in snapshot.get("documents", [])]
            except (AttributeError, TypeError, ValueError) as e:
                raise VectorStoreCorruptError(
                    "Vector store snapshot contains malformed document records",
                    cause=e,
                    context={"backend": self.backend.describe()},
                ) from e
            self._saved_at = snapshot.get("savedAt")

        self._documents = documents
        self._initialized = True
        logger.info(
            "Loaded %d documents from vector store (%s)",
            len(self._documents),
            self.backend.describe(),
        )

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise VectorStoreNotInitializedError("Vector store not initialized")

    @property
    def dimension(self) -> int | None:
        """Embedding dimension of the first stored document, if any."""
        for doc in self._documents:
            if doc.embedding:
                return len(doc.embedding)
        return None

    def _prepare(self, documents: list[Document]) -> list[Document]:
        expected = self.dimension
        prepared = []
        for doc in documents:
            if not doc.doc_id:
                doc = replace(doc, doc_id=generate_doc_id())
            if expected is None and doc.embedding:
                expected = len(doc.embedding)
            elif expected is not None and len(doc.embedding) != expected:
                logger.warning(
                    "Document %s has embedding dimension %d, expected %d; it will never match",
                    doc.doc_id,
                    len(doc.embedding),
                    expected,
                )
            prepared.append(doc)
        return prepared

    def _snapshot(self) -> Snapshot:
        return {
            "documents": [doc.to_record() for doc in self._documents],
            "embeddingIndex": [[doc.doc_id, list(doc.embedding)] for doc in self._documents],
            "savedAt": datetime.now(UTC).isoformat(),
        }

    def _commit(self, previous: list[Document]) -> None:
        """Persist the current collection, restoring ``previous`` if the write fails."""
        snapshot = self._snapshot()
        try:
            self.backend.save(snapshot)
        except VectorStorePersistenceError:
            self._documents = previous
            logger.exception("Error saving vector store; mutation rolled back")
            raise
        self._saved_at = snapshot["savedAt"]

    def add_documents(self, documents: list[Document]) -> int:
        """Append documents and persist.

        Documents without an id get a generated one. Existing ids are not
        checked: re-adding a document stores a second copy (see
        ``upsert_documents`` for replace semantics).

        Args:
            documents: Documents with embeddings.

        Returns:
            Number of documents added.

        Raises:
            VectorStorePersistenceError: If the snapshot could not be written.
        """
        self._require_initialized()
        previous = list(self._documents)
        self._documents.extend(self._prepare(documents))
        self._commit(previous)
        logger.info("Added %d documents to vector store", len(documents))
        return len(documents)

    def upsert_documents(self, documents: list[Document]) -> int:
        """Replace documents whose id already exists, append the rest, and persist.

        Returns:
            Number of documents written.
        """
        self._require_initialized()
        previous = list(self._documents)
        positions = {doc.doc_id: i for i, doc in enumerate(self._documents)}

        replaced = 0
        for doc in self._prepare(documents):
            if doc.doc_id in positions:
                self._documents[positions[doc.doc_id]] = doc
                replaced += 1
            else:
                positions[doc.doc_id] = len(self._documents)
                self._documents.append(doc)

        self._commit(previous)
        logger.info(
            "Upserted %d documents (%d replaced, %d new)",
            len(documents),
            replaced,
            len(documents) - replaced,
        )
        return len(documents)

    def search(self, query_embedding: list[float], top_k: int = 5) -> list[SearchResult]:
        """Rank every stored document by cosine similarity to the query.

        Args:
            query_embedding: Query vector.
            top_k: Maximum number of results.

        Returns:
            At most ``top_k`` results, highest score first. Ties keep insertion
            order. Documents whose dimension differs from the query score 0.
        """
        self._require_initialized()
        if not self._documents or top_k <= 0:
            return []

        scored = [
            SearchResult(document=doc, score=cosine_similarity(query_embedding, doc.embedding))
            for doc in self._documents
        ]
        # sorted() is stable, so equal scores keep insertion order
        scored = sorted(scored, key=lambda result: result.score, reverse=True)
        return scored[:top_k]

    def get_document(self, doc_id: str) -> Document | None:
        """Find a document by id (linear scan)."""
        self._require_initialized()
        for doc in self._documents:
            if doc.doc_id == doc_id:
                return doc
        return None

    def clear(self) -> None:
        """Remove every document and persist the empty collection."""
        self._require_initialized()
        previous = list(self._documents)
        self._documents = []
        self._commit(previous)
        logger.info("Vector store cleared")

    def count(self) -> int:
        """Number of stored documents."""
        self._require_initialized()
        return len(self._documents)

    def stats(self) -> dict[str, Any]:
        """Summary of the store for health checks and the CLI."""
        return {
            "initialized": self._initialized,
            "count": len(self._documents),
            "dimension": self.dimension,
            "backend": self.backend.describe(),
            "saved_at": self._saved_at,
        }
