"""Document and search result models for the vector store."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Document:
    """A retrievable news document with its embedding.

    Documents are created by seeding or incremental adds and are never
    mutated in place by the store. All embeddings held by one store share
    the same dimension.

    Attributes:
        content: The retrievable body text.
        source: Human-readable provenance label (publication name).
        title: Optional headline.
        doc_id: Unique identifier; the store assigns one when absent.
        metadata: Extra key-value pairs carried through persistence.
        embedding: Fixed-length vector for similarity search.
    """

    content: str
    source: str = "Unknown"
    title: str | None = None
    doc_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    embedding: list[float] = field(default_factory=list)

    def to_record(self) -> dict[str, Any]:
        """Serialize to the snapshot record layout."""
        record: dict[str, Any] = {
            "id": self.doc_id,
            "title": self.title,
            "source": self.source,
            "content": self.content,
            "embedding": list(self.embedding),
        }
        if self.metadata:
            record["metadata"] = dict(self.metadata)
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Document":
        """Build a document from a snapshot record.

        Older snapshots keep the body under ``text`` rather than ``content``.
        """
        return cls(
            content=record.get("content") or record.get("text") or "",
            source=record.get("source") or "Unknown",
            title=record.get("title"),
            doc_id=record.get("id"),
            metadata=dict(record.get("metadata") or {}),
            embedding=[float(x) for x in record.get("embedding") or []],
        )


@dataclass
class SearchResult:
    """A search hit: a stored document and its cosine similarity to the query.

    Attributes:
        document: The matched Document.
        score: Cosine similarity in [-1, 1]; 0 when undefined.
    """

    document: Document
    score: float
