"""Unit tests for the JSON vector store and its snapshot backends."""

import json

import pytest

from ragchat.adapters.outbound.vector_store import (
    InMemoryBackend,
    JsonFileBackend,
    JsonVectorStore,
)
from ragchat.core.domain import Document
from ragchat.core.domain.exceptions import (
    VectorStoreCorruptError,
    VectorStoreNotInitializedError,
    VectorStorePersistenceError,
)

pytestmark = pytest.mark.unit


class FailingBackend(InMemoryBackend):
    """In-memory backend whose saves fail once ``fail`` is set."""

    fail = False

    def save(self, snapshot):
        if self.fail:
            raise VectorStorePersistenceError("disk full")
        super().save(snapshot)


class TestInitialization:
    """Tests for loading snapshots."""

    def test_missing_snapshot_starts_empty(self, tmp_path):
        store = JsonVectorStore(JsonFileBackend(tmp_path / "vector_db.json"))
        store.initialize()

        assert store.count() == 0
        assert store.search([1.0, 0.0], top_k=5) == []

    def test_use_before_initialize_raises(self, memory_backend):
        store = JsonVectorStore(memory_backend)

        with pytest.raises(VectorStoreNotInitializedError):
            store.count()
        with pytest.raises(VectorStoreNotInitializedError):
            store.search([1.0], top_k=1)

    def test_stats_available_before_initialize(self, memory_backend):
        stats = JsonVectorStore(memory_backend).stats()

        assert stats["initialized"] is False
        assert stats["count"] == 0
        assert stats["backend"] == "memory"

    def test_corrupt_json_file_raises(self, tmp_path):
        path = tmp_path / "vector_db.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonVectorStore(JsonFileBackend(path))

        with pytest.raises(VectorStoreCorruptError) as exc_info:
            store.initialize()

        assert exc_info.value.extra_context["path"] == str(path)

    def test_unexpected_layout_raises(self, tmp_path):
        path = tmp_path / "vector_db.json"
        path.write_text(json.dumps({"documents": "nope"}), encoding="utf-8")

        with pytest.raises(VectorStoreCorruptError):
            JsonVectorStore(JsonFileBackend(path)).initialize()

    def test_legacy_text_field_is_loaded_as_content(self):
        backend = InMemoryBackend(
            {"documents": [{"id": "old", "text": "Legacy body", "embedding": [1.0, 0.0]}]}
        )
        store = JsonVectorStore(backend)
        store.initialize()

        doc = store.get_document("old")
        assert doc.content == "Legacy body"
        assert doc.source == "Unknown"


class TestAddAndPersist:
    """Tests for insert semantics and snapshot persistence."""

    def test_add_returns_count_and_persists(self, vector_store, memory_backend, sample_documents):
        added = vector_store.add_documents(sample_documents)

        assert added == 3
        assert vector_store.count() == 3
        assert memory_backend.save_count == 1
        assert len(memory_backend.snapshot["documents"]) == 3

    def test_snapshot_layout(self, vector_store, memory_backend, sample_documents):
        vector_store.add_documents(sample_documents)
        snapshot = memory_backend.snapshot

        assert set(snapshot) == {"documents", "embeddingIndex", "savedAt"}
        assert snapshot["documents"][0]["id"] == "a"
        assert snapshot["documents"][0]["content"] == "Parliament passed the climate bill."
        assert snapshot["embeddingIndex"][0] == ["a", [1.0, 0.0, 0.0]]

    def test_missing_ids_are_generated(self, vector_store):
        vector_store.add_documents([Document(content="No id", embedding=[1.0, 0.0])])

        [result] = vector_store.search([1.0, 0.0], top_k=1)
        assert result.document.doc_id.startswith("doc_")

    def test_add_does_not_deduplicate(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents[:1])
        vector_store.add_documents(sample_documents[:1])

        assert vector_store.count() == 2

    def test_upsert_replaces_matching_ids(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)
        updated = Document(content="Revised", source="Reuters", doc_id="a", embedding=[1.0, 0.0, 0.0])
        new = Document(content="New", doc_id="d", embedding=[0.0, 0.0, 1.0])

        written = vector_store.upsert_documents([updated, new])

        assert written == 2
        assert vector_store.count() == 4
        assert vector_store.get_document("a").content == "Revised"

    def test_round_trip_through_json_file(self, tmp_path, sample_documents):
        path = tmp_path / "nested" / "vector_db.json"
        store = JsonVectorStore(JsonFileBackend(path))
        store.initialize()
        store.add_documents(sample_documents)

        reloaded = JsonVectorStore(JsonFileBackend(path))
        reloaded.initialize()

        assert reloaded.count() == 3
        assert reloaded.get_document("c").embedding == [0.7, 0.7, 0.0]
        assert reloaded.stats()["saved_at"] is not None
        assert json.loads(path.read_text(encoding="utf-8"))["savedAt"]

    def test_clear_empties_and_persists(self, vector_store, memory_backend, sample_documents):
        vector_store.add_documents(sample_documents)
        vector_store.clear()

        assert vector_store.count() == 0
        assert memory_backend.snapshot["documents"] == []

    def test_persistence_failure_rolls_back(self, sample_documents):
        backend = FailingBackend()
        store = JsonVectorStore(backend)
        store.initialize()
        store.add_documents(sample_documents[:1])

        backend.fail = True
        with pytest.raises(VectorStorePersistenceError):
            store.add_documents(sample_documents[1:])

        assert store.count() == 1
        assert store.get_document("b") is None

    def test_unwritable_path_raises_persistence_error(self, tmp_path, sample_documents):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        store = JsonVectorStore(JsonFileBackend(blocker / "vector_db.json"))
        store.initialize()

        with pytest.raises(VectorStorePersistenceError):
            store.add_documents(sample_documents)

        assert store.count() == 0


class TestSearch:
    """Tests for the cosine-similarity linear scan."""

    def test_results_sorted_descending(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        results = vector_store.search([1.0, 0.1, 0.0], top_k=3)

        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0].document.doc_id == "a"

    def test_top_k_limits_results(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        assert len(vector_store.search([1.0, 0.0, 0.0], top_k=2)) == 2

    def test_fewer_documents_than_k(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        assert len(vector_store.search([1.0, 0.0, 0.0], top_k=10)) == 3

    def test_non_positive_top_k_returns_nothing(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        assert vector_store.search([1.0, 0.0, 0.0], top_k=0) == []

    def test_identical_embedding_scores_one(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        [top] = vector_store.search([0.0, 1.0, 0.0], top_k=1)

        assert top.document.doc_id == "b"
        assert top.score == pytest.approx(1.0)

    def test_dimension_mismatch_scores_zero(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        results = vector_store.search([1.0, 0.0], top_k=3)

        assert len(results) == 3
        assert all(r.score == 0.0 for r in results)

    def test_ties_keep_insertion_order(self, vector_store):
        names = ("first", "second", "third")
        vector_store.add_documents(
            [Document(content=name, doc_id=name, embedding=[1.0, 1.0]) for name in names]
        )

        results = vector_store.search([2.0, 2.0], top_k=3)

        assert [r.document.doc_id for r in results] == ["first", "second", "third"]

    def test_search_has_no_side_effects(self, vector_store, memory_backend, sample_documents):
        vector_store.add_documents(sample_documents)
        saves = memory_backend.save_count

        vector_store.search([1.0, 0.0, 0.0], top_k=3)

        assert memory_backend.save_count == saves
        assert vector_store.count() == 3


class TestLookup:
    """Tests for get_document, count and stats."""

    def test_get_document_by_id(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        assert vector_store.get_document("b").source == "BBC"
        assert vector_store.get_document("missing") is None

    def test_stats(self, vector_store, sample_documents):
        vector_store.add_documents(sample_documents)

        stats = vector_store.stats()

        assert stats["initialized"] is True
        assert stats["count"] == 3
        assert stats["dimension"] == 3
