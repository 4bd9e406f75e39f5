"""Unit tests for the deterministic and cached embedding providers."""

from unittest.mock import AsyncMock

import pytest

from ragchat.adapters.outbound.embeddings import CachedEmbeddingProvider, MockEmbeddingProvider
from ragchat.adapters.outbound.embeddings.cached_embedder import cache_key
from ragchat.adapters.outbound.embeddings.mock_embedder import text_hash

pytestmark = pytest.mark.unit


class TestMockEmbeddingProvider:
    """Tests for hash-seeded embeddings."""

    def test_text_hash_matches_rolling_hash(self):
        assert text_hash("") == 0
        assert text_hash("a") == 97
        assert text_hash("ab") == 97 * 31 + 98

    def test_text_hash_wraps_to_int32(self):
        value = text_hash("a fairly long string that overflows thirty-two bits")

        assert -(2**31) <= value < 2**31

    async def test_default_dimension(self):
        vector = await MockEmbeddingProvider().embed_query("hello")

        assert len(vector) == 384

    async def test_deterministic(self):
        provider = MockEmbeddingProvider(16)

        assert await provider.embed_query("same text") == await provider.embed_query("same text")
        assert await provider.embed_query("same text") != await provider.embed_query("other text")

    async def test_components_in_unit_interval(self):
        vector = await MockEmbeddingProvider(64).embed_query("bounds")

        assert all(0.0 <= x < 1.0 for x in vector)

    async def test_embed_mirrors_input_shape(self):
        provider = MockEmbeddingProvider(4)

        single = await provider.embed("one")
        batch = await provider.embed(["one", "two"])

        assert len(single) == 4
        assert len(batch) == 2
        assert batch[0] == single


class TestCachedEmbeddingProvider:
    """Tests for the cache-aside wrapper."""

    def test_cache_key_format(self):
        key = cache_key("hello")

        assert key == "embedding:2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"

    async def test_miss_computes_and_stores(self, session_store):
        provider = CachedEmbeddingProvider(MockEmbeddingProvider(4), session_store, ttl=60)

        vector = await provider.embed_query("hello")

        assert await session_store.get_json(cache_key("hello")) == vector

    async def test_hit_skips_provider(self, session_store):
        inner = MockEmbeddingProvider(4)
        inner.embed_query = AsyncMock(side_effect=AssertionError("should not be called"))
        await session_store.set_json(cache_key("hello"), [0.1, 0.2, 0.3, 0.4], ttl=60)

        vector = await CachedEmbeddingProvider(inner, session_store).embed_query("hello")

        assert vector == [0.1, 0.2, 0.3, 0.4]

    async def test_wrong_dimension_cache_entry_is_ignored(self, session_store):
        await session_store.set_json(cache_key("hello"), [0.1, 0.2], ttl=60)
        provider = CachedEmbeddingProvider(MockEmbeddingProvider(4), session_store)

        vector = await provider.embed_query("hello")

        assert len(vector) == 4

    async def test_embed_documents_uses_cache_per_text(self, session_store):
        provider = CachedEmbeddingProvider(MockEmbeddingProvider(4), session_store)

        vectors = await provider.embed_documents(["a", "b"])

        assert len(vectors) == 2
        assert await session_store.get_json(cache_key("b")) == vectors[1]
