"""Composition root wiring adapters to the chat service.

Every factory is cached, so the API and the CLI each share one instance of
each component per process. Tests build their own instances instead.
"""

import logging
from functools import lru_cache

from ..adapters.outbound.embeddings import CachedEmbeddingProvider, MockEmbeddingProvider
from ..adapters.outbound.llm import GeminiLLMAdapter
from ..adapters.outbound.session import InMemorySessionStore, RedisSessionStore
from ..adapters.outbound.vector_store import JsonFileBackend, JsonVectorStore
from ..config.settings import settings
from ..core.ports import EmbeddingPort, SessionStorePort
from ..core.services import AnswerComposer, ChatService, RelevancePolicy

logger = logging.getLogger(__name__)


@lru_cache
def get_vector_store() -> JsonVectorStore:
    logger.info("Initializing JsonVectorStore at %s...", settings.vector_db_path)
    return JsonVectorStore(JsonFileBackend(settings.vector_db_path))


@lru_cache
def get_session_store() -> SessionStorePort:
    if not settings.redis_enabled:
        logger.info("Redis disabled, using in-memory session store")
        return InMemorySessionStore(history_ttl=settings.session_ttl_seconds)
    logger.info("Initializing RedisSessionStore...")
    return RedisSessionStore(
        url=settings.redis_url,
        password=settings.redis_password,
        history_ttl=settings.session_ttl_seconds,
    )


@lru_cache
def get_embedder() -> EmbeddingPort:
    logger.info("Initializing embedding provider (dimension=%d)...", settings.embedding_dimension)
    return CachedEmbeddingProvider(
        MockEmbeddingProvider(settings.embedding_dimension),
        get_session_store(),
        ttl=settings.embedding_cache_ttl_seconds,
    )


@lru_cache
def get_llm() -> GeminiLLMAdapter:
    logger.info("Initializing GeminiLLMAdapter...")
    return GeminiLLMAdapter(settings.gemini_api_key, preferred_model=settings.llm_model)


@lru_cache
def get_chat_service() -> ChatService:
    logger.info("Initializing ChatService...")
    return ChatService(
        embedder=get_embedder(),
        vector_store=get_vector_store(),
        policy=RelevancePolicy(settings.relevance_threshold),
        composer=AnswerComposer(get_llm()),
        sessions=get_session_store(),
        top_k=settings.top_k_results,
        max_query_length=settings.max_query_length,
    )
