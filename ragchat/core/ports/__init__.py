"""Ports (abstract interfaces) the core services depend on."""

from .embedding_port import EmbeddingPort
from .llm_port import GenerativeModelPort, LLMPort
from .session_store_port import SessionStorePort
from .vector_store_port import VectorStorePort

__all__ = [
    "EmbeddingPort",
    "GenerativeModelPort",
    "LLMPort",
    "SessionStorePort",
    "VectorStorePort",
]
