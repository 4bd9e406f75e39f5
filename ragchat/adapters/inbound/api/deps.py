"""FastAPI dependency providers backed by the composition root."""

from ....composition import container
from ....core.ports import LLMPort, SessionStorePort, VectorStorePort
from ....core.services import ChatService


def get_chat_service() -> ChatService:
    return container.get_chat_service()


def get_vector_store() -> VectorStorePort:
    return container.get_vector_store()


def get_session_store() -> SessionStorePort:
    return container.get_session_store()


def get_llm() -> LLMPort:
    return container.get_llm()
