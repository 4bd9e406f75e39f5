"""Core services: similarity, relevance policy, answer composition, chat orchestration."""

from .answer_composer import AnswerComposer, ComposedPrompt, format_context
from .chat_service import ChatService
from .ingest_service import IngestService
from .retrieval_policy import RelevancePolicy, RetrievalDecision
from .similarity import cosine_similarity

__all__ = [
    "AnswerComposer",
    "ChatService",
    "ComposedPrompt",
    "IngestService",
    "RelevancePolicy",
    "RetrievalDecision",
    "cosine_similarity",
    "format_context",
]
