"""Domain models for ragchat.

- document: Document and SearchResult for the vector store
- chat: session messages, context summaries, answers and stream events
- generation: tagged generation outcomes (Ok, Degraded, Unavailable)

All models are re-exported here:

    from ragchat.core.domain import Document, SearchResult, ContextSummary
"""

from .chat import (
    AnswerMode,
    ChatAnswer,
    ContextSummary,
    Role,
    SessionInfo,
    SessionMessage,
    StreamEvent,
    StreamTranscript,
)
from .document import Document, SearchResult
from .generation import Degraded, FallbackReason, GenerationOutcome, Ok, Unavailable

__all__ = [
    # Document models
    "Document",
    "SearchResult",
    # Chat models
    "AnswerMode",
    "ChatAnswer",
    "ContextSummary",
    "Role",
    "SessionInfo",
    "SessionMessage",
    "StreamEvent",
    "StreamTranscript",
    # Generation outcomes
    "FallbackReason",
    "GenerationOutcome",
    "Ok",
    "Degraded",
    "Unavailable",
]
