"""Chat orchestration: embed, search, threshold, generate, record history."""

import logging
from collections.abc import AsyncIterator

from ..domain import (
    ChatAnswer,
    ContextSummary,
    Role,
    SessionMessage,
    StreamEvent,
    StreamTranscript,
)
from ..domain.exceptions import EmbeddingError, EmptyQueryError, QueryTooLongError
from ..ports.embedding_port import EmbeddingPort
from ..ports.session_store_port import SessionStorePort
from ..ports.vector_store_port import VectorStorePort
from .answer_composer import AnswerComposer, format_context
from .retrieval_policy import RelevancePolicy, RetrievalDecision

logger = logging.getLogger(__name__)


class ChatService:
    """Answers user messages with retrieval-augmented or conversational generation."""

    def __init__(
        self,
        embedder: EmbeddingPort,
        vector_store: VectorStorePort,
        policy: RelevancePolicy,
        composer: AnswerComposer,
        sessions: SessionStorePort | None = None,
        top_k: int = 5,
        max_query_length: int = 2000,
    ) -> None:
        """Initialize the service.

        Args:
            embedder: Embedding provider for queries.
            vector_store: Document store to search.
            policy: Relevance threshold policy.
            composer: Prompt builder and LLM caller.
            sessions: Optional session history store.
            top_k: Number of hits requested from the store.
            max_query_length: Longest accepted query, in characters.
        """
        self.embedder = embedder
        self.vector_store = vector_store
        self.policy = policy
        self.composer = composer
        self.sessions = sessions
        self.top_k = top_k
        self.max_query_length = max_query_length

    def validate_query(self, query: str | None) -> str:
        """Reject empty or oversized queries before any side effect.

        Raises:
            EmptyQueryError: If the query is empty or whitespace only.
            QueryTooLongError: If the query exceeds ``max_query_length``.
        """
        if not query or not query.strip():
            raise EmptyQueryError("Query cannot be empty or whitespace only")
        query = query.strip()
        if len(query) > self.max_query_length:
            raise QueryTooLongError(
                f"Query exceeds {self.max_query_length} characters",
                context={"length": len(query)},
            )
        return query

    async def retrieve(self, query: str) -> RetrievalDecision:
        """Embed the query, search the store and apply the relevance threshold.

        Raises:
            EmbeddingError: If the embedder fails.
        """
        try:
            query_embedding = await self.embedder.embed_query(query)
        except Exception as e:
            raise EmbeddingError(
                "Failed to embed query", cause=e, context={"query_length": len(query)}
            ) from e
        hits = self.vector_store.search(query_embedding, self.top_k)
        decision = self.policy.partition(hits)

        logger.info(
            'Query: "%s" | Found %d results, %d above threshold (%s)',
            query,
            len(hits),
            len(decision.context),
            self.policy.threshold,
        )
        return decision

    async def ask(self, query: str, session_id: str | None = None) -> ChatAnswer:
        """Answer one message (blocking delivery).

        Args:
            query: The user's message.
            session_id: Session to record the exchange under.

        Returns:
            ChatAnswer with flattened text, formatted context and the outcome.
        """
        query = self.validate_query(query)
        decision = await self.retrieve(query)

        outcome = await self.composer.generate(query, decision.context)
        context = format_context(decision.context)

        await self._record(session_id, query, outcome.text, context)

        return ChatAnswer(
            answer=outcome.text,
            context=context,
            mode=decision.mode,
            outcome=outcome,
            session_id=session_id,
        )

    async def ask_stream(
        self, query: str, session_id: str | None = None
    ) -> AsyncIterator[StreamEvent]:
        """Answer one message incrementally.

        Emits a ``context`` event first when any context qualified, then one
        ``answer_chunk`` per increment, records history, and ends with ``done``.
        """
        query = self.validate_query(query)
        decision = await self.retrieve(query)
        context = format_context(decision.context)

        if context:
            yield StreamEvent("context", [item.to_dict() for item in context])

        transcript = StreamTranscript()
        async for chunk in self.composer.stream(query, decision.context):
            transcript.add(chunk)
            yield StreamEvent("answer_chunk", chunk)

        await self._record(session_id, query, transcript.text, context)
        yield StreamEvent("done")

    async def _record(
        self,
        session_id: str | None,
        query: str,
        answer: str,
        context: list[ContextSummary],
    ) -> None:
        """Append the user message and the assistant answer to the session log."""
        if not session_id or self.sessions is None:
            return
        await self.sessions.append(session_id, SessionMessage(Role.USER, query))
        await self.sessions.append(
            session_id, SessionMessage(Role.ASSISTANT, answer, context=context)
        )
