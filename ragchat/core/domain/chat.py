"""Chat-level models: session messages, context summaries and answers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .generation import GenerationOutcome


class Role(str, Enum):
    """Author of a session message."""

    USER = "user"
    ASSISTANT = "assistant"


class AnswerMode(str, Enum):
    """How the answer composer builds its prompt.

    Attributes:
        AUGMENTED: Qualifying context exists; prompt carries ``[Source i]`` blocks.
        CONVERSATIONAL: No qualifying context; the question is sent alone.
    """

    AUGMENTED = "augmented"
    CONVERSATIONAL = "conversational"


@dataclass
class ContextSummary:
    """A formatted context entry returned to clients alongside an answer."""

    index: int
    source: str
    summary: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "source": self.source,
            "summary": self.summary,
            "score": self.score,
        }


@dataclass
class SessionMessage:
    """One entry of a session's append-only chat log.

    Attributes:
        role: Who wrote the message.
        content: Message text.
        context: Formatted context attached to assistant answers.
        timestamp: Epoch milliseconds, assigned by the session store.
    """

    role: Role
    content: str
    context: list[ContextSummary] | None = None
    timestamp: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"role": self.role.value, "content": self.content}
        if self.context is not None:
            data["context"] = [item.to_dict() for item in self.context]
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionMessage":
        context = data.get("context")
        return cls(
            role=Role(data["role"]),
            content=data.get("content", ""),
            context=[ContextSummary(**item) for item in context] if context is not None else None,
            timestamp=data.get("timestamp"),
        )


@dataclass
class SessionInfo:
    """Activity summary of a session."""

    session_id: str
    is_active: bool
    last_activity: int | None = None


@dataclass
class ChatAnswer:
    """Result of one blocking chat turn.

    Attributes:
        answer: Flattened answer text (model output or fallback message).
        context: Score-sorted formatted context.
        mode: Which prompt construction was used.
        outcome: The tagged generation outcome, for callers that need the reason.
        session_id: Session the turn was recorded under, if any.
    """

    answer: str
    context: list[ContextSummary]
    mode: AnswerMode
    outcome: "GenerationOutcome"
    session_id: str | None = None


@dataclass
class StreamEvent:
    """One event of a streaming chat turn (``context``, ``answer_chunk`` or ``done``)."""

    type: str
    content: Any = None

    def to_dict(self) -> dict[str, Any]:
        if self.content is None:
            return {"type": self.type}
        return {"type": self.type, "content": self.content}


@dataclass
class StreamTranscript:
    """Accumulates streamed chunks into the final answer."""

    chunks: list[str] = field(default_factory=list)

    def add(self, chunk: str) -> None:
        self.chunks.append(chunk)

    @property
    def text(self) -> str:
        return "".join(self.chunks)
