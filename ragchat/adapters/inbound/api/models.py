"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Request body for sending a chat message.

    Fields are optional at the schema level so missing values produce the
    API's own 400 response rather than a 422 validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = Field(
        None,
        description="The user's message",
        json_schema_extra={"example": "What's new in renewable energy?"},
    )
    session_id: str | None = Field(None, alias="sessionId", description="Chat session id")


class ContextItem(BaseModel):
    """A retrieved context entry, sorted by score in responses."""

    index: int = Field(..., description="1-based position in retrieval order")
    source: str = Field(..., description="Source publication")
    summary: str = Field(..., description="Document content")
    score: float = Field(..., description="Cosine similarity to the query")


class ChatResponse(BaseModel):
    """Response for a blocking chat turn."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str = Field(..., description="Model answer or fallback message")
    context: list[ContextItem] = Field(default_factory=list)
    session_id: str = Field(..., alias="sessionId")


class ErrorResponse(BaseModel):
    """Plain error body used for request validation failures."""

    error: str = Field(..., description="Human-readable error message")
    details: str | None = Field(None, description="Underlying cause")


class SessionCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    created_at: str = Field(..., alias="createdAt")
    message: str


class HistoryMessage(BaseModel):
    role: str
    content: str
    context: list[ContextItem] | None = None
    timestamp: int | None = None


class SessionHistoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    history: list[HistoryMessage]
    count: int


class SessionClearedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    message: str
    cleared_at: str = Field(..., alias="clearedAt")


class SessionInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    is_active: bool = Field(..., alias="isActive")
    last_activity: int | None = Field(None, alias="lastActivity")


class HealthResponse(BaseModel):
    """Response model for health check."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="Health status")
    timestamp: str
    version: str
    redis: str = Field(..., description="connected or disconnected")
    vector_db: str = Field(..., alias="vectorDB", description="connected or disconnected")
    documents: int = Field(0, description="Stored document count")
    llm_configured: bool = Field(False, alias="llmConfigured")
