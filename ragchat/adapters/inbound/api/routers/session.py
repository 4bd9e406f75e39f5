"""Session management endpoints."""

import uuid
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from .....config.settings import settings
from .....core.ports import SessionStorePort
from ..deps import get_session_store
from ..models import (
    SessionClearedResponse,
    SessionCreatedResponse,
    SessionHistoryResponse,
    SessionInfoResponse,
)

router = APIRouter(prefix="/api/session", tags=["session"])


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.post("/create", response_model=SessionCreatedResponse, response_model_by_alias=True)
async def create_session() -> SessionCreatedResponse:
    """Create a new session id. Nothing is stored until the first message."""
    return SessionCreatedResponse(
        session_id=str(uuid.uuid4()),
        created_at=_now(),
        message="Session created successfully",
    )


@router.get(
    "/{session_id}/history",
    response_model=SessionHistoryResponse,
    response_model_by_alias=True,
)
async def get_history(
    session_id: str,
    limit: int | None = Query(None, ge=1, le=1000),
    sessions: SessionStorePort = Depends(get_session_store),
) -> SessionHistoryResponse:
    """Return up to ``limit`` messages of a session, oldest first.

    ``limit`` defaults to ``settings.history_limit``.
    """
    history = await sessions.history(session_id, limit or settings.history_limit)
    return SessionHistoryResponse(
        session_id=session_id,
        history=[message.to_dict() for message in history],
        count=len(history),
    )


@router.delete("/{session_id}", response_model=SessionClearedResponse, response_model_by_alias=True)
async def clear_session(
    session_id: str,
    sessions: SessionStorePort = Depends(get_session_store),
) -> SessionClearedResponse:
    """Delete a session's history."""
    await sessions.clear(session_id)
    return SessionClearedResponse(
        session_id=session_id,
        message="Session cleared successfully",
        cleared_at=_now(),
    )


@router.get("/{session_id}", response_model=SessionInfoResponse, response_model_by_alias=True)
async def get_session(
    session_id: str,
    sessions: SessionStorePort = Depends(get_session_store),
) -> SessionInfoResponse:
    """Report whether a session has history and its last activity timestamp."""
    info = await sessions.info(session_id)
    return SessionInfoResponse(
        session_id=session_id,
        is_active=info.is_active,
        last_activity=info.last_activity,
    )
