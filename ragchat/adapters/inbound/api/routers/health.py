"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from ..... import __version__
from .....core.ports import LLMPort, SessionStorePort, VectorStorePort
from ..deps import get_llm, get_session_store, get_vector_store
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthResponse, response_model_by_alias=True)
async def health_check(
    vector_store: VectorStorePort = Depends(get_vector_store),
    sessions: SessionStorePort = Depends(get_session_store),
    llm: LLMPort = Depends(get_llm),
) -> HealthResponse:
    """Report service status and the state of each backing component."""
    stats = vector_store.stats()
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        redis="connected" if sessions.available else "disconnected",
        vector_db="connected" if stats.get("initialized") else "disconnected",
        documents=stats.get("count", 0),
        llm_configured=llm.configured,
    )
