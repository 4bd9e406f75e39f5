"""FastAPI application for the ragchat backend."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from .... import __version__
from ....adapters.outbound.session import RedisSessionStore
from ....composition import container
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import RagChatError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .routers import chat, health, session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize backing services on startup and release them on shutdown.

    The vector store is required; Redis and the LLM are optional and only
    logged when unavailable.
    """
    setup_logging(settings.log_level, json_format=settings.log_json)
    settings.ensure_directories()

    vector_store = container.get_vector_store()
    vector_store.initialize()
    logger.info("Vector database initialized (%d documents)", vector_store.count())

    sessions = container.get_session_store()
    if isinstance(sessions, RedisSessionStore):
        await sessions.connect()
    if not sessions.available:
        logger.warning("Could not connect to Redis. Continuing without session history.")

    llm = container.get_llm()
    if llm.configured:
        models = await llm.list_generation_models()
        if models:
            logger.info("Gemini LLM initialized (%d models available)", len(models))
        else:
            logger.warning("Gemini LLM configured but no compatible models were found")
    else:
        logger.warning("Gemini LLM not configured (GEMINI_API_KEY missing)")

    logger.info("RAG chatbot backend ready on port %s", settings.port)
    yield

    if isinstance(sessions, RedisSessionStore):
        await sessions.close()
    logger.info("RAG chatbot backend shutting down...")


def create_app() -> FastAPI:
    """Build the FastAPI application with routers, CORS and error handlers."""
    app = FastAPI(
        title="ragchat API",
        description="Retrieval-augmented news chat backend with streaming answers.",
        version=__version__,
        lifespan=lifespan,
    )

    allow_all = settings.cors_origin == "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else [settings.cors_origin],
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(session.router)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/api/health")

    @app.exception_handler(RagChatError)
    async def ragchat_error_handler(request: Request, exc: RagChatError) -> JSONResponse:
        """Render ragchat errors as structured JSON with a mapped status code."""
        log_exception(
            exc,
            level=logging.WARNING if get_http_status_code(exc) < 500 else logging.ERROR,
            extra_context={"path": str(request.url.path), "method": request.method},
        )
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=exc.to_dict(include_trace=settings.debug),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed request bodies are client errors with no side effects."""
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": str(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Render unhandled exceptions as structured JSON."""
        log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=format_exception_json(exc, include_trace=settings.debug),
        )

    return app


app = create_app()

__all__ = ["app", "create_app"]
