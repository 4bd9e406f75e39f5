"""Chat endpoints: blocking send and WebSocket streaming."""

import json
import logging
from contextlib import aclosing

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse

from .....core.domain.exceptions import MissingFieldError, RagChatError
from .....core.services import ChatService
from ....common.exception_handler import format_exception_json
from ..deps import get_chat_service
from ..models import ChatRequest, ChatResponse, ContextItem, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])

MISSING_FIELDS_ERROR = "Message and sessionId required"


def require_fields(message: str | None, session_id: str | None) -> None:
    """Raise MissingFieldError unless both message and session id are non-empty."""
    fields = {"message": message, "sessionId": session_id}
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise MissingFieldError(MISSING_FIELDS_ERROR, context={"missing": missing})


@router.post(
    "/send",
    response_model=ChatResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing message or sessionId"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def send_message(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse | JSONResponse:
    """Send a message and get the assistant's answer with its context.

    Args:
        request: Message and session id.

    Returns:
        ChatResponse with the answer, score-sorted context and session id.
    """
    try:
        require_fields(request.message, request.session_id)
    except MissingFieldError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    try:
        result = await service.ask(request.message, request.session_id)
    except RagChatError:
        raise
    except Exception as e:
        logger.exception("Error in /send: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process message", "details": str(e)},
        )

    return ChatResponse(
        answer=result.answer,
        context=[ContextItem(**item.to_dict()) for item in result.context],
        session_id=request.session_id,
    )


@router.websocket("/stream")
async def stream_chat(
    websocket: WebSocket,
    service: ChatService = Depends(get_chat_service),
) -> None:
    """Stream answers over a WebSocket.

    Each inbound JSON message ``{"message", "sessionId"}`` produces an optional
    ``context`` event, ``answer_chunk`` events and a final ``done`` event.
    """
    await websocket.accept()

    try:
        while True:
            raw = await websocket.receive_text()

            try:
                payload = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"error": "Invalid JSON payload"})
                continue

            message = payload.get("message") if isinstance(payload, dict) else None
            session_id = payload.get("sessionId") if isinstance(payload, dict) else None
            try:
                require_fields(message, session_id)
            except MissingFieldError as e:
                await websocket.send_json({"error": e.message})
                continue

            try:
                async with aclosing(service.ask_stream(message, session_id)) as events:
                    async for event in events:
                        await websocket.send_json(event.to_dict())
            except WebSocketDisconnect:
                raise
            except RagChatError as e:
                await websocket.send_json(format_exception_json(e))
            except Exception as e:
                logger.exception("WebSocket error: %s", e)
                await websocket.send_json({"error": str(e)})

    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")
