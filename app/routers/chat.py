"""Chatbot relay endpoint — forwards terminal messages to the completion service."""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import RelayError
from app.schemas.chat import ChatErrorResponse, ChatReply, ChatRequest
from app.services import chat_relay

logger = logging.getLogger(__name__)

router = APIRouter()


def cors_headers() -> dict[str, str]:
    """CORS headers attached to every relay response, pre-flights included."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }


@router.options("/chatbot")
async def chatbot_preflight():
    """Every pre-flight gets an empty success, whatever headers it asks for."""
    return Response(status_code=200, headers=cors_headers())


@router.post(
    "/chatbot",
    response_model=ChatReply,
    responses={500: {"model": ChatErrorResponse}},
)
async def chatbot(body: ChatRequest):
    """Relay one chat message.

    Client sends: {"message": "...", "chatHistory": [{"role": "user|assistant", "content": "..."}]}
    Server sends: {"content": "..."} or {"error": "..."} with a non-2xx status.
    """
    try:
        relay = chat_relay.build_relay(settings)
        content = await relay.complete(body.message, body.chat_history)
    except RelayError as exc:
        logger.error("Chatbot error: %s", exc)
        return JSONResponse(
            {"error": exc.message}, status_code=exc.status_code, headers=cors_headers()
        )
    return JSONResponse({"content": content}, headers=cors_headers())
