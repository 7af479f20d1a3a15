"""FastAPI application entrypoint for the chatbot relay."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from app.routers import chat
from app.routers.chat import cors_headers

# ── Logging setup ────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.groq_api_key:
        logger.info("Chatbot relay ready (model %s)", settings.chat_model)
    else:
        # Not fatal: every chat call answers with a configuration error instead
        logger.warning("GROQ_API_KEY is not configured — chat requests will fail")
    yield


app = FastAPI(
    title="Portfolio Terminal",
    description="Chatbot relay for the portfolio terminal widget",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS headers are set per response by the chat router, pre-flights included


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    """Malformed payloads still get the relay's ``{"error": ...}`` shape."""
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ())[1:]) or 'body'}: {e.get('msg', 'invalid')}"
        for e in errors
    ) or "Invalid request"
    logger.warning("Rejected chatbot request: %s", detail)
    return JSONResponse({"error": detail}, status_code=400, headers=cors_headers())


# Mount routers
app.include_router(chat.router, prefix="/api", tags=["chat"])


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "portfolio-terminal",
        "model": settings.chat_model,
        "credential_configured": bool(settings.groq_api_key),
    }
