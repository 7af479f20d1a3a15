"""Chat relay service — wrap a visitor message with the persona prompt and forward it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from app.adapters.base import CompletionBackend
from app.adapters.groq import GroqCompletionBackend
from app.config import Settings
from app.errors import ConfigurationError
from app.schemas.chat import ChatTurn

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are Silvia, a friendly and helpful AI assistant integrated into Alyaa's personal portfolio website.

About the website and developer:
- This is Alyaa's (also known as Alisaa) personal portfolio/profile website
- Alyaa is a 20-year-old full stack developer and graphic designer
- Discord username: arcticayl
- Discord server: discord.gg/aerox
- The website was inspired by cursi.ng
- The website features a starfield background, music player, profile card, and this terminal interface

About you (Silvia):
- You are the AI chatbot embedded in this terminal
- You were created by Alyaa to help visitors learn more about them and their work
- You are friendly, helpful, and have a slightly playful personality
- You can answer questions about Alyaa, the website, or have general conversations

Keep your responses concise and terminal-friendly. Use simple text formatting."""

NO_RESPONSE = "No response received."


def build_messages(message: str, transcript: Iterable[ChatTurn] = ()) -> list[dict[str, str]]:
    """Return the ordered message list: system prompt, prior turns, new user message."""
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for turn in transcript:
        messages.append({"role": turn.role, "content": turn.content})
    messages.append({"role": "user", "content": message})
    return messages


def extract_content(data: dict[str, Any]) -> str:
    """Return the first choice's text, or the stock fallback when there is none."""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return NO_RESPONSE
    content = (choices[0].get("message") or {}).get("content")
    return content or NO_RESPONSE


class ChatRelay:
    """Stateless relay: every call carries its own transcript."""

    def __init__(self, backend: CompletionBackend, *, model: str, max_tokens: int) -> None:
        self.backend = backend
        self.model = model
        self.max_tokens = max_tokens

    async def complete(self, message: str, transcript: Iterable[ChatTurn] = ()) -> str:
        messages = build_messages(message, transcript)
        logger.info(
            "Forwarding chat message to %s (%d history turns)", self.model, len(messages) - 2
        )
        data = await self.backend.create_completion(
            messages, model=self.model, max_tokens=self.max_tokens
        )
        logger.info("Completion response received")
        return extract_content(data)


def build_relay(settings: Settings) -> ChatRelay:
    """Construct a relay from settings, failing fast when the credential is absent."""
    if not settings.groq_api_key:
        raise ConfigurationError("GROQ_API_KEY is not configured")
    backend = GroqCompletionBackend(
        settings.groq_api_key,
        settings.chat_completions_url,
        timeout=settings.upstream_timeout,
    )
    return ChatRelay(backend, model=settings.chat_model, max_tokens=settings.max_tokens)
