"""HTTP client the terminal session uses to reach the chatbot relay."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

import httpx

from app.config import Settings
from app.errors import TransportError, UpstreamError
from app.terminal.state import TranscriptEntry

logger = logging.getLogger(__name__)


class ChatBackend(Protocol):
    """What the session needs from a relay: one reply per message, or a ``RelayError``."""

    async def complete(self, message: str, transcript: Iterable[TranscriptEntry]) -> str: ...


def _error_detail(resp: httpx.Response) -> str | None:
    try:
        payload = resp.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return None


class RelayClient:
    """POSTs ``{message, chatHistory}`` to the relay and returns ``content``.

    Every failure surfaces as a :class:`~app.errors.RelayError` subclass so
    the session has a single thing to catch.
    """

    def __init__(
        self,
        url: str,
        *,
        token: str = "",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._token = token
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> RelayClient:
        return cls(settings.relay_url, token=settings.relay_token, timeout=settings.relay_timeout)

    async def complete(self, message: str, transcript: Iterable[TranscriptEntry]) -> str:
        payload = {
            "message": message,
            "chatHistory": [{"role": e.role, "content": e.text} for e in transcript],
        }
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            async with httpx.AsyncClient(**kwargs) as client:
                resp = await client.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Relay call to %s failed: %s", self.url, exc)
            raise TransportError(str(exc) or "Failed to get response.") from exc

        if not resp.is_success:
            raise UpstreamError(resp.status_code, _error_detail(resp))

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransportError("Invalid response from chatbot relay") from exc
        if not isinstance(data, dict):
            raise TransportError("Invalid response from chatbot relay")
        if isinstance(data.get("error"), str):
            raise TransportError(data["error"])
        return data.get("content") or "No response received."
