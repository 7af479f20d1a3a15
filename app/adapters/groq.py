"""Groq adapter — OpenAI-compatible ``/chat/completions`` over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.adapters.base import CompletionBackend
from app.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

# Upstream error bodies can be large HTML pages; only log the head
_MAX_LOGGED_BODY = 500


class GroqCompletionBackend(CompletionBackend):
    """Bearer-authenticated client for a single completions endpoint.

    A fresh ``httpx.AsyncClient`` is opened per call unless *transport* or
    *client* is supplied (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return httpx.AsyncClient(**kwargs)

    async def create_completion(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        max_tokens: int,
    ) -> dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = {"model": model, "messages": messages, "max_tokens": max_tokens}

        try:
            async with self._client() as client:
                resp = await client.post(self._url, json=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Completion request to %s failed: %s", self._url, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            logger.error(
                "Groq API error: %d %s", resp.status_code, resp.text[:_MAX_LOGGED_BODY]
            )
            raise UpstreamError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from completion service: {exc}") from exc
        if not isinstance(data, dict):
            raise TransportError("Unexpected completion payload")
        return data
