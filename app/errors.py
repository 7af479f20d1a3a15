"""Relay error taxonomy shared by the relay endpoint and the terminal client."""

from __future__ import annotations


class RelayError(Exception):
    """Base for every failure a chat exchange can end in.

    ``str(exc)`` is the user-facing reason; ``status_code`` is what the relay
    answers with when the error reaches its HTTP boundary.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    """Required configuration (e.g. the upstream credential) is missing."""


class UpstreamError(RelayError):
    """The completion provider (or the relay, seen from the client) answered non-2xx."""

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message or f"API error: {status}")
        self.status = status

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return self.status


class TransportError(RelayError):
    """Network failure or an unparsable response body."""
