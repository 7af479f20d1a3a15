"""Abstract base class for chat-completion backends.

Swap Groq for another OpenAI-compatible provider by implementing this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class CompletionBackend(ABC):
    """Contract that any completion provider must satisfy."""

    @abstractmethod
    async def create_completion(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Send the assembled message list and return the decoded response body.

        Raises ``UpstreamError`` on a non-success status and ``TransportError``
        on network or decoding failures.
        """
