"""Chat schemas for the HTTP relay."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    """One prior exchange entry as it travels on the wire."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Inbound message from the terminal."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    chat_history: list[ChatTurn] = Field(default_factory=list, alias="chatHistory")


class ChatReply(BaseModel):
    content: str


class ChatErrorResponse(BaseModel):
    error: str
