"""
Pydantic data models for API requests and responses.
"""
from typing import Any, List, Literal, TypedDict
from pydantic import BaseModel, ConfigDict, Field


class Message(TypedDict):
    """Conversation turn as sent by the caller."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Chat request model with the conversation transcript.

    Individual turns are forwarded to the LLM untouched, so only the
    container is validated here.
    """
    model_config = ConfigDict(strict=True)

    messages: List[Any] = Field(..., min_length=1)


class ChatReply(BaseModel):
    """Successful chat response."""
    reply: str


class ErrorResponse(BaseModel):
    """Error response returned for every non-200 outcome."""
    error: str
