"""
Pydantic models for Clawbot API requests and responses.
This module defines the request and response schemas used by the Clawbot API.
"""

from typing import (
    Any,
    Dict,
    List,
    Optional,
)

from pydantic import (
    BaseModel,
    Field,
)

from clawbot.core.schema import (
    ChatMessage,
    Role,
)


# ---------------------------------------------------------------------------
# Pydantic request / response schema
# ---------------------------------------------------------------------------
class MessageIn(BaseModel):
    """A history entry as sent by the caller; id and timestamp are optional."""

    id: Optional[str] = None
    role: Role
    content: str
    createdAt: Optional[str] = None  # pylint: disable=invalid-name

    def to_message(self) -> ChatMessage:
        """Convert to a :class:`ChatMessage`, backfilling a missing id or timestamp."""
        data = self.model_dump(exclude_none=True)
        return ChatMessage.model_validate(data)


class ChatRequest(BaseModel):
    """Incoming conversation history."""

    messages: List[MessageIn] = Field(..., min_length=1, description="Running chat history")


class ErrorResponse(BaseModel):
    """Body returned whenever the agent fails."""

    error: str


class ToolCatalogResponse(BaseModel):
    """Registered tools keyed by name."""

    tools: Dict[str, Dict[str, Any]]
