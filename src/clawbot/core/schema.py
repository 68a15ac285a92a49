"""
Schema definitions for the chat history and the agent turn built from it.

These data models are the contract between the HTTP boundary, the pipeline stages and any caller
that drives the agent directly.  They are request-scoped value objects: every model is frozen once
created and nothing in the pipeline mutates them.
"""

from enum import Enum
from typing import (
    List,
    Optional,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from clawbot.common import (
    new_id,
    utc_now_iso,
)


class Role(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Intent(str, Enum):
    """Coarse category of help the latest user message asks for."""

    RESEARCH = "research"
    STRATEGY = "strategy"
    BUILD = "build"
    ANALYSIS = "analysis"
    ASSIST = "assist"


class ToolType(str, Enum):
    """Whether a tool block informs the user or proposes actions."""

    ANALYSIS = "analysis"
    ACTION = "action"


class TaskStatus(str, Enum):
    """Lifecycle of an agent task."""

    PENDING = "pending"
    COMPLETE = "complete"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)


class ChatMessage(_Frozen):
    """One entry of the running conversation supplied by the caller."""

    id: str = Field(default_factory=new_id)
    role: Role
    content: str
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")


class ToolInvocation(_Frozen):
    """A canned informational or action block attached to a reply."""

    id: str = Field(default_factory=new_id)
    name: str
    description: str
    result: str
    type: ToolType


class AgentTask(_Frozen):
    """A follow-up action in the reply's operating plan."""

    id: str = Field(default_factory=new_id)
    title: str
    detail: str
    status: TaskStatus = TaskStatus.PENDING


class MemoryShard(_Frozen):
    """A short fact candidate extracted from the user's messages."""

    id: str = Field(default_factory=new_id)
    label: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    summary: str


class AgentTurn(_Frozen):
    """The assistant's reply plus everything used to build it."""

    message: ChatMessage
    reasoning: List[str]
    intent: Intent
    tools: List[ToolInvocation] = Field(default_factory=list)
    tasks: List[AgentTask] = Field(default_factory=list)
    memory: Optional[List[MemoryShard]] = None  # None: no fact found, omitted on the wire
