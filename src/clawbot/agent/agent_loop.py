"""Main orchestration pass for Clawbot: one message history in, one agent turn out."""

from __future__ import annotations

import logging
from typing import (
    Optional,
    Sequence,
)

from clawbot.agent.composer import (
    compose_reasoning,
    compose_reply,
)
from clawbot.agent.facts import extract_memories
from clawbot.agent.intent import detect_intent
from clawbot.agent.keywords import extract_keywords
from clawbot.agent.tasks import build_task_graph
from clawbot.agent.tool_executor import run_toolset
from clawbot.core.schema import (
    AgentTurn,
    ChatMessage,
    Role,
)
from clawbot.tools import ToolContext

logger = logging.getLogger(__name__)


class MissingUserMessageError(ValueError):
    """Raised when the supplied history contains no user message."""

    def __init__(self) -> None:
        super().__init__("User message required")


def latest_user_message(messages: Sequence[ChatMessage]) -> Optional[ChatMessage]:
    """Return the most recent message authored by the user, if any."""
    return next((msg for msg in reversed(messages) if msg.role == Role.USER), None)


class SyntheticAgent:
    """Scripted responder that classifies, plans and templates a reply."""

    def process(self, messages: Sequence[ChatMessage]) -> AgentTurn:
        """
        Build the assistant's turn for the running conversation *messages*.

        The latest user message drives intent, keywords, tasks and tools; facts are gathered from
        every user message.  *messages* is never modified.

        Raises
        ------
        MissingUserMessageError
            If *messages* holds no message with role ``user``.
        """
        user_message = latest_user_message(messages)
        if user_message is None:
            raise MissingUserMessageError()

        content = user_message.content
        intent = detect_intent(content)
        keywords = extract_keywords(content)
        tasks = build_task_graph(intent, content)
        tools = run_toolset(ToolContext(intent=intent, keywords=keywords, message=content))
        memory = extract_memories(messages)
        reasoning = compose_reasoning(intent, keywords, tasks, tools)
        reply = compose_reply(intent, keywords, tasks, tools, memory)

        logger.info(
            "Intent %s with %d task(s) and tools %s",
            intent.value,
            len(tasks),
            [tool.name for tool in tools],
        )

        return AgentTurn(
            message=ChatMessage(role=Role.ASSISTANT, content=reply),
            reasoning=reasoning,
            intent=intent,
            tools=tools,
            tasks=tasks,
            memory=memory,
        )
