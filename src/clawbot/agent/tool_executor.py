"""Dispatches tools registered in ``clawbot.tools`` and wraps errors."""

import logging
from typing import List

from clawbot.core.schema import ToolInvocation
from clawbot.tools import (
    TOOL_REGISTRY,
    ToolContext,
)

logger = logging.getLogger(__name__)


class ToolExecutionError(RuntimeError):
    """Raised when a requested tool cannot run or fails."""


def execute_tool(name: str, context: ToolContext) -> ToolInvocation:
    """
    Look up *name* in the registry and run it against *context*.

    Parameters
    ----------
    name:
        The registered tool name.
    context:
        Intent, keywords and raw message handed to the tool.

    Returns
    -------
    ToolInvocation
        A fresh invocation carrying the tool's metadata and result text.

    Raises
    ------
    ToolExecutionError
        If the tool is missing or its invocation raises an exception.
    """
    spec = TOOL_REGISTRY.get(name)
    if spec is None:
        raise ToolExecutionError(f"Tool '{name}' is not registered.")

    try:
        logger.debug("Executing tool '%s' for intent=%s", name, context.intent)
        result = spec.fn(context)
    except TypeError as exc:
        # Signature mismatch: give the caller a clean exception.
        logger.exception("Argument error while executing tool '%s'", name)
        raise ToolExecutionError(f"Invalid arguments for tool '{name}': {exc}") from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unhandled error in tool '%s'", name)
        raise ToolExecutionError(f"Tool '{name}' raised an error: {exc}") from exc

    return ToolInvocation(
        name=spec.name, description=spec.description, result=result, type=spec.type
    )


def run_toolset(context: ToolContext) -> List[ToolInvocation]:
    """Run every registered tool that applies to ``context.intent``, in registration order."""
    return [
        execute_tool(spec.name, context)
        for spec in TOOL_REGISTRY.values()
        if spec.applies_to(context.intent)
    ]
