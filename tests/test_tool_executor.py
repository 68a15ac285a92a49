"""
Basic sanity tests for the tool executor.

Run with:
$ pytest -q
"""

from clawbot.agent.tool_executor import (
    ToolExecutionError,
    execute_tool,
    run_toolset,
)
from clawbot.core.schema import (
    Intent,
    ToolType,
)
from clawbot.tools import (
    ToolContext,
    register_tool,
)


# These are stub tools for testing purposes; an empty intent set keeps them out of run_toolset.
@register_tool("Echo", "Echo the message back.", ToolType.ANALYSIS, intents=[])
def _echo(context: ToolContext) -> str:
    """Return the raw message (used only for tests)."""

    return context.message


@register_tool("Broken", "Always fails.", ToolType.ACTION, intents=[])
def _broken(context: ToolContext) -> str:
    """Raise unconditionally (used only for tests)."""

    raise KeyError(context.message)


CONTEXT = ToolContext(intent=Intent.BUILD, message="ship it", keywords=["ship"])


def test_execute_tool_success() -> None:
    """Executor should wrap the tool's text in a fresh invocation."""

    invocation = execute_tool("Echo", CONTEXT)
    assert invocation.name == "Echo"
    assert invocation.description == "Echo the message back."
    assert invocation.type == "analysis"
    assert invocation.result == "ship it"
    assert invocation.id


def test_execute_tool_missing() -> None:
    """Executor should raise *ToolExecutionError* for an unknown tool."""

    try:
        execute_tool("not_a_tool", CONTEXT)
    except ToolExecutionError as exc:
        assert "not_a_tool" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("ToolExecutionError was not raised")


def test_execute_tool_failure() -> None:
    """Executor should raise *ToolExecutionError* when the tool itself raises."""

    try:
        execute_tool("Broken", CONTEXT)
    except ToolExecutionError as exc:
        assert "raised an error" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("ToolExecutionError was not raised")


def test_register_duplicate_name() -> None:
    """Registering the same tool name twice is rejected."""

    try:
        register_tool("Echo", "Again.", ToolType.ANALYSIS)
    except ValueError as exc:
        assert "already registered" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("ValueError was not raised")


def test_run_toolset_skips_explicit_only_tools() -> None:
    """Tools registered with no intents never run automatically."""

    names = [tool.name for tool in run_toolset(CONTEXT)]
    assert "Echo" not in names
    assert "Broken" not in names


def test_invocation_ids_are_fresh() -> None:
    """Every run creates new invocations."""

    first = execute_tool("Echo", CONTEXT)
    second = execute_tool("Echo", CONTEXT)
    assert first.id != second.id
