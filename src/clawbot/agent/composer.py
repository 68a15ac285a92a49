"""
Reply composition.

Turns the pipeline's intermediate results into the three-line reasoning trace and the markdown reply
shown to the user.  Both functions are pure: identical inputs give byte-identical output.
"""

from typing import (
    List,
    Optional,
    Sequence,
)

from clawbot.core.schema import (
    AgentTask,
    Intent,
    MemoryShard,
    ToolInvocation,
    ToolType,
)

NO_TOOLS_PLACEHOLDER = "_No specialised tools invoked; relying on reasoning._"

NEXT_STEPS = (
    "- Confirm the most urgent lane and I will extend the playbook.",
    "- Share constraints (team size, tech stack) to tighten the recommendation.",
    "- Ask for artefacts (pitch, deck, code scaffold) and I'll draft them.",
)


def indent_block(text: str, spaces: int = 2) -> str:
    """Indent every non-blank line of *text*; blank lines become empty."""
    pad = " " * spaces
    return "\n".join(f"{pad}{line}" if line.strip() else "" for line in text.split("\n"))


def humanize_intent(intent: Intent) -> str:
    """Human-readable mode label for *intent*."""
    value = Intent(intent).value
    if value == Intent.ASSIST.value:
        return "Fast assist"
    return value[:1].upper() + value[1:]


def compose_reasoning(
    intent: Intent,
    keywords: Sequence[str],
    tasks: Sequence[AgentTask],
    tools: Sequence[ToolInvocation],
) -> List[str]:
    """Return the three-sentence reasoning trace."""
    primary_keywords = ", ".join(keywords[:3]) or "insufficient data"
    tool_labels = ", ".join(tool.name for tool in tools)

    return [
        f"Intent classification: {Intent(intent).value.upper()} (signals: {primary_keywords}).",
        f"Toolkit assembled: {tool_labels or 'baseline response only'}.",
        f"Execution ready across {len(tasks)} structured tasks.",
    ]


def compose_reply(
    intent: Intent,
    keywords: Sequence[str],
    tasks: Sequence[AgentTask],
    tools: Sequence[ToolInvocation],
    memory: Optional[Sequence[MemoryShard]] = None,
) -> str:
    """Assemble the markdown reply.  Empty sections are left out, except Tooling Output."""
    focus = ", ".join(keywords[:5]) if keywords else "TBD"

    # Sections follow one another directly; only Memory Hooks is set off by a blank line.
    lines = [f"### Mode: {humanize_intent(intent)}", f"**Focus tokens:** {focus}"]

    if tasks:
        lines.append("### Operating Plan")
        lines.extend(f"{idx}. {task.title} — {task.detail}" for idx, task in enumerate(tasks, 1))

    lines.append("### Tooling Output")
    if tools:
        blocks = (
            f"**{tool.name}** ({ToolType(tool.type).value}):\n{indent_block(tool.result)}"
            for tool in tools
        )
        lines.append("\n\n".join(blocks))
    else:
        lines.append(NO_TOOLS_PLACEHOLDER)

    if memory:
        lines.append("")
        lines.append("### Memory Hooks")
        lines.extend(
            f"- {shard.summary} ({round(shard.confidence * 100)}% confidence)" for shard in memory
        )

    lines.append("### Next Steps")
    lines.extend(NEXT_STEPS)
    return "\n".join(lines)
