"""Task graph construction: the ordered operating plan attached to a reply."""

from typing import (
    Dict,
    List,
    Tuple,
)

from clawbot.core.schema import (
    AgentTask,
    Intent,
)

BASE_TASKS: Tuple[Tuple[str, str], ...] = (
    ("Clarify outcome", "Capture the north-star metric or success definition before acting."),
    ("Assess constraints", "Identify timeline, resources, and risk tolerance."),
)

INTENT_TASKS: Dict[Intent, Tuple[str, str]] = {
    Intent.BUILD: (
        "Draft implementation plan",
        "Break the build into composable skills, tools, and verification hooks.",
    ),
    Intent.STRATEGY: (
        "Sequence milestones",
        "Map quick wins, core build, and reinforcement loops.",
    ),
    Intent.RESEARCH: (
        "Aggregate competitive signals",
        "Create a succinct brief with differentiators and threats.",
    ),
    Intent.ANALYSIS: ("Formulate diagnostics", "List hypotheses and validation experiments."),
}

TIMELINE_TASK = ("Timeline handshake", "Outline delivery cadence and review checkpoints.")


def build_task_graph(intent: Intent, content: str) -> List[AgentTask]:
    """Return the pending tasks for *intent*, plus a timeline task when *content* asks for one."""
    lower = content.lower()
    entries = list(BASE_TASKS)

    if Intent(intent) in INTENT_TASKS:
        entries.append(INTENT_TASKS[Intent(intent)])

    if "timeline" in lower or "deadline" in lower:
        entries.append(TIMELINE_TASK)

    return [AgentTask(title=title, detail=detail) for title, detail in entries]
