"""Built-in canned tools: Signal Scan, Trend Pulse, Strategy Weave and Build Accelerator."""

import re
from typing import (
    Iterable,
    List,
)

from clawbot.common import (
    compile_rules,
    first_match,
)
from clawbot.config import settings
from clawbot.core.schema import (
    Intent,
    ToolType,
)
from clawbot.tools import (
    ToolContext,
    register_tool,
)
from clawbot.tools.tables import (
    BUILD_CHECKLIST,
    BUILD_FOCUS_PATTERN,
    CURATED_TRENDS,
    DEFAULT_DOMAIN,
    DEFAULT_FOCUS,
    DOMAIN_RULES,
    FALLBACK_DOMAIN,
    FOCUS_RULES,
    GENERIC_INSIGHT,
    PATTERN_LIBRARY,
    RESEARCH_SNIPPETS,
)

_FOCUS_RULES = compile_rules(FOCUS_RULES)
_DOMAIN_RULES = compile_rules(DOMAIN_RULES)
_BUILD_FOCUS = re.compile(BUILD_FOCUS_PATTERN)

NO_KEYWORDS_LINE = "- intent discovery pending (message was too short)"


def numbered(items: Iterable[str]) -> List[str]:
    """Prefix each item with its 1-based position."""
    return [f"{idx}. {item}" for idx, item in enumerate(items, start=1)]


def resolve_focus(keywords: List[str]) -> str:
    """Pick the research bucket for *keywords*."""
    return first_match(_FOCUS_RULES, keywords) or DEFAULT_FOCUS


def resolve_pattern_domain(keywords: List[str]) -> str:
    """Pick the pattern-library domain for *keywords*."""
    return first_match(_DOMAIN_RULES, keywords) or DEFAULT_DOMAIN


@register_tool(
    "Signal Scan", "Highlights dominant concepts and operational levers.", ToolType.ANALYSIS
)
def signal_scan(context: ToolContext) -> str:
    """List the leading keywords and how much workflow the message seems to want."""
    if context.keywords:
        lines = [f"- {keyword}" for keyword in context.keywords[:4]]
    else:
        lines = [NO_KEYWORDS_LINE]

    if len(context.message) > settings.LONG_MESSAGE_THRESHOLD:
        core_need = "multi-step support"
    else:
        core_need = "fast response"

    return "\n".join(["Key tokens:", *lines, "", f"Workflow appetite: {core_need}"])


@register_tool(
    "Trend Pulse",
    "Aggregates fast-moving market signals.",
    ToolType.ANALYSIS,
    intents=[Intent.RESEARCH, Intent.ANALYSIS],
)
def trend_pulse(context: ToolContext) -> str:
    """Two curated trends and one insight for the research focus."""
    focus = resolve_focus(context.keywords)
    insight = RESEARCH_SNIPPETS.get(focus, GENERIC_INSIGHT)
    trend_pool = CURATED_TRENDS.get(focus) or CURATED_TRENDS.get("default") or CURATED_TRENDS["ai"]

    return "\n".join(["Signals:", *numbered(trend_pool[:2]), "", f"Insight: {insight}"])


@register_tool(
    "Strategy Weave",
    "Maps heuristics to recommended operating cadence.",
    ToolType.ACTION,
    intents=[Intent.STRATEGY, Intent.ASSIST],
)
def strategy_weave(context: ToolContext) -> str:
    """The pattern-library checklist for the detected domain."""
    domain = resolve_pattern_domain(context.keywords)
    snippets = PATTERN_LIBRARY.get(domain) or PATTERN_LIBRARY[FALLBACK_DOMAIN]
    return "\n".join(numbered(snippets))


@register_tool(
    "Build Accelerator",
    "Turns build-focused intents into tactical traction.",
    ToolType.ACTION,
    intents=[Intent.BUILD],
)
def build_accelerator(context: ToolContext) -> str:
    """A build checklist, tilted towards UI work when the keywords mention it."""
    focus = next((k for k in context.keywords if _BUILD_FOCUS.search(k)), None)
    if focus:
        summary = f"Design UI scaffolds highlighting {focus} data hotspots."
    else:
        summary = "Focus on deterministic evaluation harness and typed tool schema."

    return "\n".join(["Checklist:", *numbered([*BUILD_CHECKLIST, summary])])
