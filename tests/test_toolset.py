"""Tests for the built-in canned tools and their selection by intent."""

from clawbot.agent.tool_executor import run_toolset
from clawbot.core.schema import Intent
from clawbot.tools import (
    ToolContext,
    get_tool_catalog,
)
from clawbot.tools.tables import (
    CURATED_TRENDS,
    GENERIC_INSIGHT,
    PATTERN_LIBRARY,
    RESEARCH_SNIPPETS,
)
from clawbot.tools.toolset import (
    NO_KEYWORDS_LINE,
    build_accelerator,
    resolve_focus,
    resolve_pattern_domain,
    signal_scan,
    strategy_weave,
    trend_pulse,
)


def _ctx(
    intent: Intent = Intent.ANALYSIS, keywords: list[str] | None = None, message: str = "x"
) -> ToolContext:
    return ToolContext(intent=intent, keywords=keywords or [], message=message)


def test_toolset_by_intent() -> None:
    """Signal Scan always runs first, followed by the intent's specialist tool."""

    expected = {
        Intent.BUILD: ["Signal Scan", "Build Accelerator"],
        Intent.RESEARCH: ["Signal Scan", "Trend Pulse"],
        Intent.ANALYSIS: ["Signal Scan", "Trend Pulse"],
        Intent.STRATEGY: ["Signal Scan", "Strategy Weave"],
        Intent.ASSIST: ["Signal Scan", "Strategy Weave"],
    }
    for intent, names in expected.items():
        assert [tool.name for tool in run_toolset(_ctx(intent))] == names


def test_tool_types() -> None:
    """Scans and pulses are analysis; weaves and accelerators are actions."""

    build = run_toolset(_ctx(Intent.BUILD))
    strategy = run_toolset(_ctx(Intent.STRATEGY))
    assert [tool.type for tool in build] == ["analysis", "action"]
    assert [tool.type for tool in strategy] == ["analysis", "action"]


def test_signal_scan_without_keywords() -> None:
    """Keyword-free messages report the discovery placeholder."""

    result = signal_scan(_ctx(message="the and with"))
    assert result == f"Key tokens:\n{NO_KEYWORDS_LINE}\n\nWorkflow appetite: fast response"


def test_signal_scan_keywords_and_length() -> None:
    """At most four keywords are listed; long messages want multi-step support."""

    keywords = ["alpha", "bravo", "charlie", "delta", "echo"]
    result = signal_scan(_ctx(keywords=keywords, message="z" * 181))
    lines = result.split("\n")
    assert lines[:5] == ["Key tokens:", "- alpha", "- bravo", "- charlie", "- delta"]
    assert lines[-1] == "Workflow appetite: multi-step support"
    assert signal_scan(_ctx(message="z" * 180)).endswith("fast response")


def test_resolve_focus_rule_order() -> None:
    """Focus rules are tried in order, independent of keyword order."""

    assert resolve_focus(["market", "safety"]) == "security"
    assert resolve_focus(["retention"]) == "product"
    assert resolve_focus(["competitors"]) == "market"
    assert resolve_focus(["onboarding"]) == "ux"
    assert resolve_focus(["robots"]) == "robotics"
    assert resolve_focus(["weather"]) == "ai"
    assert resolve_focus([]) == "ai"


def test_trend_pulse_with_insight_and_default_trends() -> None:
    """Buckets without a trend list fall back to the default trends."""

    result = trend_pulse(_ctx(keywords=["security"]))
    default = CURATED_TRENDS["default"]
    assert result == (
        f"Signals:\n1. {default[0]}\n2. {default[1]}\n\nInsight: {RESEARCH_SNIPPETS['security']}"
    )


def test_trend_pulse_generic_insight() -> None:
    """Buckets without a curated insight use the generic one."""

    result = trend_pulse(_ctx(keywords=["robotics"]))
    assert f"1. {CURATED_TRENDS['robotics'][0]}" in result
    assert "3." not in result
    assert result.endswith(f"Insight: {GENERIC_INSIGHT}")


def test_strategy_weave_domains() -> None:
    """Growth, roadmap and engineering checklists are picked from keywords."""

    assert resolve_pattern_domain(["conversion"]) == "growth"
    assert resolve_pattern_domain(["stakeholders"]) == "roadmap"
    assert resolve_pattern_domain(["database"]) == "engineering"
    result = strategy_weave(_ctx(Intent.STRATEGY, ["launch"]))
    assert result.split("\n") == [
        f"{idx}. {item}" for idx, item in enumerate(PATTERN_LIBRARY["roadmap"], 1)
    ]


def test_build_accelerator_ui_focus() -> None:
    """The first UI-ish keyword tilts the third checklist item."""

    result = build_accelerator(_ctx(Intent.BUILD, ["dashboard", "frontend", "interface"]))
    lines = result.split("\n")
    assert lines[0] == "Checklist:"
    assert len(lines) == 4
    assert lines[3] == "3. Design UI scaffolds highlighting frontend data hotspots."


def test_build_accelerator_generic() -> None:
    """Without UI keywords the checklist ends with the evaluation harness item."""

    result = build_accelerator(_ctx(Intent.BUILD, ["dashboard"]))
    assert result.endswith("3. Focus on deterministic evaluation harness and typed tool schema.")


def test_tool_catalog() -> None:
    """The catalog lists each built-in tool with its triggering intents."""

    catalog = get_tool_catalog()
    assert catalog["Build Accelerator"]["intents"] == ["build"]
    assert catalog["Trend Pulse"]["intents"] == ["analysis", "research"]
    assert len(catalog["Signal Scan"]["intents"]) == len(Intent)
    assert catalog["Strategy Weave"]["type"] == "action"
