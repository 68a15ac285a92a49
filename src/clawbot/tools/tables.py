"""
Static lookup tables used by the canned tools.

These are read-only: tools only ever index into them and fall back to defaults for missing keys.
"""

from types import MappingProxyType
from typing import (
    Mapping,
    Tuple,
)

CURATED_TRENDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "ai": (
            "Lightweight on-device reasoning chips are enabling embedded copilots.",
            "Mixture-of-agents workflows are outperforming single LLM setups for operations.",
            "Autonomous evaluation loops are the new differentiator for AI products.",
        ),
        "robotics": (
            "Low-latency vision transformers are unlocking sub-mm precision grasping.",
            "Composable motion stacks let teams iterate faster by swapping planners.",
            "Digital twin simulations cut robot testing time in half for top labs.",
        ),
        "product": (
            "Adaptive UX that reacts to user intent increases activation conversion.",
            "Ops teams adopt AI-first war rooms to triage incidents in minutes.",
            "Multi-modal onboarding content lifts enterprise adoption by 20%+.",
        ),
        "default": (
            "Teams that pair autonomous agents with human oversight stay compliant.",
            "Continuous knowledge distillation keeps AI copilots aligned with brand voice.",
            "Carving agentic workflows into atomic skills improves monitoring and testing.",
        ),
    }
)

PATTERN_LIBRARY: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "roadmap": (
            "Define a north-star metric to anchor the outcome.",
            "Layer quick-win experiments before platform-level investments.",
            "Document guardrails and review cadence for autonomous loops.",
        ),
        "engineering": (
            "Instrument every agent action with typed telemetry events.",
            "Use deterministic evaluation suites before production rollouts.",
            "Mirror prod-like sandboxes to test tool side-effects safely.",
        ),
        "growth": (
            "Craft tiny in-product moments for the agent to prove value fast.",
            "Bundle recap emails so stakeholders trust autonomous workflows.",
            "Offer fallbacks to human experts to protect high-value accounts.",
        ),
    }
)

RESEARCH_SNIPPETS: Mapping[str, str] = MappingProxyType(
    {
        "market": (
            "VC focus pivots to vertically-integrated AI stacks; valuations favor proprietary data "
            "loops over generic wrappers."
        ),
        "security": (
            "Runtime policy enforcement and action simulators reduce agent misfires by 35% in "
            "red-team benchmarks."
        ),
        "ux": (
            "Adaptive feedback layers (ghost text, inline previews) increase completion for "
            "complex agent prompts."
        ),
    }
)

GENERIC_INSIGHT = "Teams that invest in evaluation harnesses keep agent drift under control."

# Keyword regexes selecting a research focus, first match wins.
FOCUS_RULES = (
    ("security", (r"security|guardrail|safety",)),
    ("product", (r"activation|north star|retention",)),
    ("market", (r"market|competitor|landscape",)),
    ("ux", (r"ux|interface|onboarding",)),
    ("robotics", (r"robot|mechanical",)),
)
DEFAULT_FOCUS = "ai"

# Keyword regexes selecting a pattern-library domain, first match wins.
DOMAIN_RULES = (
    ("growth", (r"growth|marketing|conversion",)),
    ("roadmap", (r"launch|roadmap|stakeholder",)),
)
DEFAULT_DOMAIN = "engineering"
FALLBACK_DOMAIN = "roadmap"

BUILD_FOCUS_PATTERN = r"ui|interface|frontend"
BUILD_CHECKLIST = (
    "Draft agent skill graph (intent -> tools -> outcomes).",
    "Model telemetry events before wiring new actions.",
)
