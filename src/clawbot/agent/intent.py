"""Keyword/regex intent classification."""

import logging

from clawbot.common import (
    compile_rules,
    first_match,
)
from clawbot.core.schema import Intent

logger = logging.getLogger(__name__)

# Ordered by priority: the first group with any matching alternative wins.
INTENT_RULES = compile_rules(
    [
        (
            Intent.BUILD,
            [r"build|create|code|prototype|implement|ship", r"wireframe|ui|frontend|architecture"],
        ),
        (
            Intent.RESEARCH,
            [r"research|investigate|survey|compare|market", r"trend|landscape|analysis"],
        ),
        (
            Intent.STRATEGY,
            [r"plan|strategy|roadmap|launch|roll", r"scale|operationalize|align|stakeholder"],
        ),
        (
            Intent.ANALYSIS,
            [r"debug|explain|reason|evaluate|assess", r"breakdown|decompose|why|risk"],
        ),
    ]
)


def detect_intent(message: str) -> Intent:
    """Classify *message* into one of the fixed intents.  Always returns a value."""
    normalized = message.lower()

    intent = first_match(INTENT_RULES, [normalized])
    if intent is None:
        if "launch" in normalized or "roadmap" in normalized:
            intent = Intent.STRATEGY
        elif "how" in normalized:
            intent = Intent.ASSIST
        else:
            intent = Intent.ANALYSIS

    logger.debug("Classified %r as %s", message[:80], intent.value)
    return intent
