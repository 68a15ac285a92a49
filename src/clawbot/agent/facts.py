"""
Fact extraction from user messages.

Each user message is scanned with a handful of regex rules.  Matches become :class:`MemoryShard`
candidates which are then de-duplicated across the whole history by their summary text.
"""

import logging
import re
from typing import (
    Dict,
    Iterable,
    List,
    Optional,
)

from clawbot.core.schema import (
    ChatMessage,
    MemoryShard,
    Role,
)

logger = logging.getLogger(__name__)

_NAME = re.compile(r"my name is\s+([a-z\s]+)")
_ORG = re.compile(r"we (?:run|have|built)\s+([a-z\s]+)")
# A captured phrase stops at the first word that starts a new clause.
_CLAUSE_BREAK = re.compile(r"\b(?:and|but|so|we|i|our|who)\b")
_WORD_START = re.compile(r"\b\w")

CADENCE_SUMMARY = "User is sensitive to deadlines / launch timing."


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def _phrase(match: re.Match) -> str:
    return " ".join(_CLAUSE_BREAK.split(match.group(1), maxsplit=1)[0].split())


def detect_facts(content: str) -> List[MemoryShard]:
    """Return the fact candidates found in a single message (possibly none)."""
    memories: List[MemoryShard] = []
    normalized = content.lower()

    name_match = _NAME.search(normalized)
    if name_match and _phrase(name_match):
        memories.append(
            MemoryShard(
                label="user-profile",
                confidence=0.7,
                summary=f"User is {capitalize_words(_phrase(name_match))}",
            )
        )

    org_match = _ORG.search(normalized)
    if org_match and _phrase(org_match):
        memories.append(
            MemoryShard(
                label="org-focus",
                confidence=0.65,
                summary=f"Company context: {capitalize_words(_phrase(org_match))}",
            )
        )

    if "deadline" in normalized or "launch" in normalized:
        memories.append(MemoryShard(label="cadence", confidence=0.5, summary=CADENCE_SUMMARY))

    return memories


def extract_memories(messages: Iterable[ChatMessage]) -> Optional[List[MemoryShard]]:
    """
    Aggregate facts from every user message in *messages*.

    Shards are de-duplicated by exact summary, keeping the first one seen.  Returns *None* rather
    than an empty list when nothing was found, so callers can tell "no memory" from "empty memory".
    """
    unique: Dict[str, MemoryShard] = {}
    for message in messages:
        if message.role != Role.USER:
            continue
        for fact in detect_facts(message.content):
            unique.setdefault(fact.summary, fact)

    logger.debug("Extracted %d memory shard(s)", len(unique))
    return list(unique.values()) or None
