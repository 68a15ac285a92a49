"""Keyword extraction for free-text user messages."""

import re
from typing import List

from clawbot.config import settings

STOP_WORDS = frozenset(
    {
        "the",
        "and",
        "that",
        "with",
        "from",
        "this",
        "have",
        "what",
        "your",
        "about",
        "into",
        "their",
        "would",
        "there",
        "which",
        "could",
        "while",
        "where",
        "when",
    }
)

_PUNCTUATION = re.compile(r"[^\w\s-]", re.ASCII)
# Decimal, exponent and 0x/0b/0o literals; no digit separators.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|0x[0-9a-f]+|0b[01]+|0o[0-7]+")


def _is_number(token: str) -> bool:
    return _NUMBER.fullmatch(token) is not None


def extract_keywords(message: str, limit: int | None = None) -> List[str]:
    """
    Return the distinct candidate keywords of *message* in first-seen order.

    Tokens are lowercased with punctuation (other than hyphens) removed.  Tokens of three characters
    or fewer, stop words and numbers are dropped.  At most *limit* keywords are returned, defaulting
    to ``settings.KEYWORD_LIMIT``.
    """
    if limit is None:
        limit = settings.KEYWORD_LIMIT

    keywords: List[str] = []
    for token in _PUNCTUATION.sub(" ", message.lower()).split():
        if len(keywords) >= limit:
            break
        if len(token) <= 3 or token in STOP_WORDS or _is_number(token) or token in keywords:
            continue
        keywords.append(token)
    return keywords
