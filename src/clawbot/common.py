"""Common utility functions for the project."""

import re
import uuid
from datetime import (
    datetime,
    timezone,
)
from enum import Enum
from typing import (
    Any,
    Iterable,
    NamedTuple,
    Optional,
    Sequence,
)


class AnsiColors(str, Enum):
    """
    ANSI color codes for terminal output.
    """

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[33m"
    BLUE = "\033[94m"


def colored_print(text: str, color: AnsiColors, *args: Any, **kwargs: Any) -> None:
    """
    Print text in color.

    Args:
        text: The text to print
        color: The color to use (AnsiColors enum)
        args: Additional positional arguments for print
        kwargs: Additional keyword arguments for print
    """
    print(f"{color.value}{text}\033[0m", *args, **kwargs)  # ANSI reset at the end


def new_id() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# First-match rules
# ---------------------------------------------------------------------------
class Rule(NamedTuple):
    """A result paired with the regex alternatives that select it."""

    result: Any
    patterns: Sequence["re.Pattern[str]"]


def compile_rules(table: Iterable[tuple[Any, Sequence[str]]]) -> tuple[Rule, ...]:
    """Compile ``(result, [regex, ...])`` pairs into an ordered rule table."""
    return tuple(Rule(result, tuple(re.compile(p) for p in patterns)) for result, patterns in table)


def first_match(rules: Sequence[Rule], texts: Iterable[str]) -> Optional[Any]:
    """
    Return the result of the first rule matching any of *texts*.

    Rules are tried in order; within a rule, any pattern matching any text is a hit.  Returns *None*
    when no rule matches so callers can apply their own default.
    """
    candidates = list(texts)
    for rule in rules:
        if any(pattern.search(text) for pattern in rule.patterns for text in candidates):
            return rule.result
    return None
