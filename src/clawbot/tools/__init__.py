"""
Tool registry for Clawbot.

This module provides a decorator to register tools and a registry to look them up by name.
A tool is a function taking a :class:`ToolContext` and returning the text of its result block; the
registry keeps the metadata (description, type, triggering intents) needed to wrap that text into a
:class:`~clawbot.core.schema.ToolInvocation`.
"""

import logging
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    NamedTuple,
    Optional,
    TypedDict,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from clawbot.core.schema import (
    Intent,
    ToolType,
)

logger = logging.getLogger(__name__)


class ToolContext(BaseModel):
    """Everything a tool may look at when producing its result."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    message: str
    keywords: List[str] = Field(default_factory=list)


ToolFn = Callable[[ToolContext], str]


class ToolSpec(NamedTuple):
    """A registered tool and the metadata describing when and how it runs."""

    name: str
    description: str
    type: ToolType
    intents: Optional[FrozenSet[Intent]]  # None: runs for every intent
    fn: ToolFn

    def applies_to(self, intent: Intent) -> bool:
        """Return True if the tool should run for *intent*."""
        return self.intents is None or intent in self.intents


TOOL_REGISTRY: Dict[str, ToolSpec] = {}
"""Global registry of tools, in registration order."""


def register_tool(
    name: str,
    description: str,
    tool_type: ToolType,
    intents: Optional[Iterable[Intent]] = None,
) -> Callable[[ToolFn], ToolFn]:
    """
    Register a tool function with the given name.

    The function is registered as a decorator, so it can be used like this:
        @register_tool("My Tool", "What it does.", ToolType.ANALYSIS, intents=[Intent.BUILD])
        def my_tool(context):
            return "result text"

    Registration order is the order in which selected tools appear in a reply.

    Parameters
    ----------
    name: str
        The display name of the tool.  This must be unique and is used to look up the
        function in the registry.
    description: str
        One-line description attached to every invocation.
    tool_type: ToolType
        Whether the tool informs (analysis) or proposes actions (action).
    intents: Iterable[Intent] | None
        Intents that trigger the tool.  *None* means the tool always runs; an empty iterable means
        it only runs when called explicitly by name.
    Returns
    -------
    Callable
        A decorator that registers the function with the given name.
    Raises
    ------
    ValueError
        If a function with the same name is already registered.
    """
    if name in TOOL_REGISTRY:
        raise ValueError(f"Tool '{name}' is already registered.")
    logger.debug("Registering tool '%s'", name)
    triggers = None if intents is None else frozenset(Intent(i) for i in intents)

    def wrapper(fn: ToolFn) -> ToolFn:
        TOOL_REGISTRY[name] = ToolSpec(name, description, ToolType(tool_type), triggers, fn)
        return fn

    return wrapper


class ToolInfo(TypedDict):
    """
    Public description of a registered tool.
    """

    description: str
    type: str
    intents: List[str]


def get_tool_catalog() -> Mapping[str, ToolInfo]:
    """Describe every registered tool and the intents that trigger it."""
    catalog: Dict[str, ToolInfo] = {}
    for name, spec in TOOL_REGISTRY.items():
        triggers = Intent if spec.intents is None else spec.intents
        catalog[name] = ToolInfo(
            description=spec.description,
            type=spec.type.value,
            intents=sorted(i.value for i in triggers),
        )
    return catalog


# Populate the registry with the built-in tools.
from clawbot.tools import toolset  # noqa: E402,F401  # pylint: disable=wrong-import-position
