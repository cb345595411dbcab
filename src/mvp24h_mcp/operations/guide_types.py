"""
Data types for the topic guides.

A guide is a named, ordered set of topics served by one tool. Each topic
points at documents in the docs directory and may carry inline content,
a quick reference and related references.
"""
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from ..utils.formatters import tool_call


def is_document_reference(reference: str) -> bool:
    """Check if a related reference names a document rather than a topic key."""
    return "/" in reference or reference.endswith(".md")


@dataclass(frozen=True)
class Topic:
    """
    One topic of a guide.

    ``sources`` are document paths relative to the docs directory, optionally
    narrowed to one markdown section with ``path#Section Title``. ``inline``
    is used when none of the sources can be loaded.
    """

    key: str
    description: str
    sources: Tuple[str, ...] = ()
    inline: Optional[str] = None
    quick_reference: Optional[str] = None
    related: Tuple[str, ...] = ()
    alias_of: Optional[str] = None

    @property
    def is_alias(self) -> bool:
        return self.alias_of is not None


@dataclass(frozen=True)
class TopicGuide:
    """A documentation guide exposed as one tool."""

    tool_name: str
    argument: str
    title: str
    summary: str
    topics: Tuple[Topic, ...]
    overview_reference: str = ""
    overview_doc: Optional[str] = None
    other_tools: Tuple[Tuple[str, str], ...] = ()
    _index: Mapping[str, Topic] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", MappingProxyType({t.key: t for t in self.topics}))

    def get_topic(self, key: str) -> Optional[Topic]:
        return self._index.get(key)

    def topic_keys(self) -> List[str]:
        """All accepted keys in declaration order, aliases included."""
        return [t.key for t in self.topics]

    def listed_topics(self) -> List[Topic]:
        """Topics shown in the overview; aliases are hidden."""
        return [t for t in self.topics if not t.is_alias]

    def call(self, value: str) -> str:
        return tool_call(self.tool_name, self.argument, value)
