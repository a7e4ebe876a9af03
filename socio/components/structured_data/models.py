"""
Structured data component models.

The JSON-LD object is held as a tagged tree (MapNode / SequenceNode /
ScalarNode) so the normalizer matches on node kind instead of inspecting
key shapes at runtime.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# "0", "12"; not "01" or "-1"
INDEX_KEY_PATTERN = re.compile(r"0|[1-9][0-9]*")

# --- Tree Nodes ---


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value (string, number, bool, None or an opaque object)."""

    value: Any = None


@dataclass(frozen=True)
class SequenceNode:
    """An ordered list of nodes."""

    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class MapNode:
    """An ordered mapping of string keys to nodes."""

    entries: tuple[tuple[str, Node], ...] = ()

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def get(self, key: str) -> Node | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)

    def with_entry(self, key: str, value: Node) -> MapNode:
        """Return a copy with ``key`` set (in place if present, else appended)."""
        if key in self:
            return MapNode(tuple((k, value if k == key else v) for k, v in self.entries))
        return MapNode((*self.entries, (key, value)))

    def without(self, key: str) -> MapNode:
        """Return a copy with ``key`` removed."""
        return MapNode(tuple((k, v) for k, v in self.entries if k != key))


Node = MapNode | SequenceNode | ScalarNode


# --- Conversion ---


def _is_index_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and INDEX_KEY_PATTERN.fullmatch(key) is not None


def from_python(obj: Any) -> Node:
    """
    Build a tree from plain Python data.

    Mappings whose keys are all integers, or decimal strings as JSON and
    YAML spell them, are treated as lists (values in insertion order).
    Anything that is not a mapping or list/tuple becomes an opaque scalar.
    """
    if isinstance(obj, (MapNode, SequenceNode, ScalarNode)):
        return obj
    if isinstance(obj, Mapping):
        if obj and all(_is_index_key(key) for key in obj):
            return SequenceNode(tuple(from_python(value) for value in obj.values()))
        return MapNode(tuple((str(key), from_python(value)) for key, value in obj.items()))
    if isinstance(obj, (list, tuple)):
        return SequenceNode(tuple(from_python(item) for item in obj))
    return ScalarNode(obj)


def to_python(node: Node) -> Any:
    """Convert a tree back to plain dicts, lists and scalars."""
    if isinstance(node, MapNode):
        return {key: to_python(value) for key, value in node.entries}
    if isinstance(node, SequenceNode):
        return [to_python(item) for item in node.items]
    return node.value


# --- Input/Output Models ---


@dataclass(frozen=True)
class StructuredDataInput:
    """
    Input for rendering the structured data block.

    ``overrides`` may set any subset of url, name, in_language, description,
    same_as, logo and publisher.{@type,name,logo}.
    """

    overrides: Mapping[str, Any] = field(default_factory=dict)
    schema_context: str = "http://schema.org"
    schema_type: str = "WebSite"
    publisher_type: str = "Organization"


@dataclass(frozen=True)
class StructuredDataOutput:
    """Output from structured data rendering."""

    html: str
    json: str
    data: dict[str, Any] = field(default_factory=dict)
    asset_hint: str = ""
    success: bool = True
