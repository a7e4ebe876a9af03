"""
Structured data normalizer - merge, prune and key rewriting for JSON-LD.

Key behaviors:
- Deep merge: maps merge key-wise, everything else (lists included) is
  replaced wholesale by the override
- A bare top-level ``logo`` moves to ``publisher.logo``
- Prune: empty values are dropped bottom-up, then keys become camelCase
- Encoding: pretty JSON, unescaped unicode and slashes, ``<``/``>`` hex-escaped

Every function here is pure and total; inputs are never mutated.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from .models import MapNode, Node, ScalarNode, SequenceNode, from_python, to_python

logger = logging.getLogger(__name__)

LOGO_KEY = "logo"
PUBLISHER_KEY = "publisher"


# --- Key Rewriting ---


def to_camel_case(key: str) -> str:
    """
    Rewrite a snake_case key to camelCase.

    Only the first character of each segment is touched, so keys that are
    already camelCase (or start with ``@``) come back unchanged.
    """
    joined = "".join(segment[:1].upper() + segment[1:] for segment in key.split("_"))
    return joined[:1].lower() + joined[1:]


# --- Emptiness ---


def is_empty(node: Node) -> bool:
    """
    Whether a node counts as empty.

    Falsy scalars (``""``, ``None``, ``False``, ``0``, ``0.0``) are empty,
    which also drops legitimate zero/false values. NaN and infinities have
    no JSON form and count as empty too.
    """
    if isinstance(node, MapNode):
        return not node.entries
    if isinstance(node, SequenceNode):
        return not node.items
    value = node.value
    if isinstance(value, float) and not math.isfinite(value):
        return True
    if value is None or isinstance(value, (bool, int, float, str)):
        return not value
    return False


# --- Merge ---


def deep_merge(defaults: Node, overrides: Node) -> Node:
    """
    Merge ``overrides`` onto ``defaults``.

    Keys are matched by their camelCase form, so ``in_language`` replaces
    ``inLanguage``. The override's spelling of a key is kept.
    """
    if not (isinstance(defaults, MapNode) and isinstance(overrides, MapNode)):
        return overrides

    merged: dict[str, tuple[str, Node]] = {
        to_camel_case(key): (key, value) for key, value in defaults.entries
    }
    for key, value in overrides.entries:
        ident = to_camel_case(key)
        if ident in merged:
            merged[ident] = (key, deep_merge(merged[ident][1], value))
        else:
            merged[ident] = (key, value)

    return MapNode(tuple(merged.values()))


def relocate_logo(tree: Node) -> Node:
    """Move a top-level ``logo`` into ``publisher.logo``, overwriting it."""
    if not isinstance(tree, MapNode):
        return tree

    logo = tree.get(LOGO_KEY)
    if logo is None or (isinstance(logo, ScalarNode) and logo.value is None):
        return tree

    rest = tree.without(LOGO_KEY)
    publisher = rest.get(PUBLISHER_KEY)

    if publisher is None:
        return rest.with_entry(PUBLISHER_KEY, MapNode(((LOGO_KEY, logo),)))
    if isinstance(publisher, MapNode):
        return rest.with_entry(PUBLISHER_KEY, publisher.with_entry(LOGO_KEY, logo))

    logger.warning("publisher is not a mapping, dropping logo override")
    return rest


# --- Prune ---


def prune_and_rewrite(node: Node) -> Node:
    """
    Drop empty values bottom-up and rewrite map keys to camelCase.

    Order of surviving entries is preserved. Idempotent.
    """
    if isinstance(node, MapNode):
        entries: dict[str, Node] = {}
        for key, value in node.entries:
            value = prune_and_rewrite(value)
            if is_empty(value):
                continue
            entries[to_camel_case(key)] = value
        return MapNode(tuple(entries.items()))

    if isinstance(node, SequenceNode):
        items = (prune_and_rewrite(item) for item in node.items)
        return SequenceNode(tuple(item for item in items if not is_empty(item)))

    return node


def normalize(overrides: Any, defaults: Any) -> Node:
    """Merge overrides onto defaults, relocate the logo, then prune."""
    merged = deep_merge(from_python(defaults), from_python(overrides))
    return prune_and_rewrite(relocate_logo(merged))


# --- Encoding ---


def encode_json_ld(tree: Node) -> str:
    """
    Serialize a tree as pretty JSON that is safe inside a <script> element.
    """
    text = json.dumps(to_python(tree), ensure_ascii=False, indent=4, default=str)
    return text.replace("<", "\\u003C").replace(">", "\\u003E")


def get_publisher_logo(tree: Node) -> str:
    """Return ``publisher.logo`` if it is a non-empty string, else ``""``."""
    if not isinstance(tree, MapNode):
        return ""
    publisher = tree.get(PUBLISHER_KEY)
    if not isinstance(publisher, MapNode):
        return ""
    logo = publisher.get(LOGO_KEY)
    if isinstance(logo, ScalarNode) and isinstance(logo.value, str) and logo.value:
        return logo.value
    return ""
