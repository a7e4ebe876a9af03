"""
Structured data component - JSON-LD normalizer and renderer.
"""

from ._impl import (
    deep_merge,
    encode_json_ld,
    get_publisher_logo,
    is_empty,
    normalize,
    prune_and_rewrite,
    relocate_logo,
    to_camel_case,
)
from .component import (
    default_tree,
    render_structured_data,
    run,
)
from .models import (
    MapNode,
    Node,
    ScalarNode,
    SequenceNode,
    StructuredDataInput,
    StructuredDataOutput,
    from_python,
    to_python,
)
from .ports import AssetHintSink

__all__ = [
    # Component
    "run",
    "render_structured_data",
    "default_tree",
    # Normalizer
    "normalize",
    "deep_merge",
    "relocate_logo",
    "prune_and_rewrite",
    "is_empty",
    "to_camel_case",
    "encode_json_ld",
    "get_publisher_logo",
    # Tree
    "Node",
    "MapNode",
    "SequenceNode",
    "ScalarNode",
    "from_python",
    "to_python",
    # Models
    "StructuredDataInput",
    "StructuredDataOutput",
    # Ports
    "AssetHintSink",
]
