"""Block serialization: JSON round-trip for Mirador nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed previews to disk between sessions
- Handing blocks to a renderer in another process
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from mirador import parse
    from mirador.serialization import to_json, from_json

    blocks = parse("# Hello **World**")
    json_str = to_json(blocks)
    restored = from_json(json_str)
    assert blocks == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Sequence
from dataclasses import fields
from enum import Enum
from typing import Any

from mirador.document import Document
from mirador.nodes import (
    Block,
    Blockquote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineContent,
    Italic,
    Link,
    MermaidDiagram,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Table,
    TableAlignment,
    TaskItem,
    TaskList,
    Text,
    UnorderedList,
)

# Serializable classes by name; the name is the `_type` discriminator
_NODE_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        MermaidDiagram,
        Blockquote,
        UnorderedList,
        OrderedList,
        TaskList,
        TaskItem,
        HorizontalRule,
        Table,
        Image,
        InlineContent,
        Text,
        Bold,
        Italic,
        BoldItalic,
        Code,
        Link,
        Strikethrough,
    )
}

# Fields holding enum members, serialized by member name
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "alignments": TableAlignment,
}


def to_dict(node: Node | Document) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes.

    Args:
        node: Any Mirador node, or a Document.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node | Document):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.
    Recursively deserializes child nodes.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown, or an enum member
            name is not recognized.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str = "") -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    if isinstance(value, str) and field_name in _ENUM_FIELDS:
        enum_cls = _ENUM_FIELDS[field_name]
        try:
            return enum_cls[value]
        except KeyError:
            msg = f"Unknown {enum_cls.__name__} member: {value!r}"
            raise ValueError(msg) from None
    return value


def to_json(blocks: Sequence[Block], *, indent: int | None = None) -> str:
    """Serialize blocks to a JSON array.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        blocks: Blocks to serialize, as returned by parse().
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(block) for block in blocks], sort_keys=True, indent=indent)


def from_json(data: str) -> tuple[Block, ...]:
    """Deserialize blocks from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Tuple of blocks.

    Raises:
        ValueError: If the JSON is not an array of serialized nodes.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of blocks, got {type(raw).__name__}"
        raise ValueError(msg)
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected a serialized block, got {type(item).__name__}"
            raise ValueError(msg)
    return tuple(from_dict(item) for item in raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
