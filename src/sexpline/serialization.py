"""Tree serialization: JSON round-trip for sexpline nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Debugging and inspection
- Handing trees to tools that speak JSON but not S-expressions

Octet payloads are written in the same encoding the node uses on the wire:
Hexadecimal data as lower-case hex, Base64 data as padded base64, Token
values as ASCII text.

All output is deterministic (sorted keys).

Example:
    from sexpline import parse
    from sexpline.serialization import to_json, from_json

    tree = parse("(abc #616263# |YWJj|)")
    json_str = to_json(tree)
    assert from_json(json_str) == tree

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from sexpline.errors import BuildError, SerializationError
from sexpline.nodes import Base64, Hexadecimal, List, Node, Token


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any sexpline node.

    Returns:
        Dict with ``_type`` and the node's payload.

    Raises:
        SerializationError: ``node`` is not a Node.

    """
    match node:
        case List():
            return {"_type": "List", "children": [to_dict(child) for child in node.children]}
        case Token():
            return {"_type": "Token", "value": node.text}
        case Hexadecimal():
            return {"_type": "Hexadecimal", "data": node.data.hex()}
        case Base64():
            return {"_type": "Base64", "data": base64.b64encode(node.data).decode("ascii")}
        case _:
            msg = f"Cannot serialize {type(node).__name__}"
            raise SerializationError(msg)


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or the
            payload is malformed.

    """
    if not isinstance(data, dict):
        msg = f"Expected dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    try:
        if type_name == "List":
            return List(tuple(from_dict(child) for child in data["children"]))
        if type_name == "Token":
            return Token(data["value"])
        if type_name == "Hexadecimal":
            return Hexadecimal(bytes.fromhex(data["data"]))
        if type_name == "Base64":
            return Base64(base64.b64decode(data["data"], validate=True))
    except KeyError as err:
        msg = f"Serialized {type_name} is missing field {err.args[0]!r}"
        raise SerializationError(msg) from err
    except (BuildError, TypeError, ValueError, binascii.Error) as err:
        if isinstance(err, SerializationError):
            raise
        msg = f"Malformed serialized {type_name}: {err}"
        raise SerializationError(msg) from err

    msg = f"Unknown node type: {type_name!r}"
    raise SerializationError(msg)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        node: Node to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a node from a JSON string.

    Raises:
        SerializationError: The JSON is invalid or doesn't describe a node.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as err:
        msg = f"Invalid JSON: {err}"
        raise SerializationError(msg) from err
    return from_dict(raw)
