"""Canonical encoder for S-expression nodes.

Every tree has exactly one encoding:
- List: "(" + children separated by one space + ")"
- Token: its bytes verbatim
- Hexadecimal: "#" + lower-case hex + "#"
- Base64: "|" + padded standard base64 + "|"

No length prefixes and no other whitespace are ever written, so the output
is always a single line and re-parses in strict mode to an equal tree.

Thread Safety:
All functions are pure; safe to call from any thread.

"""

from __future__ import annotations

import base64
from typing import Protocol

from sexpline.charsets import BASE64_DELIMITER, HEX_DELIMITER, LIST_CLOSE, LIST_OPEN
from sexpline.errors import EncodeError
from sexpline.nodes import Atom, Base64, Hexadecimal, List, Node, Token
from sexpline.stringbuilder import StringBuilder


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> object: ...


def encode(node: Node) -> str:
    """Encode a node as canonical text.

    Args:
        node: Any sexpline node

    Returns:
        Single-line canonical text.

    Raises:
        EncodeError: ``node`` (or a descendant) is not a Node

    Example:
        >>> from sexpline.producer import make_hex, make_list, make_token
        >>> encode(make_list(make_token("abc"), make_hex(b"abc")))
        '(abc #616263#)'

    """
    sb = StringBuilder()
    _encode_into(node, sb)
    return sb.build()


def encode_to(node: Node, out: SupportsWrite) -> int:
    """Write the canonical text of ``node`` to ``out``.

    Returns:
        Number of characters written.
    """
    text = encode(node)
    out.write(text)
    return len(text)


def encode_atom(node: Atom) -> str:
    """Encode a single atom."""
    match node:
        case Token():
            return node.value.decode("ascii")
        case Hexadecimal():
            return f"{HEX_DELIMITER}{node.data.hex()}{HEX_DELIMITER}"
        case Base64():
            encoded = base64.b64encode(node.data).decode("ascii")
            return f"{BASE64_DELIMITER}{encoded}{BASE64_DELIMITER}"
        case _:
            msg = f"Cannot encode {type(node).__name__} as an atom"
            raise EncodeError(msg)


def _encode_into(node: Node, sb: StringBuilder) -> None:
    match node:
        case List():
            sb.append(LIST_OPEN)
            for i, child in enumerate(node.children):
                if i:
                    sb.append(" ")
                _encode_into(child, sb)
            sb.append(LIST_CLOSE)
        case Token() | Hexadecimal() | Base64():
            sb.append(encode_atom(node))
        case _:
            msg = f"Cannot encode {type(node).__name__}; expected a sexpline Node"
            raise EncodeError(msg)
