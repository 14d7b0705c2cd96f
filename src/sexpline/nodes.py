"""Typed S-expression nodes for sexpline.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── List         ( child child ... )
└── Atom
    ├── Token        abc  d.e.f/gh
    ├── Hexadecimal  #616263#
    └── Base64       |YWJj|

The variant set is closed: the parser, encoder and serializer each match on
exactly these four classes.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from sexpline.charsets import find_invalid_token_char
from sexpline.errors import BuildError, InvalidTokenCharacterError


def _freeze_octets(value: object, kind: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    msg = f"{kind} data must be bytes-like, got {type(value).__name__}"
    raise BuildError(msg)


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all S-expression nodes."""

    def __str__(self) -> str:
        from sexpline.encoder import encode

        return encode(self)


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered list of child nodes.

    Text: ( child child ... )

    The empty list is valid and distinct from absence of a node.

    Raises:
        BuildError: A child is not a Node
    """

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        children = self.children
        if not isinstance(children, tuple):
            children = tuple(children)
            object.__setattr__(self, "children", children)
        for index, child in enumerate(children):
            if not isinstance(child, Node):
                msg = f"list child {index} is {type(child).__name__}, not a Node"
                raise BuildError(msg)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]


@dataclass(frozen=True, slots=True)
class Token(Node):
    """Unquoted identifier.

    Text: abc, d.e.f/gh, snake_case

    The value is validated on construction: the first byte must be a
    token-start character and the rest token-continuation characters.
    ``str`` input is stored as ASCII bytes.

    Raises:
        InvalidTokenCharacterError: value is empty or breaks the grammar
    """

    value: bytes

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, str):
            index = find_invalid_token_char(value)
            if index is not None:
                raw = value.encode("utf-8", "backslashreplace")
                raise InvalidTokenCharacterError(raw, None if index < 0 else index)
            object.__setattr__(self, "value", value.encode("ascii"))
            return

        value = _freeze_octets(value, "Token")
        index = find_invalid_token_char(value)
        if index is not None:
            raise InvalidTokenCharacterError(value, None if index < 0 else index)
        object.__setattr__(self, "value", value)

    @property
    def text(self) -> str:
        """The token as a string."""
        return self.value.decode("ascii")


@dataclass(frozen=True, slots=True)
class Hexadecimal(Node):
    """Octet string written in hexadecimal.

    Text: #616263#  (optionally length-prefixed on input: 3#616263#)

    Any byte value is allowed.
    """

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze_octets(self.data, "Hexadecimal"))


@dataclass(frozen=True, slots=True)
class Base64(Node):
    """Octet string written in standard base64.

    Text: |YWJj|  (optionally length-prefixed on input: 3|YWJj|)

    Any byte value is allowed.
    """

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze_octets(self.data, "Base64"))


# =============================================================================
# Type Aliases
# =============================================================================

Atom: TypeAlias = Token | Hexadecimal | Base64
"""A non-list node."""
