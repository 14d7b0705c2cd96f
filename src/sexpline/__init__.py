"""
sexpline — Line-oriented S-expression parser and encoder

Parses and writes a restricted S-expression format built from three atom
kinds and lists of them:

    token         abc  d.e.f/gh  snake_case
    hexadecimal   #616263#   3#616263#   (optional length prefix)
    base64        |YWJj|     3|YWJj|
    list          (abc #616263# (nested |YWJj|))

The encoded form never contains CR/LF, so one S-expression fits on one line.
Strict mode (the default) rejects newlines in the input; permissive mode
treats them as whitespace. Only 7-bit ASCII is accepted.

Quick Start:
    >>> from sexpline import encode, parse
    >>> tree = parse("(abc (def ghi z/a))")
    >>> encode(tree)
    '(abc (def ghi z/a))'

    >>> parse("(abc\\n)", "permissive") == parse("(abc)")
    True

Building trees:
    >>> from sexpline import make_base64, make_list, make_token
    >>> str(make_list(make_token("key"), make_base64(b"abc")))
    '(key |YWJj|)'
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from sexpline.charsets import (
    is_alpha,
    is_ascii,
    is_base64_digit,
    is_digit,
    is_hex_digit,
    is_newline,
    is_token_continuation,
    is_token_punct,
    is_token_start,
    is_valid_token,
    is_whitespace_discardable,
)
from sexpline.config import PERMISSIVE, STRICT, ParseConfig, resolve_config
from sexpline.cursor import StreamCursor, StringCursor, make_cursor
from sexpline.encoder import encode, encode_to
from sexpline.errors import (
    BuildError,
    ConfigError,
    CursorError,
    DisallowedNewlineError,
    EncodeError,
    EndOfInput,
    ErrorKind,
    InvalidLengthPrefixError,
    InvalidTokenCharacterError,
    NotASCIIError,
    ParseError,
    SerializationError,
    SexpError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from sexpline.location import SourceLocation
from sexpline.nodes import Atom, Base64, Hexadecimal, List, Node, Token
from sexpline.parser import LengthHint, Parser
from sexpline.producer import (
    Producer,
    make_base64,
    make_hex,
    make_list,
    make_token,
    must_base64,
    must_hex,
    must_list,
    must_token,
)
from sexpline.protocols import Cursor
from sexpline.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    source: Any,
    config: ParseConfig | str | None = None,
    *,
    source_file: str | None = None,
) -> Node | None:
    """Parse a complete input holding a single S-expression.

    Args:
        source: str, bytes, file-like object, or Cursor
        config: ParseConfig or "strict"/"permissive" (default strict)
        source_file: Optional source file path for error messages

    Returns:
        The parsed node, or None if the input is empty or only whitespace.

    Raises:
        ParseError: Malformed input, or anything but whitespace after the node

    Example:
        >>> parse("3#616263#")
        Hexadecimal(data=b'abc')

    """
    cursor = make_cursor(source, source_file)
    return Parser(config).parse_complete(cursor)


def iter_parse(
    source: Any,
    config: ParseConfig | str | None = None,
    *,
    source_file: str | None = None,
) -> Iterator[Node]:
    """Yield each top-level S-expression in the input, in order.

    Example:
        >>> [str(n) for n in iter_parse("(a) b #00#")]
        ['(a)', 'b', '#00#']

    """
    cursor = make_cursor(source, source_file)
    return Parser(config).iter_parse(cursor)


def parse_all(
    source: Any,
    config: ParseConfig | str | None = None,
    *,
    source_file: str | None = None,
) -> list[Node]:
    """Parse every top-level S-expression in the input into a list."""
    return list(iter_parse(source, config, source_file=source_file))


__all__ = [
    # Main API
    "__version__",
    "encode",
    "encode_to",
    "iter_parse",
    "parse",
    "parse_all",
    # Classes
    "Cursor",
    "LengthHint",
    "ParseConfig",
    "Parser",
    "Producer",
    "SourceLocation",
    "StreamCursor",
    "StringCursor",
    "make_cursor",
    # Configuration
    "PERMISSIVE",
    "STRICT",
    "resolve_config",
    # Nodes
    "Atom",
    "Base64",
    "Hexadecimal",
    "List",
    "Node",
    "Token",
    # Builders
    "make_base64",
    "make_hex",
    "make_list",
    "make_token",
    "must_base64",
    "must_hex",
    "must_list",
    "must_token",
    # Classifier
    "is_alpha",
    "is_ascii",
    "is_base64_digit",
    "is_digit",
    "is_hex_digit",
    "is_newline",
    "is_token_continuation",
    "is_token_punct",
    "is_token_start",
    "is_valid_token",
    "is_whitespace_discardable",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "BuildError",
    "ConfigError",
    "CursorError",
    "DisallowedNewlineError",
    "EncodeError",
    "EndOfInput",
    "ErrorKind",
    "InvalidLengthPrefixError",
    "InvalidTokenCharacterError",
    "NotASCIIError",
    "ParseError",
    "SerializationError",
    "SexpError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
]
