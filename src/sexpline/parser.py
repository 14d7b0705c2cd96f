"""Recursive descent parser producing typed S-expression nodes.

One method per grammar production, each reading from a Cursor:

    sexpr     := list | token | hexstring | base64string
    list      := "(" (sexpr | ws)* ")"
    hexstring := decimal? "#" (hexdigit | ws)* "#"
    b64string := decimal? "|" (b64digit | ws)* "|"
    token     := tokenstart tokenchar*
    decimal   := digit+

The parser needs one character of lookahead, provided by Cursor.unread().

End of input is signalled by the cursor raising EndOfInput. Between nodes
that is benign: parse_node() lets it propagate and the top-level entry
points turn it into "no node". Inside a list, string or length prefix it
is promoted to UnexpectedEndOfInputError.

Thread Safety:
Parser instances hold only their immutable ParseConfig and can be shared.
Cursors are per-call state. The resulting nodes are immutable.

"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from sexpline.charsets import (
    BASE64_DELIMITER,
    DISCARDABLE_WHITESPACE,
    HEX_DELIMITER,
    LIST_CLOSE,
    LIST_OPEN,
    MAX_ASCII,
    NEWLINES,
    is_base64_digit,
    is_base64_padding,
    is_digit,
    is_hex_digit,
    is_token_continuation,
    is_token_start,
)
from sexpline.config import ParseConfig, resolve_config
from sexpline.errors import (
    DisallowedNewlineError,
    EndOfInput,
    InvalidLengthPrefixError,
    NotASCIIError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from sexpline.location import SourceLocation
from sexpline.nodes import Base64, Hexadecimal, List, Node, Token
from sexpline.protocols import Cursor
from sexpline.utils.logger import get_logger

logger = get_logger(__name__)

# A 64-bit byte count has at most 20 decimal digits
MAX_LENGTH_DIGITS = 20


@dataclass(frozen=True, slots=True)
class LengthHint:
    """Declared decoded length of a hex or base64 string (``3#616263#``)."""

    length: int


def _fail(error_cls: type[ParseError], message: str, location: SourceLocation) -> ParseError:
    return error_cls(
        message,
        lineno=location.lineno,
        col_offset=location.col_offset,
        offset=location.offset,
        source_file=location.source_file,
    )


class Parser:
    """Recursive descent parser for S-expressions.

    Usage:
            >>> from sexpline.cursor import StringCursor
            >>> parser = Parser()
            >>> parser.parse(StringCursor("(abc #616263#)"))
            List(children=(Token(value=b'abc'), Hexadecimal(data=b'abc')))

    Thread Safety:
        The parser is stateless apart from its frozen config; share freely.

    """

    __slots__ = ("_config", "_disallow_newlines")

    def __init__(self, config: ParseConfig | str | None = None) -> None:
        """Initialize parser.

        Args:
            config: ParseConfig, preset name ("strict"/"permissive"), or
                None for strict
        """
        self._config = resolve_config(config)
        self._disallow_newlines = self._config.disallow_newlines

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Parser(mode={self._config.mode!r})"

    # =========================================================================
    # Top-level entry points
    # =========================================================================

    def parse(self, cursor: Cursor) -> Node | None:
        """Parse one top-level node.

        Input after the node is left unread.

        Returns:
            The node, or None if the input held only whitespace.

        Raises:
            ParseError: Malformed input, including an unmatched ``)``
        """
        try:
            return self._parse_top(cursor)
        except ParseError as err:
            logger.debug("Parse aborted (%s): %s", err.kind.value, err)
            raise

    def parse_complete(self, cursor: Cursor) -> Node | None:
        """Parse one top-level node that must be the whole input.

        Only whitespace may follow the node.

        Raises:
            UnexpectedCharacterError: Trailing input after the node
        """
        try:
            node = self._parse_top(cursor)
            if node is not None:
                self._expect_end(cursor)
            return node
        except ParseError as err:
            logger.debug("Parse aborted (%s): %s", err.kind.value, err)
            raise

    def iter_parse(self, cursor: Cursor) -> Iterator[Node]:
        """Yield successive top-level nodes until end of input."""
        while True:
            node = self.parse(cursor)
            if node is None:
                return
            yield node

    def _parse_top(self, cursor: Cursor) -> Node | None:
        try:
            node = self.parse_node(cursor)
        except EndOfInput:
            return None
        if node is None:
            raise _fail(UnexpectedCharacterError, "unmatched ')'", cursor.last_location)
        return node

    def _expect_end(self, cursor: Cursor) -> None:
        try:
            char = self._read_significant(cursor)
        except EndOfInput:
            return
        raise _fail(
            UnexpectedCharacterError,
            f"unexpected trailing character {char!r}",
            cursor.last_location,
        )

    # =========================================================================
    # Whitespace
    # =========================================================================

    def _discardable(self, cursor: Cursor, char: str) -> bool:
        """Classify a character read from the cursor.

        Returns True for whitespace to skip, False for a significant
        character. Raises on characters that are never acceptable.
        """
        if ord(char) > MAX_ASCII:
            raise _fail(NotASCIIError, f"non-ASCII character {char!r}", cursor.last_location)
        if char in NEWLINES:
            if self._disallow_newlines:
                raise _fail(
                    DisallowedNewlineError,
                    f"newline character {char!r} not allowed in strict mode",
                    cursor.last_location,
                )
            return True
        return char in DISCARDABLE_WHITESPACE

    def _read_significant(self, cursor: Cursor) -> str:
        """Read past whitespace. EndOfInput propagates."""
        while True:
            char = cursor.read()
            if not self._discardable(cursor, char):
                return char

    # =========================================================================
    # Productions
    # =========================================================================

    def parse_node(self, cursor: Cursor) -> Node | None:
        """Parse the next node.

        Returns:
            The node, or None when a ``)`` closes the enclosing list.

        Raises:
            EndOfInput: Input ended before any significant character
            ParseError: Malformed input
        """
        char = self._read_significant(cursor)

        if char == LIST_CLOSE:
            return None
        if char == LIST_OPEN:
            return self.parse_list(cursor)

        # Tokens may not start with a digit, so a digit is always a length prefix
        if is_token_start(char):
            cursor.unread()
            return self.parse_token(cursor)

        hint: LengthHint | None = None
        if is_digit(char):
            cursor.unread()
            hint = LengthHint(self.parse_decimal(cursor))
            try:
                char = cursor.read()
            except EndOfInput:
                raise _fail(
                    UnexpectedEndOfInputError,
                    "input ended after length prefix",
                    cursor.location,
                ) from None
            if ord(char) > MAX_ASCII:
                raise _fail(NotASCIIError, f"non-ASCII character {char!r}", cursor.last_location)

        if char == HEX_DELIMITER:
            return self.parse_hexadecimal(cursor, hint)
        if char == BASE64_DELIMITER:
            return self.parse_base64(cursor, hint)

        if hint is not None:
            message = f"expected '#' or '|' after length prefix, got {char!r}"
        else:
            message = f"unexpected character {char!r}"
        raise _fail(UnexpectedCharacterError, message, cursor.last_location)

    def parse_list(self, cursor: Cursor) -> List:
        """Parse list children up to the closing ``)``.

        The opening ``(`` has already been consumed.
        """
        opened_at = cursor.last_location
        children: list[Node] = []
        while True:
            try:
                child = self.parse_node(cursor)
            except EndOfInput:
                raise _fail(
                    UnexpectedEndOfInputError,
                    f"unterminated list opened at {opened_at}",
                    cursor.location,
                ) from None
            if child is None:
                break
            children.append(child)
        return List(tuple(children))

    def parse_token(self, cursor: Cursor) -> Token:
        """Parse a token.

        Stops before the first character that cannot continue a token.
        End of input simply ends the token.
        """
        try:
            char = cursor.read()
        except EndOfInput:
            raise _fail(UnexpectedEndOfInputError, "expected token", cursor.location) from None
        if not is_token_start(char):
            cursor.unread()
            raise _fail(UnexpectedCharacterError, f"invalid token start {char!r}", cursor.location)

        chars = [char]
        while True:
            try:
                char = cursor.read()
            except EndOfInput:
                break
            if not is_token_continuation(char):
                cursor.unread()
                break
            chars.append(char)
        return Token("".join(chars).encode("ascii"))

    def parse_decimal(self, cursor: Cursor) -> int:
        """Parse the decimal digits of a length prefix.

        Stops before the first non-digit. A length prefix cannot end the
        input, so end of input is an error here. Prefixes longer than
        MAX_LENGTH_DIGITS digits are rejected as InvalidLengthPrefixError.
        """
        start = cursor.location
        digits: list[str] = []
        while True:
            try:
                char = cursor.read()
            except EndOfInput:
                raise _fail(
                    UnexpectedEndOfInputError,
                    "input ended inside length prefix",
                    cursor.location,
                ) from None
            if not is_digit(char):
                cursor.unread()
                break
            digits.append(char)
            if len(digits) > MAX_LENGTH_DIGITS:
                raise _fail(
                    InvalidLengthPrefixError,
                    f"length prefix longer than {MAX_LENGTH_DIGITS} digits",
                    start,
                )
        if not digits:
            raise _fail(UnexpectedCharacterError, "expected decimal digit", cursor.location)
        return int("".join(digits))

    def parse_hexadecimal(self, cursor: Cursor, hint: LengthHint | None = None) -> Hexadecimal:
        """Parse a hex string body up to the closing ``#``.

        Whitespace between digits is ignored. An odd trailing digit is the
        high nibble of a final byte whose low nibble is zero.
        """
        digits = self._collect_body(cursor, HEX_DELIMITER, is_hex_digit, "hexadecimal")
        if len(digits) % 2:
            digits += "0"
        data = bytes.fromhex(digits)
        self._check_hint(cursor, hint, data)
        return Hexadecimal(data)

    def parse_base64(self, cursor: Cursor, hint: LengthHint | None = None) -> Base64:
        """Parse a base64 string body up to the closing ``|``.

        Whitespace between digits is ignored. Padding must be standard.
        """
        digits = self._collect_body(cursor, BASE64_DELIMITER, _is_base64_char, "base64")
        try:
            data = base64.b64decode(digits, validate=True)
        except binascii.Error as err:
            raise _fail(
                UnexpectedCharacterError,
                f"malformed base64 string: {err}",
                cursor.last_location,
            ) from err
        self._check_hint(cursor, hint, data)
        return Base64(data)

    def _collect_body(
        self,
        cursor: Cursor,
        terminator: str,
        accept: Callable[[str], bool],
        kind: str,
    ) -> str:
        """Read digits up to the terminator, which is consumed."""
        opened_at = cursor.last_location
        digits: list[str] = []
        while True:
            try:
                char = cursor.read()
            except EndOfInput:
                raise _fail(
                    UnexpectedEndOfInputError,
                    f"unterminated {kind} string opened at {opened_at}",
                    cursor.location,
                ) from None
            if self._discardable(cursor, char):
                continue
            if char == terminator:
                return "".join(digits)
            if not accept(char):
                raise _fail(
                    UnexpectedCharacterError,
                    f"invalid character {char!r} in {kind} string",
                    cursor.last_location,
                )
            digits.append(char)

    def _check_hint(self, cursor: Cursor, hint: LengthHint | None, data: bytes) -> None:
        if hint is not None and hint.length != len(data):
            raise _fail(
                InvalidLengthPrefixError,
                f"length prefix {hint.length} does not match decoded length {len(data)}",
                cursor.last_location,
            )


def _is_base64_char(char: str) -> bool:
    return is_base64_digit(char) or is_base64_padding(char)
