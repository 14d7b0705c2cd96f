"""Exception classes for sexpline.

Provides standardized exceptions for error handling throughout sexpline.

Every parse failure is a ParseError subclass carrying an ErrorKind, so callers
can either catch a specific class or branch on ``err.kind``. The benign
end-of-input signal raised by cursors is EndOfInput, which is deliberately
not a SexpError: reaching the end of input between nodes is not a failure.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a caller can distinguish."""

    NOT_ASCII = "not-ascii"
    DISALLOWED_NEWLINE = "disallowed-newline"
    UNEXPECTED_CHARACTER = "unexpected-character"
    UNEXPECTED_END_OF_INPUT = "unexpected-end-of-input"
    INVALID_LENGTH_PREFIX = "invalid-length-prefix"
    INVALID_TOKEN_CHARACTER = "invalid-token-character"


class EndOfInput(Exception):
    """Raised by a cursor when no characters remain.

    Not an error by itself. The parser promotes it to
    UnexpectedEndOfInputError when a node is incomplete.
    """


class SexpError(Exception):
    """Base exception for all sexpline errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(SexpError):
    """Error during S-expression parsing.

    Raised when the parser encounters invalid or unexpected input.
    Subclasses fix ``kind``; instantiate them rather than this class.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            offset: Absolute character offset into the input (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class NotASCIIError(ParseError):
    """A character above 0x7F was found. Rejected in every mode."""

    kind = ErrorKind.NOT_ASCII


class DisallowedNewlineError(ParseError):
    """CR or LF was found while newlines are disallowed."""

    kind = ErrorKind.DISALLOWED_NEWLINE


class UnexpectedCharacterError(ParseError):
    """A character cannot begin or continue any production here."""

    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnexpectedEndOfInputError(ParseError):
    """Input ended inside a list, string or length prefix."""

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class InvalidLengthPrefixError(ParseError):
    """A length prefix does not match the decoded byte count."""

    kind = ErrorKind.INVALID_LENGTH_PREFIX


class BuildError(SexpError, ValueError):
    """Error constructing a node from program data."""

    pass


class InvalidTokenCharacterError(BuildError):
    """Token bytes violate the token grammar.

    Raised by the Token constructor and by make_token().
    """

    kind = ErrorKind.INVALID_TOKEN_CHARACTER

    def __init__(self, value: bytes, position: int | None = None) -> None:
        """Initialize token error.

        Args:
            value: The rejected token bytes
            position: Index of the first offending byte (None if empty)
        """
        self.value = value
        self.position = position
        if position is None:
            message = "token must not be empty"
        else:
            message = f"invalid token character {value[position:position + 1]!r} at index {position}"
        super().__init__(f"{message} in {value!r}")


class EncodeError(SexpError, TypeError):
    """Raised when asked to encode something that is not a Node."""

    pass


class SerializationError(SexpError, ValueError):
    """Raised when a dict/JSON payload does not describe a node."""

    pass


class ConfigError(SexpError, ValueError):
    """Raised for an unknown parse mode or malformed configuration."""

    pass


class CursorError(SexpError):
    """Raised when a cursor is asked to push back more than one character."""

    pass
