"""Cursor implementations over strings, bytes and streams.

A cursor hands the parser one character at a time and can push back the
last one. Bytes are read as code points 0-255 (latin-1), so a byte at or
above 0x80 reaches the parser as a non-ASCII character and is rejected
there rather than failing inside a text decoder.

Line/column tracking is incremental: each read() advances the position,
unread() restores the position saved by that read().

Thread Safety:
Cursor instances are single-use. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from typing import IO, Any

from sexpline.errors import CursorError, EndOfInput
from sexpline.location import SourceLocation
from sexpline.protocols import Cursor


class _TrackingCursor:
    """Shared pushback and position bookkeeping.

    Subclasses implement _next_char(), returning "" at end of input.
    """

    __slots__ = (
        "_source_file",
        "_offset",
        "_lineno",
        "_col",
        "_saved",  # (offset, lineno, col) before the last read
        "_last_char",
        "_pushed",  # character re-delivered by the next read
    )

    def __init__(self, source_file: str | None = None) -> None:
        self._source_file = source_file
        self._offset = 0
        self._lineno = 1
        self._col = 1
        self._saved: tuple[int, int, int] | None = None
        self._last_char: str | None = None
        self._pushed: str | None = None

    def _next_char(self) -> str:
        raise NotImplementedError

    def read(self) -> str:
        if self._pushed is not None:
            char = self._pushed
            self._pushed = None
        else:
            char = self._next_char()
            if not char:
                raise EndOfInput
            self._last_char = char

        self._saved = (self._offset, self._lineno, self._col)
        self._offset += 1
        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        return char

    def unread(self) -> None:
        if self._saved is None:
            msg = "cursor can push back only the last character read"
            raise CursorError(msg)
        self._offset, self._lineno, self._col = self._saved
        self._saved = None
        self._pushed = self._last_char

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self._lineno, self._col, self._offset, self._source_file)

    @property
    def last_location(self) -> SourceLocation:
        if self._saved is None:
            # Nothing consumed since the pushback; the next char is the last one seen
            return self.location
        offset, lineno, col = self._saved
        return SourceLocation(lineno, col, offset, self._source_file)


class StringCursor(_TrackingCursor):
    """Cursor over an in-memory string or bytes object.

    Usage:
            >>> cur = StringCursor("(a)")
            >>> cur.read(), cur.read()
            ('(', 'a')
            >>> cur.unread()
            >>> cur.read()
            'a'

    """

    __slots__ = ("_source", "_source_len", "_index")

    def __init__(self, source: str | bytes, source_file: str | None = None) -> None:
        super().__init__(source_file)
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = bytes(source).decode("latin-1")
        self._source = source
        self._source_len = len(source)
        self._index = 0

    def _next_char(self) -> str:
        if self._index >= self._source_len:
            return ""
        char = self._source[self._index]
        self._index += 1
        return char


class StreamCursor(_TrackingCursor):
    """Cursor over a text or binary file-like object.

    Reads one character per call; wrap unbuffered sources in a buffer.
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: IO[Any], source_file: str | None = None) -> None:
        if source_file is None:
            name = getattr(stream, "name", None)
            source_file = name if isinstance(name, str) else None
        super().__init__(source_file)
        self._stream = stream

    def _next_char(self) -> str:
        chunk = self._stream.read(1)
        if isinstance(chunk, bytes):
            return chunk.decode("latin-1")
        return chunk


def make_cursor(source: Any, source_file: str | None = None) -> Cursor:
    """Wrap an input in a cursor.

    Args:
        source: A Cursor (returned unchanged), str, bytes-like, or an
            object with a read() method
        source_file: Optional name used in error locations

    Returns:
        A Cursor over the input.

    Raises:
        TypeError: Unsupported input type
    """
    if isinstance(source, (str, bytes, bytearray, memoryview)):
        return StringCursor(source, source_file)
    if isinstance(source, Cursor):
        return source
    if callable(getattr(source, "read", None)):
        return StreamCursor(source, source_file)
    msg = f"Cannot read S-expressions from {type(source).__name__}"
    raise TypeError(msg)
