"""Protocols for sexpline.

Defines the contract between the grammar engine and its input source.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sexpline.location import SourceLocation


@runtime_checkable
class Cursor(Protocol):
    """Character source with one character of pushback.

    The parser needs exactly one character of lookahead: it reads a
    character, and if the character belongs to the next production it
    pushes it back with unread().

    Thread Safety:
        Cursors are stateful and single-use. Create one per parse call.

    """

    def read(self) -> str:
        """Return the next character.

        Raises:
            EndOfInput: No characters remain
        """
        ...

    def unread(self) -> None:
        """Push back the character returned by the last read().

        Raises:
            CursorError: Nothing to push back, or a character is already
                pushed back
        """
        ...

    @property
    def location(self) -> SourceLocation:
        """Location of the next character read() will return."""
        ...

    @property
    def last_location(self) -> SourceLocation:
        """Location of the character most recently returned by read()."""
        ...
