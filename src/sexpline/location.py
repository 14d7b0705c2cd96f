"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in input text.
Cursors produce these; ParseError copies them into its attributes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a single character in the input.

    Line and column are 1-indexed; offset is the 0-indexed character count
    from the start of input.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute character offset
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3)
            >>> str(loc)
            '1:4'

            >>> str(SourceLocation(2, 1, 10, "msg.sexp"))
            'msg.sexp:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.sexp:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
