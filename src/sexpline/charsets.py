"""Character sets and predicates for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Each predicate takes a single character (a ``str`` of length 1). Bytes input
is mapped to code points 0-255 by the cursor before it reaches these.

Usage:
    from sexpline.charsets import is_token_start

    if is_token_start(char):  # O(1) lookup
        ...
"""

from __future__ import annotations

# Structural delimiters
LIST_OPEN = "("
LIST_CLOSE = ")"
HEX_DELIMITER = "#"
BASE64_DELIMITER = "|"

MAX_ASCII = 0x7F

NEWLINES: frozenset[str] = frozenset("\r\n")

# Every control character and space, minus CR/LF
DISCARDABLE_WHITESPACE: frozenset[str] = frozenset(chr(i) for i in range(0x21)) - NEWLINES

ALPHA: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

DIGITS: frozenset[str] = frozenset("0123456789")

TOKEN_PUNCTUATION: frozenset[str] = frozenset("-./_:*+=")

TOKEN_START: frozenset[str] = ALPHA | TOKEN_PUNCTUATION

TOKEN_CONTINUATION: frozenset[str] = TOKEN_START | DIGITS

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

BASE64_DIGITS: frozenset[str] = ALPHA | DIGITS | frozenset("+/")

BASE64_PADDING = "="


def is_newline(char: str) -> bool:
    """Check if character is CR or LF."""
    return char in NEWLINES


def is_whitespace_discardable(char: str) -> bool:
    """Check if character is whitespace that is skipped in every mode.

    Any character at or below space (0x20) other than CR/LF, which covers
    space, tab, vertical tab and form feed.
    """
    return char in DISCARDABLE_WHITESPACE


def is_ascii(char: str) -> bool:
    """Check if character is 7-bit ASCII."""
    return ord(char) <= MAX_ASCII


def is_alpha(char: str) -> bool:
    return char in ALPHA


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_token_punct(char: str) -> bool:
    """Check if character is one of ``- . / _ : * + =``."""
    return char in TOKEN_PUNCTUATION


def is_token_start(char: str) -> bool:
    """Check if character may begin a token (alpha or token punctuation)."""
    return char in TOKEN_START


def is_token_continuation(char: str) -> bool:
    """Check if character may appear after the first position of a token."""
    return char in TOKEN_CONTINUATION


def is_hex_digit(char: str) -> bool:
    return char in HEX_DIGITS


def is_base64_digit(char: str) -> bool:
    """Check if character is in the standard base64 alphabet.

    Padding (``=``) is not a digit; see is_base64_padding().
    """
    return char in BASE64_DIGITS


def is_base64_padding(char: str) -> bool:
    return char == BASE64_PADDING


def find_invalid_token_char(value: str | bytes) -> int | None:
    """Locate the first character that breaks the token grammar.

    Args:
        value: Candidate token as text or bytes

    Returns:
        Index of the first offending character, ``-1`` for an empty
        candidate, or None when the whole value is a valid token.
    """
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("latin-1")
    if not value:
        return -1
    if value[0] not in TOKEN_START:
        return 0
    for i in range(1, len(value)):
        if value[i] not in TOKEN_CONTINUATION:
            return i
    return None


def is_valid_token(value: str | bytes) -> bool:
    """Check a whole candidate token against the token grammar."""
    return find_invalid_token_char(value) is None
