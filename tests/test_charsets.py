"""Tests for the character classifier."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sexpline import charsets


class TestWhitespace:
    """Discardable whitespace vs. newlines."""

    @pytest.mark.parametrize("char", [" ", "\t", "\v", "\f", "\x00", "\x1f"])
    def test_discardable(self, char: str) -> None:
        assert charsets.is_whitespace_discardable(char)

    @pytest.mark.parametrize("char", ["\r", "\n"])
    def test_newlines_are_not_discardable(self, char: str) -> None:
        assert charsets.is_newline(char)
        assert not charsets.is_whitespace_discardable(char)

    @pytest.mark.parametrize("char", ["!", "a", "(", "#", "\x7f"])
    def test_printable_is_not_whitespace(self, char: str) -> None:
        assert not charsets.is_whitespace_discardable(char)
        assert not charsets.is_newline(char)


class TestAscii:
    def test_boundary(self) -> None:
        assert charsets.is_ascii("\x7f")
        assert not charsets.is_ascii("\x80")
        assert not charsets.is_ascii("é")


class TestTokenClasses:
    """Token start and continuation sets."""

    @pytest.mark.parametrize("char", list("-./_:*+="))
    def test_punctuation_starts_tokens(self, char: str) -> None:
        assert charsets.is_token_punct(char)
        assert charsets.is_token_start(char)
        assert charsets.is_token_continuation(char)

    @pytest.mark.parametrize("char", list("aZ"))
    def test_alpha(self, char: str) -> None:
        assert charsets.is_alpha(char)
        assert charsets.is_token_start(char)

    def test_digits_only_continue(self) -> None:
        for char in "0123456789":
            assert charsets.is_digit(char)
            assert not charsets.is_token_start(char)
            assert charsets.is_token_continuation(char)

    @pytest.mark.parametrize("char", list("()#|\"'@$?!,;<>[]{}~` "))
    def test_excluded_characters(self, char: str) -> None:
        assert not charsets.is_token_continuation(char)

    def test_valid_tokens(self) -> None:
        assert charsets.is_valid_token("abc")
        assert charsets.is_valid_token("d.e.f/gh")
        assert charsets.is_valid_token(b"snake_case2")
        assert charsets.is_valid_token("-")

    def test_invalid_tokens(self) -> None:
        assert not charsets.is_valid_token("")
        assert not charsets.is_valid_token("1abc")
        assert not charsets.is_valid_token("a b")

    def test_find_invalid_token_char(self) -> None:
        assert charsets.find_invalid_token_char("abc") is None
        assert charsets.find_invalid_token_char("") == -1
        assert charsets.find_invalid_token_char("9a") == 0
        assert charsets.find_invalid_token_char("ab#") == 2
        assert charsets.find_invalid_token_char(b"a\xff") == 1


class TestEncodedDigits:
    def test_hex_digits(self) -> None:
        for char in "0123456789abcdefABCDEF":
            assert charsets.is_hex_digit(char)
        for char in "gG#x ":
            assert not charsets.is_hex_digit(char)

    def test_base64_digits(self) -> None:
        for char in "AZaz09+/":
            assert charsets.is_base64_digit(char)
        assert not charsets.is_base64_digit("=")
        assert charsets.is_base64_padding("=")
        assert not charsets.is_base64_digit("-")
        assert not charsets.is_base64_digit("_")


class TestClassifierProperties:
    """Invariants that hold over the whole character range."""

    @given(st.characters(max_codepoint=0xFF))
    def test_token_start_implies_continuation(self, char: str) -> None:
        if charsets.is_token_start(char):
            assert charsets.is_token_continuation(char)

    @given(st.characters(max_codepoint=0xFF))
    def test_classes_are_ascii(self, char: str) -> None:
        if (
            charsets.is_token_continuation(char)
            or charsets.is_hex_digit(char)
            or charsets.is_base64_digit(char)
            or charsets.is_whitespace_discardable(char)
            or charsets.is_newline(char)
        ):
            assert charsets.is_ascii(char)

    @given(st.characters(max_codepoint=0x7F))
    def test_whitespace_never_significant(self, char: str) -> None:
        if charsets.is_whitespace_discardable(char):
            assert not charsets.is_token_continuation(char)
            assert not charsets.is_hex_digit(char)
            assert not charsets.is_base64_digit(char)
