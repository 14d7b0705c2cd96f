"""Tests for the builder API."""

import pytest

from sexpline import (
    Base64,
    BuildError,
    ErrorKind,
    Hexadecimal,
    InvalidTokenCharacterError,
    List,
    SexpError,
    Token,
    make_base64,
    make_hex,
    make_list,
    make_token,
    must_base64,
    must_hex,
    must_list,
    must_token,
)
from sexpline.producer import Producer, producer


class TestMakeToken:
    def test_from_str(self) -> None:
        node = make_token("abc")
        assert node == Token(b"abc")
        assert node.text == "abc"

    def test_from_bytes(self) -> None:
        assert make_token(b"d.e.f/gh").value == b"d.e.f/gh"

    @pytest.mark.parametrize("value", ["", "1abc", "a b", "a(b", "é", b"a\xff", "#61#"])
    def test_invalid(self, value: str | bytes) -> None:
        with pytest.raises(InvalidTokenCharacterError) as exc_info:
            make_token(value)
        assert exc_info.value.kind is ErrorKind.INVALID_TOKEN_CHARACTER
        assert isinstance(exc_info.value, BuildError)
        assert isinstance(exc_info.value, SexpError)

    def test_error_reports_position(self) -> None:
        with pytest.raises(InvalidTokenCharacterError) as exc_info:
            make_token("ab cd")
        assert exc_info.value.position == 2
        assert "index 2" in str(exc_info.value)

    def test_empty_token_message(self) -> None:
        with pytest.raises(InvalidTokenCharacterError, match="empty"):
            make_token("")

    def test_direct_construction_also_validates(self) -> None:
        with pytest.raises(InvalidTokenCharacterError):
            Token(b"9lives")


class TestOctetStrings:
    def test_make_hex(self) -> None:
        assert make_hex(b"\x00\xff") == Hexadecimal(b"\x00\xff")

    def test_make_base64(self) -> None:
        assert make_base64(b"abc") == Base64(b"abc")

    def test_bytearray_is_frozen(self) -> None:
        buf = bytearray(b"abc")
        node = make_hex(buf)
        buf[0] = 0
        assert node.data == b"abc"
        assert isinstance(node.data, bytes)

    def test_rejects_text(self) -> None:
        with pytest.raises(BuildError):
            make_base64("abc")  # type: ignore[arg-type]


class TestMakeList:
    def test_children_in_order(self) -> None:
        node = make_list(make_token("a"), make_hex(b"b"), make_list())
        assert node == List((Token(b"a"), Hexadecimal(b"b"), List(())))

    def test_empty(self) -> None:
        assert make_list() == List(())

    def test_rejects_non_node(self) -> None:
        with pytest.raises(BuildError, match="child 1"):
            make_list(make_token("a"), "b")  # type: ignore[arg-type]


class TestTrustedBuilders:
    """must_* surface build errors as fatal RuntimeError."""

    def test_valid_input(self) -> None:
        node = must_list(must_token("key"), must_hex(b"\x01"), must_base64(b"\x02"))
        assert str(node) == "(key #01# |Ag==|)"

    def test_invalid_token_is_fatal(self) -> None:
        with pytest.raises(RuntimeError) as exc_info:
            must_token("not a token")
        assert not isinstance(exc_info.value, SexpError)
        assert isinstance(exc_info.value.__cause__, InvalidTokenCharacterError)

    def test_invalid_child_is_fatal(self) -> None:
        with pytest.raises(RuntimeError):
            must_list(42)  # type: ignore[arg-type]

    def test_wrapper_keeps_name(self) -> None:
        assert must_token.__name__ == "token"


class TestProducerInstance:
    def test_module_instance(self) -> None:
        assert isinstance(producer, Producer)
        assert Producer().token("x") == producer.token("x")


class TestNodeImmutability:
    def test_frozen(self) -> None:
        node = make_token("abc")
        with pytest.raises(AttributeError):
            node.value = b"def"  # type: ignore[misc]

    def test_list_children_become_tuple(self) -> None:
        node = List([Token(b"a")])  # type: ignore[arg-type]
        assert node.children == (Token(b"a"),)

    def test_direct_list_rejects_non_node(self) -> None:
        with pytest.raises(BuildError, match="child 0 is str"):
            List(("abc",))  # type: ignore[arg-type]

    def test_direct_list_rejects_nested_non_node(self) -> None:
        with pytest.raises(BuildError, match="child 1 is bytes"):
            List([Token(b"a"), b"b"])  # type: ignore[list-item]

    def test_structural_equality(self) -> None:
        assert make_list(make_token("a")) == make_list(make_token("a"))
        assert make_hex(b"a") != make_base64(b"a")
