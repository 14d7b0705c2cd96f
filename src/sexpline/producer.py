"""Builder API for constructing trees from program data.

Two tiers:

- make_token/make_hex/make_base64/make_list raise BuildError on bad input.
  Use these for data from outside the program.
- must_token/must_hex/must_base64/must_list are for values already known to
  be valid, such as literals. A BuildError there is a programming error, so
  it is re-raised as RuntimeError, outside the SexpError hierarchy.

Example:
    >>> from sexpline.producer import must_list, must_token, make_hex
    >>> tree = must_list(must_token("key"), make_hex(b"\\x00\\xff"))
    >>> str(tree)
    '(key #00ff#)'

"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from sexpline.errors import BuildError
from sexpline.nodes import Base64, Hexadecimal, List, Node, Token

P = ParamSpec("P")
N = TypeVar("N", bound=Node)


class Producer:
    """Fallible node constructors.

    Thread Safety:
        Stateless; the module-level ``producer`` instance can be shared.
    """

    __slots__ = ()

    def token(self, value: str | bytes) -> Token:
        """Build a Token.

        Raises:
            InvalidTokenCharacterError: ``value`` is empty or breaks the
                token grammar
        """
        return Token(value)

    def hexadecimal(self, data: bytes) -> Hexadecimal:
        return Hexadecimal(data)

    def base64(self, data: bytes) -> Base64:
        return Base64(data)

    def list(self, *children: Node) -> List:
        """Build a List from child nodes, in order.

        Raises:
            BuildError: A child is not a Node
        """
        return List(children)


producer = Producer()

make_token = producer.token
make_hex = producer.hexadecimal
make_base64 = producer.base64
make_list = producer.list


def _trusted(build: Callable[P, N]) -> Callable[P, N]:
    @wraps(build)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> N:
        try:
            return build(*args, **kwargs)
        except BuildError as err:
            msg = f"invalid trusted input: {err}"
            raise RuntimeError(msg) from err

    return wrapper


must_token = _trusted(make_token)
must_hex = _trusted(make_hex)
must_base64 = _trusted(make_base64)
must_list = _trusted(make_list)

__all__ = [
    "Producer",
    "make_base64",
    "make_hex",
    "make_list",
    "make_token",
    "must_base64",
    "must_hex",
    "must_list",
    "must_token",
    "producer",
]
