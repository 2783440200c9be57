"""Token literals and traversal helpers shared by every AST node.

Each node renders itself as a lazy sequence of text fragments. Parents
compose those sequences with the helpers below; nothing is concatenated
until the root is drained.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

LEFT_BRACE = "{"
RIGHT_BRACE = "}"
LEFT_PAREN = "("
RIGHT_PAREN = ")"
LEFT_BRACKET = "["
RIGHT_BRACKET = "]"
COLON = ":"
COMMA = ","
FILTER = "@filter"


@runtime_checkable
class Renderable(Protocol):
    """Protocol for anything that can render itself as text fragments."""

    def tokens(self) -> Iterator[str]:
        """Yield the node's text fragments in document order."""
        ...


def joined(parts: Iterable[Renderable], separator: str = COMMA) -> Iterator[str]:
    """Drain each part in order, yielding ``separator`` between them."""
    for i, part in enumerate(parts):
        if i:
            yield separator
        yield from part.tokens()


def bool_joined(operators: list[str], predicates: list[Renderable]) -> Iterator[str]:
    """Yield ``p1 OP1 p2 OP2 ... pn``.

    ``operators`` must be one shorter than ``predicates``; callers validate
    that at construction time.
    """
    for i, predicate in enumerate(predicates):
        if i:
            yield f" {operators[i - 1]} "
        yield from predicate.tokens()


def wrapped(left: str, inner: Iterator[str], right: str) -> Iterator[str]:
    """Yield ``left``, every fragment of ``inner``, then ``right``."""
    yield left
    yield from inner
    yield right


def render(node: Renderable) -> str:
    """Drain a node's fragments into a single string."""
    return "".join(node.tokens())
