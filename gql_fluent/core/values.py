"""Argument value variants.

Every variant is a small immutable dataclass with a ``tokens()`` method.
Scalars yield one fragment; lists and objects yield their delimiters as
separate fragments so a function-style argument can drop or rewrite them.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .tokens import (
    COMMA,
    LEFT_BRACE,
    LEFT_BRACKET,
    RIGHT_BRACE,
    RIGHT_BRACKET,
    joined,
)

if TYPE_CHECKING:
    from .arguments import Argument


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_int(value: int) -> str:
    return str(int(value))


def format_string(value: str) -> str:
    # No escaping: callers must not embed unescaped quotes.
    return f'"{value}"'


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def tokens(self) -> Iterator[str]:
        yield format_bool(self.value)


@dataclass(frozen=True)
class IntValue:
    value: int

    def tokens(self) -> Iterator[str]:
        yield format_int(self.value)


@dataclass(frozen=True)
class StringValue:
    value: str

    def tokens(self) -> Iterator[str]:
        yield format_string(self.value)


@dataclass(frozen=True)
class RegexValue:
    """A regular expression, rendered from its pattern source."""
    pattern: str

    def tokens(self) -> Iterator[str]:
        yield format_string(self.pattern)


def _list_tokens(items: tuple, fmt: Callable[[Any], str]) -> Iterator[str]:
    yield LEFT_BRACKET
    for i, item in enumerate(items):
        if i:
            yield COMMA
        yield fmt(item)
    yield RIGHT_BRACKET


@dataclass(frozen=True)
class BoolListValue:
    values: tuple[bool, ...] = ()

    def tokens(self) -> Iterator[str]:
        return _list_tokens(self.values, format_bool)


@dataclass(frozen=True)
class IntListValue:
    values: tuple[int, ...] = ()

    def tokens(self) -> Iterator[str]:
        return _list_tokens(self.values, format_int)


@dataclass(frozen=True)
class StringListValue:
    values: tuple[str, ...] = ()

    def tokens(self) -> Iterator[str]:
        return _list_tokens(self.values, format_string)


@dataclass
class ObjectValue:
    """A nested object: ``{a:1,b:2}``.

    Also the payload of a function-call argument list; the owning
    Argument's ``is_func`` flag decides how it is drawn.
    """
    arguments: list["Argument"] = field(default_factory=list)

    def tokens(self) -> Iterator[str]:
        yield LEFT_BRACE
        yield from joined(self.arguments)
        yield RIGHT_BRACE


@dataclass
class CallValue:
    """Wraps a single function-style argument so it renders bare.

    Used for the ``func`` argument of a function field:
    ``func:eq(name,"x")``.
    """
    argument: "Argument"

    def tokens(self) -> Iterator[str]:
        return self.argument.tokens()


ArgumentValue = (
    BoolValue
    | IntValue
    | StringValue
    | RegexValue
    | BoolListValue
    | IntListValue
    | StringListValue
    | ObjectValue
    | CallValue
)
