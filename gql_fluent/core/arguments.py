"""Arguments: a name bound to a value, drawn as ``name:value`` or ``name(...)``.

Function-style arguments reuse the object value's fragments to express
Dgraph query functions:

    argument_func_type("eq", argument_string("name", "x"))   ->  eq(name,"x")
    argument_func_type("has", argument_string("name", ""))   ->  has(name)
"""

import re
from collections.abc import Iterator, Sequence
from contextlib import closing
from dataclasses import dataclass
from typing import Any

from .errors import ArgumentTypeNotSupportedError
from .tokens import COLON, COMMA, LEFT_BRACE, LEFT_PAREN, RIGHT_BRACE, RIGHT_PAREN
from .values import (
    ArgumentValue,
    BoolListValue,
    BoolValue,
    IntListValue,
    IntValue,
    ObjectValue,
    RegexValue,
    StringListValue,
    StringValue,
)

# The one function name whose value is never drawn: has(predicate).
UNARY_FUNCTION = "has"


@dataclass
class Argument:
    """A named argument value.

    Attributes:
        name: Argument name, or the function name when ``is_func`` is set
        value: One of the value variants
        is_func: Draw as ``name(...)`` instead of ``name:value``
    """
    name: str
    value: ArgumentValue
    is_func: bool = False

    def tokens(self) -> Iterator[str]:
        yield self.name
        if not self.is_func:
            yield COLON
            yield from self.value.tokens()
            return

        yield LEFT_PAREN
        with closing(self.value.tokens()) as inner:
            for token in inner:
                if token in (LEFT_BRACE, RIGHT_BRACE):
                    continue
                if token == COLON:
                    if self.name == UNARY_FUNCTION:
                        break
                    token = COMMA
                yield token
        yield RIGHT_PAREN


def argument_bool(name: str, value: bool) -> Argument:
    return Argument(name, BoolValue(value))


def argument_int(name: str, value: int) -> Argument:
    return Argument(name, IntValue(value))


def argument_string(name: str, value: str) -> Argument:
    return Argument(name, StringValue(value))


def argument_regex(name: str, value: re.Pattern | str) -> Argument:
    """Create a regex argument from a compiled pattern or its source."""
    pattern = value.pattern if isinstance(value, re.Pattern) else value
    return Argument(name, RegexValue(pattern))


def argument_bool_list(name: str, *values: bool) -> Argument:
    return Argument(name, BoolListValue(tuple(values)))


def argument_int_list(name: str, *values: int) -> Argument:
    return Argument(name, IntListValue(tuple(values)))


def argument_string_list(name: str, *values: str) -> Argument:
    return Argument(name, StringListValue(tuple(values)))


def argument_custom_type(name: str, *arguments: Argument) -> Argument:
    """Create a nested object argument: ``name:{a:..,b:..}``.

    Custom input types can nest arbitrarily deep.
    """
    return Argument(name, ObjectValue(list(arguments)))


def argument_func_type(name: str, *arguments: Argument) -> Argument:
    """Create a function-style argument: ``name(a,value)``."""
    return Argument(name, ObjectValue(list(arguments)), is_func=True)


def _list_kind(values: Sequence[Any]) -> type | None:
    """Return the single element type of a homogeneous list, or None."""
    kinds = set()
    for v in values:
        for kind in (bool, int, str):
            if isinstance(v, kind):
                kinds.add(kind)
                break
        else:
            return None
    return kinds.pop() if len(kinds) == 1 else None


def argument_any(name: str, value: Any) -> Argument:
    """Create an argument from a plain Python value.

    Supports bool, int, str, compiled regular expressions and homogeneous
    lists or tuples of bool, int or str. An empty list renders as ``[]``.

    Raises:
        ArgumentTypeNotSupportedError: For any other value
    """
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return argument_bool(name, value)
    if isinstance(value, int):
        return argument_int(name, value)
    if isinstance(value, str):
        return argument_string(name, value)
    if isinstance(value, re.Pattern):
        return argument_regex(name, value)
    if isinstance(value, (list, tuple)):
        if not value:
            return argument_string_list(name)
        kind = _list_kind(value)
        if kind is bool:
            return argument_bool_list(name, *value)
        if kind is int:
            return argument_int_list(name, *value)
        if kind is str:
            return argument_string_list(name, *value)
    raise ArgumentTypeNotSupportedError(value)
