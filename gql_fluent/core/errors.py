"""Errors raised while building or checking a document tree.

Rendering a checked tree never raises; everything here surfaces at
construction time or from ``Query.check()``.
"""

from typing import Any

NAME_PATTERN = "[_A-Za-z][_0-9A-Za-z]*"
NAME_SPEC_URL = "http://facebook.github.io/graphql/October2016/#sec-Names"


class GraphBError(Exception):
    """Base class for all gql-fluent errors."""


class InvalidNameError(GraphBError, ValueError):
    """An operation, field or alias name is not a valid GraphQL name."""

    def __init__(self, name: str, kind: str = "operation"):
        self.name = name
        self.kind = kind
        super().__init__(
            f"'{name}' is an invalid {kind} name in GraphQL. "
            f"A valid name matches /{NAME_PATTERN}/, see: {NAME_SPEC_URL}"
        )


class ArgumentTypeNotSupportedError(GraphBError, TypeError):
    """A value passed to ``argument_any`` has no matching value variant."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"'{value!r}' of type {type(value).__name__} is not a supported argument value"
        )


class InvalidBooleanExpressionError(GraphBError, ValueError):
    """Operators and predicates of a boolean clause do not line up."""

    def __init__(self, operators: list[str], predicates: list):
        self.operators = operators
        self.predicates = predicates
        super().__init__(
            f"A boolean clause needs exactly one operator fewer than predicates, "
            f"got {len(operators)} operator(s) for {len(predicates)} predicate(s)"
        )


class NilFieldError(GraphBError):
    """A child field slot holds ``None``."""

    def __init__(self, parent: str | None = None):
        self.parent = parent
        where = f" under '{parent}'" if parent else ""
        super().__init__(f"Nil field found{where}, fields cannot be None")


class CyclicFieldError(GraphBError):
    """A field appears inside its own subtree."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Field '{name}' is contained in its own subtree")
