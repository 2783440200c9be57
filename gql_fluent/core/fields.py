"""Field selections.

A field renders as::

    [alias:]name[(arguments)][@filter(predicates)][{children}]

Empty argument lists and empty child lists are omitted entirely.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .arguments import Argument
from .errors import CyclicFieldError, InvalidBooleanExpressionError, NilFieldError
from .names import check_name
from .tokens import (
    COLON,
    FILTER,
    LEFT_BRACE,
    LEFT_PAREN,
    RIGHT_BRACE,
    RIGHT_PAREN,
    bool_joined,
    joined,
    wrapped,
)
from .values import CallValue

# Name of the argument a function field stores its root function under.
FUNC_ARGUMENT = "func"


def _boolean_clause(operators: Iterable[str], predicates: Iterable[Argument]) -> tuple[list[str], list[Argument]]:
    operators, predicates = list(operators), list(predicates)
    if not predicates or len(predicates) != len(operators) + 1:
        raise InvalidBooleanExpressionError(operators, predicates)
    return operators, predicates


@dataclass
class Filter:
    """A boolean-combined ``@filter(...)`` clause."""
    operators: list[str]
    predicates: list[Argument]

    @classmethod
    def of(cls, operators: Iterable[str], *predicates: Argument) -> "Filter":
        return cls(*_boolean_clause(operators, predicates))

    def tokens(self) -> Iterator[str]:
        yield FILTER
        yield from wrapped(LEFT_PAREN, bool_joined(self.operators, self.predicates), RIGHT_PAREN)


@dataclass(eq=False)
class Field:
    """A selection in the document tree.

    Mutating methods return the field itself so calls can be chained::

        Field("user").set_arguments(argument_int("id", 1)).set_fields("name")
    """
    name: str
    alias: str = ""
    arguments: list[Argument] = field(default_factory=list)
    # Non-empty when arguments are combined with boolean operators.
    operators: list[str] = field(default_factory=list)
    filter_clause: Filter | None = None
    fields: list["Field | None"] = field(default_factory=list)
    is_func: bool = False

    def _wrap(self, argument: Argument) -> Argument:
        if self.is_func and argument.is_func:
            return Argument(FUNC_ARGUMENT, CallValue(argument))
        return argument

    def set_arguments(self, *arguments: Argument) -> "Field":
        """Replace the argument list."""
        self.operators = []
        self.arguments = [self._wrap(a) for a in arguments]
        return self

    def add_arguments(self, *arguments: Argument) -> "Field":
        """Append to the argument list.

        Raises:
            InvalidBooleanExpressionError: If the arguments are already
                combined with boolean operators
        """
        if self.operators:
            raise InvalidBooleanExpressionError(self.operators, self.arguments + list(arguments))
        self.arguments.extend(self._wrap(a) for a in arguments)
        return self

    def set_arguments_with_bool(self, operators: Iterable[str], *predicates: Argument) -> "Field":
        """Replace the arguments with ``p1 OP1 p2 ...``, without ``@filter``."""
        self.operators, self.arguments = _boolean_clause(operators, predicates)
        return self

    def filter(self, operators: Iterable[str], *predicates: Argument) -> "Field":
        """Set the ``@filter(...)`` clause drawn after the argument list."""
        self.filter_clause = Filter.of(operators, *predicates)
        return self

    def set_fields(self, *fields: "Field | str | None") -> "Field":
        """Replace the child selections. Strings become leaf fields."""
        self.fields = as_fields(fields)
        return self

    def add_fields(self, *fields: "Field | str | None") -> "Field":
        """Append child selections. Strings become leaf fields."""
        self.fields.extend(as_fields(fields))
        return self

    def check(self, validate_names: bool = True, _ancestors: frozenset[int] = frozenset()) -> None:
        """Validate this field and its subtree.

        Args:
            validate_names: Check names and aliases against the GraphQL rule
                (off for graph-pattern documents)

        Raises:
            InvalidNameError: For an invalid name or non-empty alias
            NilFieldError: If a child slot is None
            CyclicFieldError: If the field occurs in its own subtree
        """
        if validate_names:
            check_name(self.name, "field")
            if self.alias:
                check_name(self.alias, "alias")
        ancestors = _ancestors | {id(self)}
        for child in self.fields:
            if child is None:
                raise NilFieldError(self.name)
            if id(child) in ancestors:
                raise CyclicFieldError(child.name)
            child.check(validate_names, ancestors)

    def tokens(self) -> Iterator[str]:
        if self.alias:
            yield self.alias
            yield COLON
        yield self.name
        if self.arguments:
            if self.operators:
                inner = bool_joined(self.operators, self.arguments)
            else:
                inner = joined(self.arguments)
            yield from wrapped(LEFT_PAREN, inner, RIGHT_PAREN)
        if self.filter_clause is not None:
            yield from self.filter_clause.tokens()
        if self.fields:
            yield from wrapped(LEFT_BRACE, joined(self.fields), RIGHT_BRACE)


def as_fields(fields: Iterable["Field | str | None"]) -> list["Field | None"]:
    return [Field(f) if isinstance(f, str) else f for f in fields]


def new_field(
    name: str,
    *,
    alias: str = "",
    arguments: Iterable[Argument] = (),
    fields: Iterable["Field | str"] = (),
) -> Field:
    """Create a plain field with optional alias, arguments and children."""
    return Field(name, alias=alias).set_arguments(*arguments).set_fields(*fields)


def new_func_field(
    name: str,
    *,
    arguments: Iterable[Argument] = (),
    fields: Iterable["Field | str"] = (),
) -> Field:
    """Create a Dgraph function field, e.g. ``me(func:eq(name,"x"))``."""
    return Field(name, is_func=True).set_arguments(*arguments).set_fields(*fields)


def fields_of(*names: str) -> list[Field]:
    """Create one leaf field per name."""
    return [Field(name) for name in names]
