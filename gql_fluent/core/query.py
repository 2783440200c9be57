"""Operation roots: queries, mutations, subscriptions and Dgraph blocks."""

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .errors import NilFieldError
from .fields import Field, as_fields
from .names import check_name
from .tokens import LEFT_BRACE, RIGHT_BRACE, joined, render, wrapped

logger = logging.getLogger(__name__)


class OperationType(Enum):
    """Kinds of document root."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"
    DGRAPH = "dgraph"  # graph-pattern query, drawn without a keyword

    @property
    def keyword(self) -> str:
        """The keyword that opens the document, empty for Dgraph blocks."""
        return "" if self is OperationType.DGRAPH else self.value


@dataclass(eq=False)
class Query:
    """The root of a document.

    Example:
        q = Query(OperationType.MUTATION).set_fields(
            new_field("createQuestion", fields=["id"]),
        )
        q.render()  # 'mutation{createQuestion{id}}'
    """
    type: OperationType = OperationType.QUERY
    name: str = ""
    fields: list[Field | None] = field(default_factory=list)

    def set_name(self, name: str) -> "Query":
        self.name = name
        return self

    def set_fields(self, *fields: Field | str | None) -> "Query":
        """Replace the top-level fields. Strings become leaf fields."""
        self.fields = as_fields(fields)
        return self

    def add_fields(self, *fields: Field | str | None) -> "Query":
        """Append top-level fields. Strings become leaf fields."""
        self.fields.extend(as_fields(fields))
        return self

    def get_field(self, name: str) -> Field | None:
        """Return the first top-level field called ``name``, or None.

        Only direct children of the root are searched.
        """
        for f in self.fields:
            if f is not None and f.name == name:
                return f
        return None

    def check(self) -> None:
        """Validate the whole tree before rendering.

        The operation name may be empty. Field names and aliases are only
        validated for GraphQL documents; Dgraph predicates such as
        ``name@en`` or ``director.film`` are passed through.

        Raises:
            InvalidNameError: For an invalid operation, field or alias name
            NilFieldError: If any field slot is None
            CyclicFieldError: If a field occurs in its own subtree
        """
        if self.name:
            check_name(self.name, "operation")
        validate_names = self.type is not OperationType.DGRAPH
        for f in self.fields:
            if f is None:
                raise NilFieldError()
            f.check(validate_names)
        logger.debug("Checked %s operation with %d top-level field(s)", self.type.value, len(self.fields))

    def tokens(self) -> Iterator[str]:
        """Yield the document fragments without checking the tree."""
        keyword = self.type.keyword
        if keyword:
            yield keyword
            if self.name:
                yield " "
        if self.name:
            yield self.name
        yield from wrapped(LEFT_BRACE, joined(self.fields), RIGHT_BRACE)

    def iter_tokens(self) -> Iterator[str]:
        """Check the tree, then return its fragment stream."""
        self.check()
        return self.tokens()

    def render(self, check: bool = True) -> str:
        """Return the complete document text.

        Args:
            check: Run ``check()`` first; pass False to draw the tree as is
        """
        if check:
            self.check()
        document = render(self)
        logger.debug("Rendered %s document (%d chars)", self.type.value, len(document))
        return document

    def to_json(self, check: bool = True) -> str:
        """Return the ``{"query": ...}`` request body for a GraphQL endpoint."""
        return json.dumps({"query": self.render(check)})

    def __str__(self) -> str:
        return self.render()


def new_query(
    type: OperationType = OperationType.QUERY,
    *,
    name: str = "",
    fields: Iterable[Field | str] = (),
) -> Query:
    """Create an operation root with optional name and top-level fields."""
    return Query(type, name).set_fields(*fields)
