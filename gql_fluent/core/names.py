"""Name validation for operations, fields and aliases.

Delegates the lexical rule to graphql-core so names accepted here are the
names a GraphQL parser accepts.
"""

from graphql import GraphQLError
from graphql.type import assert_name

from .errors import InvalidNameError


def is_valid_name(name: str) -> bool:
    """Check if ``name`` matches ``[_A-Za-z][_0-9A-Za-z]*``."""
    if not isinstance(name, str):
        return False
    try:
        assert_name(name)
    except GraphQLError:
        return False
    return True


def check_name(name: str, kind: str = "operation") -> str:
    """Return ``name`` unchanged, or raise InvalidNameError."""
    if not is_valid_name(name):
        raise InvalidNameError(name, kind)
    return name
