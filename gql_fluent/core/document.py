"""JSON description of a document, validated with pydantic.

Lets a whole operation tree be written as data and turned into core nodes:

    {
      "type": "mutation",
      "fields": [
        {"name": "createQuestion",
         "arguments": [{"name": "input", "kind": "object", "arguments": [
             {"name": "title", "value": "what"}]}],
         "fields": [{"name": "question", "fields": ["id"]}]}
      ]
    }
"""

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field as ModelField

from .arguments import (
    Argument,
    argument_any,
    argument_custom_type,
    argument_func_type,
    argument_regex,
)
from .errors import ArgumentTypeNotSupportedError
from .fields import Field, Filter
from .query import OperationType, Query

logger = logging.getLogger(__name__)


class ArgumentSpec(BaseModel):
    """One argument. ``kind`` selects the constructor."""
    name: str
    value: Any = None
    kind: Literal["value", "regex", "object", "function"] = "value"
    arguments: list["ArgumentSpec"] = ModelField(default_factory=list)

    def build(self) -> Argument:
        if self.kind == "object":
            return argument_custom_type(self.name, *(a.build() for a in self.arguments))
        if self.kind == "function":
            return argument_func_type(self.name, *(a.build() for a in self.arguments))
        if self.kind == "regex":
            if not isinstance(self.value, str):
                raise ArgumentTypeNotSupportedError(self.value)
            return argument_regex(self.name, self.value)
        return argument_any(self.name, self.value)


class FilterSpec(BaseModel):
    operators: list[str] = ModelField(default_factory=list)
    predicates: list[ArgumentSpec]

    def build(self) -> Filter:
        return Filter.of(self.operators, *(p.build() for p in self.predicates))


class FieldSpec(BaseModel):
    """One field. Children may be given as bare names."""
    name: str
    alias: str = ""
    function: bool = False
    arguments: list[ArgumentSpec] = ModelField(default_factory=list)
    # When set, arguments are combined with these boolean operators.
    operators: list[str] = ModelField(default_factory=list)
    filter: FilterSpec | None = None
    fields: list["FieldSpec | str"] = ModelField(default_factory=list)

    def build(self) -> Field:
        f = Field(self.name, alias=self.alias, is_func=self.function)
        arguments = [a.build() for a in self.arguments]
        if self.operators:
            f.set_arguments_with_bool(self.operators, *arguments)
        else:
            f.set_arguments(*arguments)
        if self.filter is not None:
            f.filter_clause = self.filter.build()
        return f.set_fields(*_build_fields(self.fields))


class OperationSpec(BaseModel):
    """The document root."""
    type: OperationType = OperationType.QUERY
    name: str = ""
    fields: list[FieldSpec | str] = ModelField(default_factory=list)

    def build(self) -> Query:
        return Query(self.type, self.name).set_fields(*_build_fields(self.fields))


def _build_fields(specs: list[FieldSpec | str]) -> list[Field | str]:
    return [s if isinstance(s, str) else s.build() for s in specs]


ArgumentSpec.model_rebuild()
FieldSpec.model_rebuild()


def load_document(text: str | bytes) -> Query:
    """Parse a JSON document description into a Query tree.

    Raises:
        pydantic.ValidationError: If the JSON does not match the schema
        GraphBError: If an argument value or boolean clause is invalid
    """
    spec = OperationSpec.model_validate_json(text)
    logger.debug("Loaded %s document description with %d top-level field(s)", spec.type.value, len(spec.fields))
    return spec.build()
