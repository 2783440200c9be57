"""Core modules for building GraphQL and Dgraph documents."""

from .arguments import (
    Argument,
    argument_any,
    argument_bool,
    argument_bool_list,
    argument_custom_type,
    argument_func_type,
    argument_int,
    argument_int_list,
    argument_regex,
    argument_string,
    argument_string_list,
)
from .document import ArgumentSpec, FieldSpec, FilterSpec, OperationSpec, load_document
from .errors import (
    ArgumentTypeNotSupportedError,
    CyclicFieldError,
    GraphBError,
    InvalidBooleanExpressionError,
    InvalidNameError,
    NilFieldError,
)
from .fields import Field, Filter, fields_of, new_field, new_func_field
from .names import check_name, is_valid_name
from .query import OperationType, Query, new_query
from .tokens import Renderable, render

__all__ = [
    # Arguments
    "Argument",
    "argument_any",
    "argument_bool",
    "argument_bool_list",
    "argument_custom_type",
    "argument_func_type",
    "argument_int",
    "argument_int_list",
    "argument_regex",
    "argument_string",
    "argument_string_list",
    # Fields
    "Field",
    "Filter",
    "fields_of",
    "new_field",
    "new_func_field",
    # Operations
    "OperationType",
    "Query",
    "new_query",
    # Rendering
    "Renderable",
    "render",
    # Names
    "check_name",
    "is_valid_name",
    # Document descriptions
    "ArgumentSpec",
    "FieldSpec",
    "FilterSpec",
    "OperationSpec",
    "load_document",
    # Errors
    "ArgumentTypeNotSupportedError",
    "CyclicFieldError",
    "GraphBError",
    "InvalidBooleanExpressionError",
    "InvalidNameError",
    "NilFieldError",
]
