"""Tests for arguments and the function-style rewrite."""

import re

import pytest

from gql_fluent.core import (
    Argument,
    ArgumentTypeNotSupportedError,
    GraphBError,
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
    render,
)
from gql_fluent.core.values import (
    BoolListValue,
    BoolValue,
    IntListValue,
    IntValue,
    RegexValue,
    StringListValue,
    StringValue,
)


class ClosingTracker:
    """Value whose fragment stream records whether it was closed."""

    def __init__(self):
        self.closed = False
        self.exhausted = False

    def tokens(self):
        try:
            yield "{"
            yield "pred"
            yield ":"
            yield '"v"'
            yield "}"
            self.exhausted = True
        finally:
            self.closed = True


class TestObjectStyleArguments:
    """Tests for name:value rendering."""

    def test_scalars(self):
        assert render(argument_bool("flag", True)) == "flag:true"
        assert render(argument_int("first", 10)) == "first:10"
        assert render(argument_string("title", "what")) == 'title:"what"'
        assert render(argument_regex("name", re.compile("^Ste.*"))) == 'name:"^Ste.*"'

    def test_regex_from_string(self):
        assert argument_regex("name", "a+") == Argument("name", RegexValue("a+"))

    def test_lists(self):
        assert render(argument_bool_list("b", True, True)) == "b:[true,true]"
        assert render(argument_int_list("ids", 1, 2)) == "ids:[1,2]"
        assert render(argument_string_list("tagIds")) == "tagIds:[]"

    def test_custom_type(self):
        arg = argument_custom_type(
            "input",
            argument_string("title", "what"),
            argument_string("content", "what"),
            argument_string_list("tagIds"),
        )
        assert render(arg) == 'input:{title:"what",content:"what",tagIds:[]}'

    def test_nested_custom_type(self):
        arg = argument_custom_type(
            "where",
            argument_custom_type("author", argument_int("id", 3)),
        )
        assert render(arg) == "where:{author:{id:3}}"

    def test_not_a_function(self):
        assert argument_custom_type("input").is_func is False


class TestFunctionStyleArguments:
    """Tests for name(...) rendering."""

    def test_binary_predicate(self):
        arg = argument_func_type("eq", argument_string("name@en", "StevenSpielberg"))
        assert arg.is_func is True
        assert render(arg) == 'eq(name@en,"StevenSpielberg")'

    def test_binary_predicate_with_int(self):
        arg = argument_func_type("ge", argument_int("age", 7))
        assert render(arg) == "ge(age,7)"

    def test_binary_predicate_with_list(self):
        arg = argument_func_type("anyofterms", argument_string_list("name", "a", "b"))
        assert render(arg) == 'anyofterms(name,["a","b"])'

    def test_has_drops_value(self):
        arg = argument_func_type("has", argument_string("director.film", ""))
        assert render(arg) == "has(director.film)"

    def test_has_drops_any_value(self):
        arg = argument_func_type("has", argument_int_list("friend", 1, 2, 3))
        assert render(arg) == "has(friend)"

    def test_has_drops_nested_object_value(self):
        arg = argument_func_type(
            "has", argument_custom_type("friend", argument_int("id", 1))
        )
        assert render(arg) == "has(friend)"

    def test_only_has_is_truncated(self):
        arg = argument_func_type("hasnt", argument_string("name", "x"))
        assert render(arg) == 'hasnt(name,"x")'

    def test_no_arguments(self):
        assert render(argument_func_type("uid")) == "uid()"

    def test_has_closes_abandoned_stream(self):
        value = ClosingTracker()
        arg = Argument("has", value, is_func=True)
        assert render(arg) == "has(pred)"
        assert value.closed is True
        assert value.exhausted is False

    def test_other_function_drains_stream(self):
        value = ClosingTracker()
        arg = Argument("eq", value, is_func=True)
        assert render(arg) == 'eq(pred,"v")'
        assert value.exhausted is True

    def test_fragments(self):
        arg = argument_func_type("eq", argument_string("name", "x"))
        assert list(arg.tokens()) == ["eq", "(", "name", ",", '"x"', ")"]


class TestArgumentAny:
    """Tests for coercion of plain Python values."""

    def test_bool_is_not_int(self):
        assert argument_any("a", True) == Argument("a", BoolValue(True))

    def test_int(self):
        assert argument_any("a", 3) == Argument("a", IntValue(3))

    def test_string(self):
        assert argument_any("a", "s") == Argument("a", StringValue("s"))

    def test_regex(self):
        assert argument_any("a", re.compile("x.*")) == Argument("a", RegexValue("x.*"))

    def test_lists(self):
        assert argument_any("a", [True, False]) == Argument("a", BoolListValue((True, False)))
        assert argument_any("a", [1, 2]) == Argument("a", IntListValue((1, 2)))
        assert argument_any("a", ["x"]) == Argument("a", StringListValue(("x",)))

    def test_tuple(self):
        assert argument_any("a", (1, 2)) == Argument("a", IntListValue((1, 2)))

    def test_empty_list(self):
        assert render(argument_any("tagIds", [])) == "tagIds:[]"

    @pytest.mark.parametrize(
        "value",
        [1.5, None, {"a": 1}, [1, "a"], [True, 1], [1.5], object()],
    )
    def test_unsupported(self, value):
        with pytest.raises(ArgumentTypeNotSupportedError) as exc_info:
            argument_any("a", value)
        assert exc_info.value.value is value

    def test_error_hierarchy(self):
        with pytest.raises(GraphBError):
            argument_any("a", 2.5)
        with pytest.raises(TypeError):
            argument_any("a", 2.5)

    def test_error_message(self):
        with pytest.raises(ArgumentTypeNotSupportedError, match="float is not a supported"):
            argument_any("a", 2.5)
