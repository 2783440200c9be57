#!/usr/bin/env python3
"""Demonstration of the fluent document builder.

This script shows how to:
1. Build a GraphQL mutation with a nested input object
2. Build a Dgraph query with functions and filters
3. Produce a JSON request body

Note: This demo doesn't make real API calls - it just prints documents.
"""

from gql_fluent.core import (
    Field,
    OperationType,
    Query,
    argument_custom_type,
    argument_func_type,
    argument_string,
    argument_string_list,
    new_field,
    new_func_field,
)


def main():
    print("=== Fluent Builder Demo ===\n")

    print("1. GraphQL mutation:")
    mutation = Query(OperationType.MUTATION).set_fields(
        new_field("createQuestion")
        .set_arguments(
            argument_custom_type(
                "input",
                argument_string("title", "what"),
                argument_string("content", "what"),
                argument_string_list("tagIds"),
            ),
        )
        .set_fields(new_field("question", fields=["id"])),
    )
    print(f"   {mutation.render()}\n")

    print("2. Dgraph query:")
    query = Query(OperationType.DGRAPH).set_fields(
        new_func_field("me")
        .set_arguments(argument_func_type("eq", argument_string("name@en", "StevenSpielberg")))
        .set_fields(
            Field("name@en@filter").set_arguments(
                argument_func_type("has", argument_string("director.film", "")),
            ),
            Field("director.film@filter")
            .set_arguments_with_bool(
                ["OR"],
                argument_func_type("allofterms", argument_string("name@en", "jonesindiana")),
                argument_func_type("allofterms", argument_string("name@en", "jurassicpark")),
            )
            .set_fields("uid"),
        ),
    )
    print(f"   {query.render()}\n")

    print("3. JSON request body:")
    print(f"   {mutation.to_json()}")


if __name__ == "__main__":
    main()
