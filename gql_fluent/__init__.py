"""Fluent builder for GraphQL and Dgraph query documents."""
