"""Command-line interface for gql-fluent."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .core.document import load_document
from .core.errors import GraphBError


@click.group()
@click.version_option(package_name="gql-fluent")
def main():
    """Build GraphQL and Dgraph documents from JSON descriptions."""
    pass


@main.command()
@click.argument("document", type=click.File("rb"))
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help='Wrap the document in a {"query": ...} request body.',
)
@click.option(
    "--check/--no-check",
    default=True,
    help="Validate names and the field tree before rendering (default: on).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the result to a file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def render(document, as_json: bool, check: bool, output: str | None, verbose: bool):
    """Render a JSON document description.

    DOCUMENT is a JSON file, or - to read from stdin.

    Examples:

        gql-fluent render ./query.json

        gql-fluent render --json -o body.json ./mutation.json

        gql-fluent render --no-check ./dgraph.json

        cat query.json | gql-fluent render -
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        click.echo(f"Reading {document.name}...", err=True)

    try:
        query = load_document(document.read())
        text = query.to_json(check) if as_json else query.render(check)
    except ValidationError as e:
        raise click.ClickException(f"Invalid document description:\n{e}") from e
    except GraphBError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Operation: {query.type.value}", err=True)
        click.echo(f"  Top-level fields: {len(query.fields)}", err=True)
        click.echo(f"  Length: {len(text)}", err=True)

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n")
        if verbose:
            click.echo(f"Done! Wrote {output_path}", err=True)
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
