"""CLI command: selectorkit render -- print the text of a saved selector tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.config import BuilderConfig
from selectorkit.errors import SelectorError
from selectorkit.selector.builder import SelectorBuilder
from selectorkit.serialization import load


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Reject unknown combinators.")
@click.option(
    "--collapse-descendant",
    is_flag=True,
    help="Render the descendant combinator as a single space in trees that do not record it.",
)
def render(jsonfile: str, strict: bool, collapse_descendant: bool) -> None:
    """Load a JSON selector tree and print its selector text."""
    builder = SelectorBuilder(
        BuilderConfig(strict_combinators=strict, collapse_descendant=collapse_descendant)
    )
    try:
        node = load(Path(jsonfile), builder)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(node.stringify())
