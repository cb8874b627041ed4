"""selectorkit CLI entry point: Click group with subcommands."""

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
def cli() -> None:
    """selectorkit - build and render CSS selectors."""


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
