"""atimport CLI entry point: Click group with subcommands."""

import click

from atimport import __version__


@click.group()
@click.version_option(version=__version__, prog_name="atimport")
def cli() -> None:
    """atimport - analyze and resolve stylesheet @import rules."""


# Import and register subcommands
from atimport.cli.resolve import resolve  # noqa: E402
from atimport.cli.validate import validate  # noqa: E402
from atimport.cli.inspect import inspect  # noqa: E402

cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(inspect)
