"""pxmedia CLI entry point: Click group with subcommands."""

import click

from pxmedia import __version__


@click.group()
@click.version_option(version=__version__, prog_name="pxmedia")
def cli() -> None:
    """pxmedia - scale a mobile stylesheet for desktop and landscape viewports."""


# Import and register subcommands
from pxmedia.cli.convert import convert  # noqa: E402
from pxmedia.cli.inspect import inspect  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
