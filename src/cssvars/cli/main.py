"""cssvars CLI entry point: Click group with subcommands."""

import logging

import click

from cssvars import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssvars")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cssvars - generate typed CSS custom properties from a JS object literal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssvars.cli.generate import generate  # noqa: E402
from cssvars.cli.inspect import inspect  # noqa: E402
from cssvars.cli.watch import watch  # noqa: E402

cli.add_command(generate)
cli.add_command(watch)
cli.add_command(inspect)
