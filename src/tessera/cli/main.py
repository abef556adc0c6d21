"""Tessera CLI entry point: Click group with subcommands."""

import click

from tessera import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tessera")
def cli() -> None:
    """Tessera - atomic CSS generation from Python style rules."""


# Import and register subcommands
from tessera.cli.build import build  # noqa: E402
from tessera.cli.digest import digest  # noqa: E402

cli.add_command(build)
cli.add_command(digest)
