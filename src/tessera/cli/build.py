"""CLI command: tessera build -- import style modules and emit their CSS."""

from __future__ import annotations

import importlib
import sys

import click

from tessera.publish import FilePublisher
from tessera.session import get_session


@click.command()
@click.argument("modules", nargs=-1, required=True)
@click.option(
    "--out",
    "out_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the stylesheet here instead of stdout",
)
@click.option(
    "--path",
    "search_paths",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory to put on the import path (repeatable)",
)
def build(modules: tuple[str, ...], out_file: str | None, search_paths: tuple[str, ...]) -> None:
    """Import MODULES and write the CSS their rules registered.

    Modules register rules as a side effect of calling ``cx``/``dcx`` or
    resolving ``tw`` chains at import time.
    """
    for path in reversed(search_paths):
        if path not in sys.path:
            sys.path.insert(0, path)

    session = get_session()

    for name in modules:
        try:
            importlib.import_module(name)
        except ImportError as exc:
            click.echo(f"Import error: {name}: {exc}", err=True)
            sys.exit(1)

    if out_file is None:
        click.echo(session.generate_css())
        return

    publisher = FilePublisher(out_file, session=session)
    try:
        publisher.flush()
    finally:
        publisher.close()
    click.echo(f"Wrote {len(session.entries())} rule(s) to {out_file}")
