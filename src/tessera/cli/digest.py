"""CLI command: tessera hash -- show the class name a rule would receive."""

from __future__ import annotations

import sys

import click

from tessera.hashing import generate_hash
from tessera.model.rule import create_rule
from tessera.registry import render_rule


def _parse_declarations(pairs: tuple[str, ...]) -> dict[str, str]:
    declarations: dict[str, str] = {}
    for pair in pairs:
        prop, sep, value = pair.partition(":")
        if not sep or not prop.strip() or not value.strip():
            raise click.BadParameter(f"expected PROPERTY:VALUE, got {pair!r}")
        declarations[prop.strip()] = value.strip()
    return declarations


@click.command("hash")
@click.argument("declarations", nargs=-1, required=True)
@click.option("--layer", default=0, type=int, help="Cascade layer to hash at")
@click.option("--prefix", default="tc", help="Class name prefix")
@click.option("--css/--no-css", "show_css", default=False, help="Also print the rendered rule")
def digest(declarations: tuple[str, ...], layer: int, prefix: str, show_css: bool) -> None:
    """Print the class name for a rule built from PROPERTY:VALUE pairs."""
    try:
        parsed = _parse_declarations(declarations)
    except click.BadParameter as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    rule = create_rule(parsed)
    class_name = generate_hash(rule, layer, prefix=prefix)
    click.echo(class_name)
    if show_css:
        click.echo()
        click.echo(render_rule(class_name, rule))
