"""CLI command: stylegraft convert -- convert a quantity to another unit."""

from __future__ import annotations

import sys

import click

from stylegraft.errors import StylegraftError
from stylegraft.units import convert as convert_quantity
from stylegraft.units import lookup_unit, parse_quantity


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("unit")
def convert(value: str, unit: str) -> None:
    """Convert VALUE (e.g. 96px) to UNIT (e.g. in).

    Negative values such as -3px are accepted as-is.
    """
    target = lookup_unit(unit)
    if target is None:
        click.echo(f"Error: unknown unit {unit!r}", err=True)
        sys.exit(1)

    try:
        result = convert_quantity(parse_quantity(value), target)
    except StylegraftError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(str(result))
