"""CLI command: stylegraft compile -- render a JSON rule file to CSS."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylegraft.api import css
from stylegraft.config import CompilerFlags
from stylegraft.errors import StylegraftError


@click.command(name="compile")
@click.argument("rulesfile", type=click.Path(exists=True))
@click.option("--pretty", is_flag=True, help="Pretty-print the output")
@click.option("-o", "--output", default=None, help="Write the CSS to this file")
@click.option("--vendor", "vendors", multiple=True, help="Vendor prefix (repeatable)")
@click.option(
    "--auto-prefix",
    "auto_prefix",
    multiple=True,
    help="Property to emit with vendor prefixes (repeatable)",
)
def compile_cmd(
    rulesfile: str,
    pretty: bool,
    output: str | None,
    vendors: tuple[str, ...],
    auto_prefix: tuple[str, ...],
) -> None:
    """Compile a JSON file holding a list of rules into CSS.

    Each rule is a JSON array: leading strings are selectors, objects are
    declarations and nested arrays are child rules.
    """
    path = Path(rulesfile)

    try:
        rules = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not isinstance(rules, list):
        click.echo("Parse error: top level must be a list of rules", err=True)
        sys.exit(1)

    flags = CompilerFlags(
        pretty_print=pretty,
        vendors=vendors,
        auto_prefix=frozenset(auto_prefix),
        output_to=output,
    )
    try:
        text = css(flags, *rules)
    except StylegraftError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"Wrote {output}")
    else:
        click.echo(text)
