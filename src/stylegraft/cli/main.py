"""stylegraft CLI entry point: Click group with subcommands."""

import logging

import click

from stylegraft import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylegraft")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """stylegraft - compile nested rule data into CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from stylegraft.cli.compile import compile_cmd  # noqa: E402
from stylegraft.cli.convert import convert  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(convert)
