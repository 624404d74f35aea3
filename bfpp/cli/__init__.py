"""bfpp CLI Package - Modular command structure"""

import logging

import click

from bfpp import __version__
from bfpp.cli.run import run_command
from bfpp.cli.repl import repl_command
from bfpp.cli.check import check_command


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', is_flag=True, help='Log interpreter events to stderr')
@click.pass_context
def main(ctx, verbose):
    """BrainFuck++ interpreter. With no command, starts the interactive shell."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(repl_command)


@main.command("version")
def version_command():
    """Show version info."""
    click.echo(f"bfpp {__version__}")


main.add_command(run_command, "run")
main.add_command(repl_command, "repl")
main.add_command(check_command, "check")

__all__ = [
    "main",
    "run_command",
    "repl_command",
    "check_command",
    "version_command",
]
