"""Interactive shell for bfpp CLI."""

import sys

import click

from bfpp.cli.options import execution_options, build_config
from bfpp.runtime.interpreter import Interpreter, EvalOutcome

BANNER = "BrainFuck++ Interactive Shell\nType 'exit' to quit\n"
PRIMARY_PROMPT = ">>> "
CONTINUATION_PROMPT = "... "


def run_shell(interpreter: Interpreter, stdin, quiet: bool = False) -> None:
    """
    Read fragments from stdin line by line until 'exit' or end of input.

    Lines are read from the same binary stream the program's input
    instruction reads from, so buffered lines and program input stay in order.
    """
    if not quiet:
        click.echo(BANNER)

    while True:
        prompt = CONTINUATION_PROMPT if interpreter.open_loops else PRIMARY_PROMPT
        click.echo(prompt, nl=False)

        try:
            raw = stdin.readline()
            if not raw:
                click.echo()
                break

            line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            if line.strip() == "exit" and not interpreter.open_loops:
                break

            outcome = interpreter.eval_fragment(line)
        except KeyboardInterrupt:
            interpreter.discard()
            click.echo("\nKeyboardInterrupt", err=True)
            continue

        if outcome is EvalOutcome.EXECUTED:
            click.echo()
        elif outcome is EvalOutcome.ERROR:
            print(f"Error: {interpreter.last_error.message}", file=sys.stderr)


@click.command()
@click.option('--quiet', '-q', is_flag=True, help='Do not print the banner')
@execution_options
def repl_command(quiet, tape_length, eof_policy, max_steps):
    """Start the interactive shell."""
    stdin = click.get_binary_stream('stdin')
    interpreter = Interpreter(
        config=build_config(tape_length, eof_policy, max_steps),
        input_stream=stdin,
        output_stream=click.get_binary_stream('stdout'),
    )
    run_shell(interpreter, stdin, quiet=quiet)
