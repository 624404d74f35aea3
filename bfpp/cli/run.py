"""Run command for bfpp CLI."""

import json
import sys

import click

from bfpp.cli.options import execution_options, build_config
from bfpp.loader import load_program, sanitize
from bfpp.runtime.errors import BFError
from bfpp.runtime.interpreter import Interpreter


@click.command()
@click.argument('program', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('--eval', '-e', 'code', help='Program text to run instead of a file')
@click.option('--stats', is_flag=True, help='Print run statistics as JSON to stderr')
@execution_options
def run_command(program, code, stats, tape_length, eof_policy, max_steps):
    """Run a program from PROGRAM or from --eval text."""
    if (program is None) == (code is None):
        raise click.UsageError("Give exactly one of PROGRAM or --eval")

    config = build_config(tape_length, eof_policy, max_steps)

    try:
        if program is not None:
            source = load_program(program, config.max_code_length)
        else:
            source = sanitize(code)

        interpreter = Interpreter(
            config=config,
            input_stream=click.get_binary_stream('stdin'),
            output_stream=click.get_binary_stream('stdout'),
        )
        result = interpreter.run(source)

    except BFError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot open file '{program}': {e}", file=sys.stderr)
        sys.exit(1)

    if stats:
        print(json.dumps(result.to_dict(), indent=2), file=sys.stderr)
