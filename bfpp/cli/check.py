"""Check command for bfpp CLI - bracket validation without running."""

import json
import sys

import click

from bfpp.loader import load_program
from bfpp.runtime.brackets import check_brackets
from bfpp.runtime.errors import BFError
from bfpp.runtime.state import DEFAULT_MAX_CODE_LENGTH


@click.command()
@click.argument('program', type=click.Path(exists=True, dir_okay=False))
@click.option('--json-output', '--json', '-j', 'json_output', is_flag=True, help='Output as JSON')
def check_command(program, json_output):
    """Check that every loop in PROGRAM is closed."""
    try:
        source = load_program(program, DEFAULT_MAX_CODE_LENGTH)
    except (BFError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    error = check_brackets(source)
    output = {
        "valid": error is None,
        "program": program,
        "instruction_count": len(source),
        "loop_count": source.count("["),
        "errors": [error.to_dict()] if error else [],
    }

    if error is not None:
        print(json.dumps(output, indent=2), file=sys.stderr)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(output, indent=2))
    else:
        click.echo("✓ Program valid")
        click.echo(f"  Instructions: {output['instruction_count']}")
        click.echo(f"  Loops: {output['loop_count']}")
