"""Shared execution options for bfpp CLI commands."""

import click

from bfpp.runtime.executor import ExecutionConfig, EofPolicy
from bfpp.runtime.state import DEFAULT_TAPE_LENGTH


def execution_options(func):
    """Attach --tape-length, --eof and --max-steps to a command."""
    func = click.option(
        '--max-steps', type=click.IntRange(min=1), default=None,
        help='Abort after this many instructions (default: unbounded)',
    )(func)
    func = click.option(
        '--eof', 'eof_policy', type=click.Choice([p.value for p in EofPolicy]),
        default=EofPolicy.ZERO.value, show_default=True,
        help='Value stored by "," at end of input',
    )(func)
    func = click.option(
        '--tape-length', type=click.IntRange(min=1), default=DEFAULT_TAPE_LENGTH,
        show_default=True, help='Number of tape cells',
    )(func)
    return func


def build_config(tape_length: int, eof_policy: str, max_steps=None) -> ExecutionConfig:
    return ExecutionConfig(
        tape_length=tape_length,
        eof_policy=EofPolicy(eof_policy),
        max_steps=max_steps,
    )
