"""
bfpp - BrainFuck++ interpreter

A byte-tape interpreter with one-shot program execution and an incremental
evaluation protocol for interactive shells.

Exports:
- Interpreter: Interpreter session (run / eval_fragment)
- ExecutionConfig: Tape length, code capacity, EOF policy, step budget
- EvalOutcome: Result of submitting one fragment
"""

from bfpp.runtime import (
    Interpreter,
    ExecutionConfig,
    ExecutionResult,
    EvalOutcome,
    EofPolicy,
    BFError,
    BracketError,
    CapacityError,
    StepLimitExceeded,
)
from bfpp.loader import sanitize, strip_comments, load_program

__version__ = "1.0.0"

__all__ = [
    "Interpreter",
    "ExecutionConfig",
    "ExecutionResult",
    "EvalOutcome",
    "EofPolicy",
    "BFError",
    "BracketError",
    "CapacityError",
    "StepLimitExceeded",
    "sanitize",
    "strip_comments",
    "load_program",
]
