"""
bfpp Runtime Engine

This module provides the core runtime for executing tape programs:
- Interpreter: Session object with whole-program and incremental evaluation
- Executor: Instruction dispatch loop
- resolve_brackets: Loop boundary resolution
- State: Tape and code buffer management
- Errors: Structured syntax, capacity and step-limit failures
"""

from bfpp.runtime.errors import (
    BFError,
    BracketError,
    BracketErrorKind,
    CapacityError,
    StepLimitExceeded,
)
from bfpp.runtime.brackets import resolve_brackets, check_brackets
from bfpp.runtime.state import TapeState, CodeBuffer
from bfpp.runtime.executor import Executor, ExecutionConfig, ExecutionResult, EofPolicy
from bfpp.runtime.interpreter import Interpreter, EvalOutcome

__all__ = [
    "BFError",
    "BracketError",
    "BracketErrorKind",
    "CapacityError",
    "StepLimitExceeded",
    "resolve_brackets",
    "check_brackets",
    "TapeState",
    "CodeBuffer",
    "Executor",
    "ExecutionConfig",
    "ExecutionResult",
    "EofPolicy",
    "Interpreter",
    "EvalOutcome",
]
