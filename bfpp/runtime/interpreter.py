"""
bfpp Interpreter

Session object tying the tape, code buffer and executor together. Supports
two execution modes:
- run(): one complete program, resolved once and executed
- eval_fragment(): incremental evaluation for an interactive shell, deferring
  execution until every loop-open seen so far has been closed

Tape contents and the tape pointer persist across runs for the lifetime of
the interpreter.

Key classes:
- EvalOutcome: Result of submitting one fragment
- Interpreter: Main interpreter session
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, BinaryIO
import logging

from bfpp.loader import strip_comments, sanitize
from bfpp.runtime.brackets import resolve_brackets, LOOP_OPEN, LOOP_CLOSE
from bfpp.runtime.errors import BFError, BracketError, BracketErrorKind, CapacityError
from bfpp.runtime.executor import Executor, ExecutionConfig, ExecutionResult
from bfpp.runtime.state import TapeState, CodeBuffer

logger = logging.getLogger(__name__)


class EvalOutcome(Enum):
    IGNORED = "ignored"
    BUFFERED = "buffered"
    EXECUTED = "executed"
    ERROR = "error"


class Interpreter:
    """
    Interpreter session.

    One instance lives for a whole one-shot run or interactive session. The
    bracket map is rebuilt from the full code buffer before every run.
    """

    def __init__(self,
                 config: ExecutionConfig = None,
                 input_stream: Optional[BinaryIO] = None,
                 output_stream: Optional[BinaryIO] = None):
        self.config = config or ExecutionConfig()
        self.tape = TapeState(length=self.config.tape_length)
        self.code = CodeBuffer(max_length=self.config.max_code_length)
        self.executor = Executor(self.tape, self.config, input_stream, output_stream)
        self.loop_stack: List[int] = []
        self.last_error: Optional[BFError] = None
        self.last_result: Optional[ExecutionResult] = None

    @property
    def open_loops(self) -> int:
        """Number of loop-opens submitted incrementally and not yet closed."""
        return len(self.loop_stack)

    def run(self, program: str) -> ExecutionResult:
        """
        Execute a complete program.

        Args:
            program: Instruction characters (already sanitised by the caller).
                Any pending incremental fragments and open loops are discarded.

        Returns:
            ExecutionResult of the run

        Raises:
            CapacityError: If the program exceeds max_code_length
            BracketError: If brackets do not match; nothing is executed
            StepLimitExceeded: If config.max_steps is exhausted
        """
        self.code.load(program)
        try:
            return self._run_buffer()
        finally:
            self.discard()

    def eval_fragment(self, line: str) -> EvalOutcome:
        """
        Submit one fragment (one line of input, no trailing newline).

        Returns:
            IGNORED for blank or comment-only fragments, BUFFERED while loops
            remain open, EXECUTED once the accumulated buffer has run, ERROR on
            an unmatched loop-close or capacity overflow. On ERROR the buffer
            and open-loop stack are discarded and last_error is set; tape
            state from earlier runs is untouched.

        Only instruction characters are buffered, so max_code_length and
        error positions both count instructions.
        """
        stripped = strip_comments(line)
        if not stripped.strip():
            return EvalOutcome.IGNORED

        fragment = sanitize(stripped)

        base = len(self.code)
        pending = list(self.loop_stack)
        for index, char in enumerate(fragment):
            if char == LOOP_OPEN:
                pending.append(base + index)
            elif char == LOOP_CLOSE:
                if not pending:
                    return self._fail(BracketError(BracketErrorKind.UNMATCHED_CLOSE, base + index))
                pending.pop()

        try:
            self.code.append(fragment)
        except CapacityError as e:
            return self._fail(e)
        self.loop_stack = pending

        if self.loop_stack:
            logger.debug("Buffered fragment, %d loop(s) open", self.open_loops)
            return EvalOutcome.BUFFERED

        try:
            self._run_buffer()
        except BFError as e:
            return self._fail(e)
        finally:
            self.discard()
        return EvalOutcome.EXECUTED

    def discard(self) -> None:
        """Drop buffered code and forget open loops."""
        self.code.clear()
        self.loop_stack.clear()

    def reset(self) -> None:
        """Return the session to its initial state, tape included."""
        self.discard()
        self.tape.reset()
        self.last_error = None
        self.last_result = None

    def _run_buffer(self) -> ExecutionResult:
        code = self.code.getvalue()
        brackets = resolve_brackets(code)
        logger.debug("Running %d characters from pointer %d", len(code), self.tape.pointer)
        self.last_result = self.executor.execute(code, brackets)
        self.last_error = None
        return self.last_result

    def _fail(self, error: BFError) -> EvalOutcome:
        logger.debug("Fragment rejected: %s", error.message)
        self.last_error = error
        self.discard()
        return EvalOutcome.ERROR
