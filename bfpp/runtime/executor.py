"""
bfpp Program Executor

Runs a bracket-resolved instruction buffer against a tape.

Key classes:
- EofPolicy: What the input instruction stores at end of input
- ExecutionConfig: Configuration for execution
- ExecutionResult: Result of one run
- Executor: Instruction dispatch loop
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, BinaryIO
from enum import Enum
import logging
import sys
import time

from bfpp.runtime.errors import StepLimitExceeded
from bfpp.runtime.state import TapeState, DEFAULT_TAPE_LENGTH, DEFAULT_MAX_CODE_LENGTH

logger = logging.getLogger(__name__)

INSTRUCTIONS = "><+-.,[]"


class EofPolicy(Enum):
    ZERO = "zero"
    MAX = "max"
    UNCHANGED = "unchanged"


@dataclass
class ExecutionConfig:
    """Configuration for program execution."""
    tape_length: int = DEFAULT_TAPE_LENGTH
    max_code_length: int = DEFAULT_MAX_CODE_LENGTH
    eof_policy: EofPolicy = EofPolicy.ZERO
    max_steps: Optional[int] = None


@dataclass
class ExecutionResult:
    """Result of one run."""
    success: bool
    steps: int = 0
    output_bytes: int = 0
    pointer: int = 0
    errors: List[str] = field(default_factory=list)
    execution_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "steps": self.steps,
            "output_bytes": self.output_bytes,
            "pointer": self.pointer,
            "errors": self.errors,
            "execution_time_ms": self.execution_time_ms,
        }


class Executor:
    """
    Instruction dispatch loop.

    Starts at instruction 0 and stops when the instruction pointer falls off
    the end of the code. Loop instructions jump through the precomputed
    bracket map; the jump lands on the partner and the usual post-advance
    moves past it. Any character outside the instruction set is skipped.

    Output is flushed after every byte. Input blocks until a byte or end of
    input is available.
    """

    def __init__(self,
                 tape: TapeState,
                 config: ExecutionConfig = None,
                 input_stream: Optional[BinaryIO] = None,
                 output_stream: Optional[BinaryIO] = None):
        self.tape = tape
        self.config = config or ExecutionConfig()
        self.input_stream = input_stream
        self.output_stream = output_stream

    def _streams(self):
        stdin = self.input_stream if self.input_stream is not None else sys.stdin.buffer
        stdout = self.output_stream if self.output_stream is not None else sys.stdout.buffer
        return stdin, stdout

    def _read_byte(self, stdin: BinaryIO) -> None:
        data = stdin.read(1)
        if data:
            self.tape.current = data[0]
            return

        policy = self.config.eof_policy
        if policy is EofPolicy.ZERO:
            self.tape.current = 0
        elif policy is EofPolicy.MAX:
            self.tape.current = 255

    def execute(self, code: str, brackets: Dict[int, int]) -> ExecutionResult:
        """
        Execute code to completion.

        Args:
            code: Instruction buffer
            brackets: Bracket map for code (from resolve_brackets)

        Returns:
            ExecutionResult with step and output counts

        Raises:
            StepLimitExceeded: If config.max_steps is set and exhausted
        """
        start = time.time()
        stdin, stdout = self._streams()
        tape = self.tape
        max_steps = self.config.max_steps

        result = ExecutionResult(success=False)
        ip = 0
        end = len(code)
        steps = 0

        while ip < end:
            command = code[ip]

            if command not in INSTRUCTIONS:
                ip += 1
                continue

            if max_steps is not None and steps >= max_steps:
                raise StepLimitExceeded(max_steps)
            steps += 1

            if command == ">":
                tape.move_right()
            elif command == "<":
                tape.move_left()
            elif command == "+":
                tape.increment()
            elif command == "-":
                tape.decrement()
            elif command == ".":
                stdout.write(bytes((tape.current,)))
                stdout.flush()
                result.output_bytes += 1
            elif command == ",":
                self._read_byte(stdin)
            elif command == "[":
                if tape.current == 0:
                    ip = brackets[ip]
            elif command == "]":
                if tape.current != 0:
                    ip = brackets[ip]

            ip += 1

        result.steps = steps
        result.pointer = tape.pointer
        result.success = True
        result.execution_time_ms = (time.time() - start) * 1000

        logger.debug("Executed %d steps, %d bytes output", steps, result.output_bytes)
        return result
