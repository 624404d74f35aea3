"""Run endpoint for program execution."""

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Optional
import io
import time

from bfpp.loader import sanitize
from bfpp.runtime.errors import BFError
from bfpp.runtime.executor import ExecutionConfig, EofPolicy
from bfpp.runtime.interpreter import Interpreter
from bfpp.runtime.state import DEFAULT_TAPE_LENGTH

router = APIRouter()

DEFAULT_MAX_STEPS = 10_000_000


class RunRequest(BaseModel):
    """Request body for program execution."""
    code: str
    input: str = ""
    tape_length: int = Field(default=DEFAULT_TAPE_LENGTH, gt=0, le=1_000_000)
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, gt=0, le=DEFAULT_MAX_STEPS)
    eof_policy: EofPolicy = EofPolicy.ZERO


class RunResponse(BaseModel):
    """Response body for program execution."""
    success: bool
    output: str = ""
    output_bytes: int = 0
    steps: int = 0
    pointer: int = 0
    execution_time_ms: float
    error: Optional[str] = None


@router.post("/run", response_model=RunResponse)
def run_program(request: RunRequest):
    """Run a program with the given input; output bytes are returned as latin-1 text."""
    start_time = time.time()

    config = ExecutionConfig(
        tape_length=request.tape_length,
        eof_policy=request.eof_policy,
        max_steps=request.max_steps,
    )
    stdout = io.BytesIO()
    interpreter = Interpreter(
        config=config,
        input_stream=io.BytesIO(request.input.encode("utf-8")),
        output_stream=stdout,
    )

    try:
        result = interpreter.run(sanitize(request.code))
    except BFError as e:
        output = stdout.getvalue()
        return RunResponse(
            success=False,
            output=output.decode("latin-1"),
            output_bytes=len(output),
            pointer=interpreter.tape.pointer,
            execution_time_ms=(time.time() - start_time) * 1000,
            error=e.message,
        )

    return RunResponse(
        success=True,
        output=stdout.getvalue().decode("latin-1"),
        output_bytes=result.output_bytes,
        steps=result.steps,
        pointer=result.pointer,
        execution_time_ms=(time.time() - start_time) * 1000,
    )
