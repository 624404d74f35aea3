"""Health check endpoint."""

from fastapi import APIRouter
import io
import logging

from bfpp import __version__
from bfpp.runtime.errors import BFError
from bfpp.runtime.executor import ExecutionConfig
from bfpp.runtime.interpreter import Interpreter

router = APIRouter()

logger = logging.getLogger(__name__)


def runtime_ready() -> bool:
    """Run a two-instruction program on a one-cell tape and check its output."""
    stdout = io.BytesIO()
    interpreter = Interpreter(
        config=ExecutionConfig(tape_length=1, max_steps=10),
        input_stream=io.BytesIO(),
        output_stream=stdout,
    )
    try:
        interpreter.run("+.")
    except BFError as e:
        logger.warning("Runtime readiness check failed: %s", e.message)
        return False
    return stdout.getvalue() == b"\x01"


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "bfpp-api"
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness check endpoint."""
    runtime = runtime_ready()
    return {
        "ready": runtime,
        "checks": {
            "runtime": runtime,
        }
    }
